# percent-drills/percent.py
from __future__ import annotations

import math
import re
from typing import Optional, Tuple

# \frac{7}{13} as produced by fraction_notation() and stored in the curated bank
_FRACTION_RE = re.compile(r"\\frac\{\s*(\d+)\s*\}\{\s*(\d+)\s*\}")
_WHOLE_RE = re.compile(r"^\s*(\d+)")
_PERCENT_RE = re.compile(r"(\d+)(?:\\frac\{(\d+)\}\{(\d+)\})?\\%")


def percent_parts(numerator: int, denominator: int) -> Tuple[int, int, int]:
    """
    Exact split of numerator/denominator * 100 into (whole, rem, den) where
    rem/den is the reduced fractional part. Exact results give (whole, 0, 1).
    """
    if denominator < 1:
        raise ValueError("denominator must be >= 1")
    if numerator < 0:
        raise ValueError("numerator must be >= 0")

    total = numerator * 100
    whole, remainder = divmod(total, denominator)
    if remainder == 0:
        return whole, 0, 1

    g = math.gcd(remainder, denominator)
    return whole, remainder // g, denominator // g


def percent_string(whole: int, numerator: int, denominator: int) -> str:
    # Normalise first: reduce, and carry improper parts into the whole.
    if denominator < 1 or numerator < 0:
        raise ValueError("invalid fractional part")
    carry, numerator = divmod(numerator, denominator)
    whole += carry
    if numerator == 0:
        return f"{whole}\\%"
    g = math.gcd(numerator, denominator)
    return f"{whole}\\frac{{{numerator // g}}}{{{denominator // g}}}\\%"


def format_percent(numerator: int, denominator: int) -> str:
    whole, rem, den = percent_parts(numerator, denominator)
    return percent_string(whole, rem, den)


def fraction_notation(numerator: int, denominator: int) -> str:
    return f"\\frac{{{numerator}}}{{{denominator}}}"


def parse_fraction_notation(text: str) -> Optional[Tuple[int, int]]:
    if not isinstance(text, str):
        return None
    m = _FRACTION_RE.fullmatch(text.strip())
    if not m:
        return None
    num, den = int(m.group(1)), int(m.group(2))
    if den == 0:
        return None
    return num, den


def parse_percent_whole(text: str) -> Optional[int]:
    """Leading whole number of a percent string ("53\\frac{11}{13}\\%" -> 53)."""
    if not isinstance(text, str):
        return None
    m = _WHOLE_RE.match(text)
    return int(m.group(1)) if m else None


def is_percent_string(text: str) -> bool:
    """Canonical form only: proper, reduced fractional part."""
    if not isinstance(text, str):
        return False
    m = _PERCENT_RE.fullmatch(text)
    if not m:
        return False
    if m.group(2) is None:
        return True
    r, q = int(m.group(2)), int(m.group(3))
    return 0 < r < q and math.gcd(r, q) == 1
