from __future__ import annotations

from itertools import count
from typing import List

from percent import percent_parts, percent_string

N_DISTRACTORS = 3


def top_up(options: List[str], correct: str, whole: int, want: int = N_DISTRACTORS) -> List[str]:
    """
    Pad options with exact whole percents around `whole` until `want` exist.

    Offsets alternate +1, -1, +2, -2, ... and are clamped to >= 1, so the
    sequence is deterministic and always terminates on the positive side.
    """
    out = list(options)
    seen = set(out)
    seen.add(correct)
    for k in count(1):
        if len(out) >= want:
            break
        for step in (k, -k):
            if len(out) >= want:
                break
            cand = percent_string(max(1, whole + step), 0, 1)
            if cand in seen:
                continue
            seen.add(cand)
            out.append(cand)
    return out


def generate_distractors(numerator: int, denominator: int, correct_percent: str) -> List[str]:
    whole, rem, den = percent_parts(numerator, denominator)

    # dict keeps insertion order and drops exact-text duplicates
    candidates: dict[str, None] = {}

    def add(w: int, n: int, d: int) -> None:
        candidates[percent_string(w, n, d)] = None

    # 1. Same denominator, neighbouring numerators (hardest to spot)
    if den > 1:
        add(whole, max(1, rem - 1), den)
        add(whole, rem + 1, den)
        # complement, e.g. 53 11/13 -> 53 2/13
        if rem != den - rem:
            add(whole, den - rem, den)

    # 2. Same fractional part, neighbouring whole numbers
    add(max(0, whole - 1), rem, den)
    add(whole + 1, rem, den)

    # 3. Nearby round numbers
    add(whole + 2, 0, 1)
    add(max(1, whole - 2), 0, 1)

    options = [c for c in candidates if c != correct_percent][:N_DISTRACTORS]
    if len(options) < N_DISTRACTORS:
        options = top_up(options, correct_percent, whole)
    return options
