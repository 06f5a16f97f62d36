# percent-drills/bank.py

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Tuple

from pydantic import BaseModel, ValidationError, model_validator

from percent import format_percent, is_percent_string, parse_fraction_notation
from questions import FRACTION_DATA

logger = logging.getLogger("percent-drills.bank")

_BASE = Path(__file__).resolve().parent
_DATA_DIR = _BASE / "data" / "fractions"  # preferred sharded dir
_FALLBACK_JSON = _BASE / "fractions.json"  # single-file table


class FractionEntry(BaseModel):
    fraction: str
    percent: str

    @model_validator(mode="after")
    def _check_percent(self) -> "FractionEntry":
        if not is_percent_string(self.percent):
            raise ValueError(f"not a percent string: {self.percent!r}")
        # Unparseable fractions still load; the assembler substitutes for them.
        parsed = parse_fraction_notation(self.fraction)
        if parsed is not None and format_percent(*parsed) != self.percent:
            raise ValueError(f"{self.percent!r} is not the percent of {self.fraction!r}")
        return self


def _iter_jsonl(p: Path) -> Iterable[Dict[str, Any]]:
    with p.open("r", encoding="utf-8") as f:
        for idx, line in enumerate(f, 1):
            s = line.strip()
            if not s or s.startswith("#") or s.startswith("//"):
                continue
            try:
                yield json.loads(s)
            except json.JSONDecodeError:
                logger.warning("skipping malformed row %s:%d", p.name, idx)
                continue


def _iter_json(p: Path) -> Iterable[Dict[str, Any]]:
    with p.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError:
            logger.warning("ignoring unreadable table %s", p.name)
            data = []
    if isinstance(data, list):
        for obj in data:
            yield obj


def _load_rows(source: Iterable[Any]) -> list[Dict[str, str]]:
    rows = []
    for raw in source:
        try:
            rows.append(FractionEntry.model_validate(raw).model_dump())
        except ValidationError:
            continue
    return rows


class FractionBank:
    # replaced wholesale on reload, never mutated in place
    _fractions: Tuple[Dict[str, str], ...] = ()

    @classmethod
    def load(cls) -> Tuple[Dict[str, str], ...]:
        if not cls._fractions:
            cls.reload()
        return cls._fractions

    @classmethod
    def reload(cls) -> int:
        rows: list[Dict[str, str]] = []

        if _DATA_DIR.exists():
            for p in sorted(_DATA_DIR.rglob("*")):
                if not p.is_file():
                    continue
                suf = p.suffix.lower()
                if suf == ".jsonl":
                    rows.extend(_load_rows(_iter_jsonl(p)))
                elif suf == ".json":
                    rows.extend(_load_rows(_iter_json(p)))

        if not rows and _FALLBACK_JSON.exists():
            rows = _load_rows(_iter_json(_FALLBACK_JSON))

        if not rows:
            rows = _load_rows(FRACTION_DATA)

        cls._fractions = tuple(rows)
        logger.info("curated table loaded: %d fractions", len(rows))
        return len(cls._fractions)


# Public API
def get_fractions() -> Tuple[Dict[str, str], ...]:
    return FractionBank.load()


def reload_bank() -> int:
    return FractionBank.reload()
