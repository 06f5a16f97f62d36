# percent-drills/assembler.py
from __future__ import annotations

import asyncio
import logging
import random as _rnd
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Sequence, Tuple

from bank import get_fractions
from distractors import N_DISTRACTORS, generate_distractors, top_up
from percent import format_percent, fraction_notation, parse_fraction_notation, parse_percent_whole
from shuffler import shuffle
from sources import PairSource

logger = logging.getLogger("percent-drills.assembler")

# Local synthesis ranges (inclusive)
FALLBACK_NUM_RANGE = (2, 6)
FALLBACK_DEN_RANGE = (11, 20)

Pair = Tuple[int, int]


def _as_int(v: Any) -> Optional[int]:
    if isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, float) and v.is_integer():
        return int(v)
    return None


def coerce_pair(raw: Any) -> Optional[Pair]:
    """
    Accept (num, den), [num, den] or a mapping with num/den or
    numerator/denominator keys. Returns None unless both are positive integers.
    """
    if isinstance(raw, Mapping):
        num = raw.get("num", raw.get("numerator"))
        den = raw.get("den", raw.get("denominator"))
    elif isinstance(raw, (list, tuple)) and len(raw) == 2:
        num, den = raw
    else:
        return None

    n, d = _as_int(num), _as_int(den)
    if n is None or d is None or n < 1 or d < 1:
        return None
    return n, d


class QuestionAssembler:
    """
    Builds batches of four-option fraction -> percent questions.

    Randomness comes only from `rng`, so a seeded Random reproduces a batch.
    The curated table is read, never modified; each call works on its own copy.
    """

    def __init__(
        self,
        rng: Optional[_rnd.Random] = None,
        pair_source: Optional[PairSource] = None,
        curated: Optional[Sequence[Dict[str, str]]] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.rng = rng or _rnd.Random()
        self.pair_source = pair_source
        self._curated = curated
        self.timeout = timeout
        self.last_fallback = False

    @property
    def curated(self) -> Sequence[Dict[str, str]]:
        return self._curated if self._curated is not None else get_fractions()

    # --- building blocks -----------------------------------------------------

    def build_question(self, numerator: int, denominator: int) -> Dict[str, Any]:
        percent = format_percent(numerator, denominator)
        distractors = generate_distractors(numerator, denominator, percent)
        return {
            "fraction": fraction_notation(numerator, denominator),
            "percent": percent,
            "options": shuffle([percent, *distractors], self.rng),
        }

    def synthesize_pair(self) -> Pair:
        return (
            self.rng.randint(*FALLBACK_NUM_RANGE),
            self.rng.randint(*FALLBACK_DEN_RANGE),
        )

    def _substitution_options(
        self, entry: Dict[str, str], table: Sequence[Dict[str, str]]
    ) -> List[str]:
        correct = entry["percent"]
        pool: List[str] = []
        for other in shuffle(table, self.rng):
            p = other.get("percent")
            if not p or other.get("fraction") == entry.get("fraction") or p == correct or p in pool:
                continue
            pool.append(p)
            if len(pool) == N_DISTRACTORS:
                break
        if len(pool) < N_DISTRACTORS:
            pool = top_up(pool, correct, parse_percent_whole(correct) or 0)
        return shuffle([correct, *pool], self.rng)

    # --- curated source ------------------------------------------------------

    def assemble_curated(self, count: int) -> List[Dict[str, Any]]:
        """
        Sample `count` entries from the curated table. Requests above the
        table size are clamped: every entry appears at most once per batch.
        """
        table = list(self.curated)
        picked = shuffle(table, self.rng)[: max(0, count)]
        if count > len(table):
            logger.info("curated batch clamped to %d (asked for %d)", len(table), count)

        batch: List[Dict[str, Any]] = []
        for entry in picked:
            parsed = parse_fraction_notation(entry.get("fraction", ""))
            options: Optional[List[str]] = None
            percent = entry["percent"]
            if parsed is not None:
                try:
                    expected = format_percent(*parsed)
                    if percent != expected:
                        logger.warning(
                            "curated percent %r does not match %r, using %r",
                            percent, entry.get("fraction"), expected,
                        )
                        percent = expected
                    distractors = generate_distractors(*parsed, percent)
                    options = shuffle([percent, *distractors], self.rng)
                except ValueError as e:
                    logger.warning("bad curated fraction %r: %s", entry.get("fraction"), e)
            else:
                logger.warning("unparseable curated fraction %r", entry.get("fraction"))

            if options is None:
                options = self._substitution_options(entry, table)

            batch.append(
                {"fraction": entry["fraction"], "percent": percent, "options": options}
            )
        return batch

    # --- external source -----------------------------------------------------

    async def _fetch_pairs(self, count: int) -> Optional[List[Any]]:
        if self.pair_source is None:
            return None
        try:
            call = self.pair_source.request_pairs(count)
            if self.timeout is not None:
                raw = await asyncio.wait_for(call, timeout=self.timeout)
            else:
                raw = await call
        except Exception as e:
            logger.warning("pair source failed, using local pairs: %s: %s", type(e).__name__, e)
            return None

        if not isinstance(raw, list) or not raw:
            logger.warning("pair source returned no usable list, using local pairs")
            return None
        return raw

    async def assemble_external(self, count: int) -> List[Dict[str, Any]]:
        """Always returns exactly `count` questions, whatever the source does."""
        count = max(0, count)
        raw = await self._fetch_pairs(count)
        self.last_fallback = raw is None

        taken = (raw or [])[:count]
        pairs: List[Pair] = []
        rejected = 0
        for item in taken:
            pair = coerce_pair(item)
            if pair is None:
                rejected += 1
                pair = self.synthesize_pair()
            pairs.append(pair)
        if rejected:
            logger.warning("replaced %d malformed pair(s) with local pairs", rejected)
        if taken and rejected == len(taken):
            # nothing usable came back; the batch is entirely local
            self.last_fallback = True

        while len(pairs) < count:
            pairs.append(self.synthesize_pair())

        return [self.build_question(n, d) for n, d in pairs]
