from __future__ import annotations

import random as _rnd
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

import config
from assembler import QuestionAssembler
from bank import get_fractions
from schemas.questions import BatchOut, FractionOut, GenerateRequest
from sources import PairSource, get_pair_source

router = APIRouter(tags=["questions"])


def _rng(seed: Optional[int]) -> _rnd.Random:
    # seeded -> reproducible batch; unseeded -> fresh entropy per request
    return _rnd.Random(seed) if seed is not None else _rnd.Random()


@router.get("/questions", response_model=BatchOut)
def curated_questions(
    count: int = Query(default=25, ge=1, le=100),
    seed: Optional[int] = Query(default=None, description="Seed for a reproducible batch"),
):
    qs = QuestionAssembler(rng=_rng(seed)).assemble_curated(count)
    return {"ok": True, "source": "curated", "count": len(qs), "questions": qs}


@router.post("/questions/generate", response_model=BatchOut)
async def generated_questions(
    req: GenerateRequest,
    pair_source: Optional[PairSource] = Depends(get_pair_source),
):
    assembler = QuestionAssembler(
        rng=_rng(req.seed),
        pair_source=pair_source,
        timeout=config.pair_source_timeout(),
    )
    qs = await assembler.assemble_external(req.count)
    fallback = pair_source is not None and assembler.last_fallback
    return {
        "ok": True,
        "source": "external" if pair_source is not None and not fallback else "local",
        "count": len(qs),
        "fallback": fallback,
        "questions": qs,
    }


@router.get("/fractions", response_model=List[FractionOut])
def list_fractions():
    return list(get_fractions())
