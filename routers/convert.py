from __future__ import annotations

from fastapi import APIRouter

from percent import format_percent, fraction_notation
from schemas.convert import PercentRequest, PercentResponse

router = APIRouter(tags=["convert"])

# Keep the arithmetic cheap and the strings renderable
_MAX_ABS = 10**9


@router.post("/percent", response_model=PercentResponse)
def convert(req: PercentRequest):
    if req.denominator < 1:
        return {"ok": False, "feedback": "Denominator must be at least 1."}
    if req.numerator < 0:
        return {"ok": False, "feedback": "Numerator must not be negative."}
    if req.numerator > _MAX_ABS or req.denominator > _MAX_ABS:
        return {"ok": False, "feedback": "Numbers are too large."}
    return {
        "ok": True,
        "fraction": fraction_notation(req.numerator, req.denominator),
        "percent": format_percent(req.numerator, req.denominator),
    }
