# percent-drills/schemas/convert.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class PercentRequest(BaseModel):
    numerator: int
    denominator: int


class PercentResponse(BaseModel):
    ok: bool
    fraction: Optional[str] = None
    percent: Optional[str] = None
    feedback: Optional[str] = None
