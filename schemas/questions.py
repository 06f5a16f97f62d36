# percent-drills/schemas/questions.py
from typing import List, Optional

from pydantic import BaseModel, Field


class QuestionOut(BaseModel):
    fraction: str
    percent: str
    options: List[str]


class FractionOut(BaseModel):
    fraction: str
    percent: str


class GenerateRequest(BaseModel):
    count: int = Field(default=10, ge=1, le=50)
    seed: Optional[int] = None


class BatchOut(BaseModel):
    ok: bool
    source: str  # "curated" | "external" | "local"
    count: int
    # true when the external source failed and pairs were synthesized locally
    fallback: bool = False
    questions: List[QuestionOut]
