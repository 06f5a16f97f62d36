# percent-drills/routers/health.py
from fastapi import APIRouter

import config
from bank import get_fractions

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/bank")
def health_bank():
    n = len(get_fractions())
    return {"ok": n > 0, "count": n}


@router.get("/source")
def health_source():
    # Only reports configuration; never calls out to the source.
    configured = bool(config.gemini_api_key())
    return {
        "ok": True,
        "configured": configured,
        "model": config.gemini_model() if configured else None,
        "fallback": "local",
    }
