from __future__ import annotations

import logging

from fastapi import APIRouter, Request

import config
from bank import reload_bank

logger = logging.getLogger("percent-drills.admin")

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/reload")
def reload_fractions(request: Request):
    expected = config.admin_token()
    provided = request.headers.get("x-admin-token")

    if not expected:
        return {"ok": False, "error": "ADMIN_TOKEN not configured on server."}
    if provided != expected:
        return {"ok": False, "error": "unauthorized"}

    n = reload_bank()
    logger.info("curated table reloaded by admin (%d fractions)", n)
    return {"ok": True, "count": n}
