from __future__ import annotations

import os

# Read at call time so tests can monkeypatch the environment.


def gemini_api_key() -> str:
    return os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or ""


def gemini_model() -> str:
    return os.getenv("GEMINI_MODEL", "gemini-2.0-flash")


def gemini_base_url() -> str:
    return os.getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta")


def pair_source_timeout() -> float:
    try:
        return float(os.getenv("PAIR_SOURCE_TIMEOUT", "20"))
    except ValueError:
        return 20.0


def admin_token() -> str:
    return os.getenv("ADMIN_TOKEN") or ""


def cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS")
    if not raw:
        return [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",
        ]
    return [o.strip() for o in raw.split(",") if o.strip()]
