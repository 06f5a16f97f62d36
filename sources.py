from __future__ import annotations

import json
import logging
import re
from typing import Any, List, Optional, Protocol

import httpx

import config

logger = logging.getLogger("percent-drills.sources")

PROMPT_TEMPLATE = """Generate {count} distinct fraction problems for mental math practice.
Rules:
1. Denominators between 7 and 25 (e.g., 13, 17, 19, 23).
2. Numerators should be greater than 1 (no unit fractions like 1/13).
3. Return ONLY a JSON object {{"problems": [{{"num": <int>, "den": <int>}}, ...]}}."""

RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "problems": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "num": {"type": "INTEGER"},
                    "den": {"type": "INTEGER"},
                },
                "required": ["num", "den"],
            },
        }
    },
    "required": ["problems"],
}

_FENCE_RE = re.compile(r"^```[a-zA-Z0-9_-]*\s*|\s*```$")


class PairSourceError(RuntimeError):
    """The external content source could not deliver usable pairs."""


class PairSource(Protocol):
    async def request_pairs(self, count: int) -> List[Any]: ...


def _extract_problems(body: Any) -> List[Any]:
    """
    Pull the raw problem list out of a generateContent response:
    candidates[0].content.parts[0].text -> {"problems": [...]}.
    Individual items are returned unchecked.
    """
    try:
        text = body["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        raise PairSourceError("response has no candidate text")

    text = _FENCE_RE.sub("", text.strip())
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise PairSourceError(f"candidate text is not JSON: {e}")

    # Tolerate a bare array as well as the requested object shape
    if isinstance(data, dict):
        data = data.get("problems")
    if not isinstance(data, list):
        raise PairSourceError("invalid response structure")
    return data


class GeminiPairSource:
    """Asks Gemini for numerator/denominator pairs over its REST API."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.0-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not api_key:
            raise PairSourceError("missing GEMINI_API_KEY")
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def request_pairs(self, count: int) -> List[Any]:
        url = f"{self.base_url}/models/{self.model}:generateContent"
        payload = {
            "contents": [{"parts": [{"text": PROMPT_TEMPLATE.format(count=count)}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": RESPONSE_SCHEMA,
            },
        }
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                r = await client.post(
                    url,
                    params={"key": self.api_key},
                    json=payload,
                )
                r.raise_for_status()
            except httpx.HTTPError as e:
                raise PairSourceError(f"gemini request failed: {type(e).__name__}: {e}")

        try:
            body = r.json()
        except ValueError:
            raise PairSourceError("gemini returned a non-JSON body")

        problems = _extract_problems(body)
        logger.info("gemini returned %d raw pairs (asked for %d)", len(problems), count)
        return problems


def get_pair_source() -> Optional[PairSource]:
    """FastAPI dependency: configured external source, or None to synthesize locally."""
    key = config.gemini_api_key()
    if not key:
        return None
    return GeminiPairSource(
        api_key=key,
        model=config.gemini_model(),
        base_url=config.gemini_base_url(),
        timeout=config.pair_source_timeout(),
    )
