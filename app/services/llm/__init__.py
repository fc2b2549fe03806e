from __future__ import annotations

import hashlib
import json
from typing import Any, Dict

from app.core.cache import cache_json_get, cache_json_set
from app.core.config import settings
from app.services.llm.providers.base import LLMProvider, NullProvider
from app.services.llm.providers.openai import OpenAIProvider
from app.services.llm.prompts import PROMPT_VERSION
from app.services.llm.types import (
    OccasionOutfitInput,
    OccasionOutfitOutput,
    RecommendOutfitsInput,
    RecommendOutfitsOutput,
    StyleAnalysisInput,
    StyleAnalysisOutput,
)

_provider: LLMProvider | None = None


def _hash_blob(data: Dict[str, Any]) -> str:
    return hashlib.sha256(json.dumps(data, sort_keys=True, default=str).encode()).hexdigest()


def _get_provider() -> LLMProvider:
    global _provider
    if _provider:
        return _provider
    if not settings.LLM_ENABLED:
        _provider = NullProvider()
        return _provider
    name = (settings.LLM_PROVIDER or "openai").lower()
    if name == "openai":
        _provider = OpenAIProvider(settings.LLM_MODEL, settings.LLM_MAX_TOKENS, settings.LLM_TEMPERATURE)
    else:
        _provider = NullProvider()
    return _provider


async def _cached_call(kind: str, payload, out_model, call):
    payload.prompt_version = payload.prompt_version or PROMPT_VERSION
    if not settings.LLM_ENABLED:
        return await call(NullProvider())

    body = payload.model_dump(exclude={"prompt_version"})
    cache_key = f"llm:{kind}:{payload.prompt_version}:{settings.LLM_MODEL}:{_hash_blob(body)}"
    cached = await cache_json_get(cache_key)
    if cached:
        out = out_model.model_validate(cached)
        out.usage.cached = True
        out.usage.cache_key = cache_key
        return out

    out = await call(_get_provider())
    out.usage.cached = False
    out.usage.cache_key = cache_key
    await cache_json_set(cache_key, out.model_dump(), settings.LLM_CACHE_TTL_S)
    return out


async def recommend_outfits(payload: RecommendOutfitsInput) -> RecommendOutfitsOutput:
    return await _cached_call(
        "outfits",
        payload,
        RecommendOutfitsOutput,
        lambda p: p.recommend_outfits(payload, timeout_ms=settings.LLM_TIMEOUT_MS),
    )


async def occasion_outfit(payload: OccasionOutfitInput) -> OccasionOutfitOutput:
    return await _cached_call(
        "occasion",
        payload,
        OccasionOutfitOutput,
        lambda p: p.occasion_outfit(payload, timeout_ms=settings.LLM_TIMEOUT_MS),
    )


async def analyze_style(payload: StyleAnalysisInput) -> StyleAnalysisOutput:
    return await _cached_call(
        "style",
        payload,
        StyleAnalysisOutput,
        lambda p: p.analyze_style(payload, timeout_ms=settings.LLM_TIMEOUT_MS),
    )
