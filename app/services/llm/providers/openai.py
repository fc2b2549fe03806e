from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import Any, Dict, List

from openai import AsyncOpenAI
from pydantic import ValidationError

from app.services.llm.types import (
    AIOutfitOut,
    LLMUsage,
    OccasionOutfitInput,
    OccasionOutfitOutput,
    RecommendOutfitsInput,
    RecommendOutfitsOutput,
    StyleAnalysisInput,
    StyleAnalysisOutput,
)
from app.services.llm.prompts import (
    build_occasion_prompt,
    build_recommend_prompt,
    build_style_prompt,
)

logger = logging.getLogger("uvicorn.error")


class OpenAIProvider:
    def __init__(self, model: str, max_tokens: int, temperature: float):
        self.client = AsyncOpenAI()
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature

    async def _chat(self, messages: List[Dict[str, Any]], timeout_ms: int) -> Dict[str, Any]:
        start = time.perf_counter()
        logger.info("llm:openai request model=%s timeout_ms=%s", self.model, timeout_ms)
        try:
            resp = await asyncio.wait_for(
                self.client.chat.completions.create(
                    model=self.model,
                    messages=messages,
                    max_tokens=self.max_tokens,
                    temperature=self.temperature,
                    response_format={"type": "json_object"},
                ),
                timeout=timeout_ms / 1000.0,
            )
        except asyncio.TimeoutError:
            logger.warning("llm:openai timeout model=%s timeout_ms=%s", self.model, timeout_ms)
            raise
        latency_ms = int((time.perf_counter() - start) * 1000)
        choice = resp.choices[0].message.content if resp.choices else "{}"
        return {
            "content": choice or "{}",
            "latency_ms": latency_ms,
            "tokens_in": getattr(resp.usage, "prompt_tokens", 0) if resp.usage else 0,
            "tokens_out": getattr(resp.usage, "completion_tokens", 0) if resp.usage else 0,
        }

    def _usage(self, res: Dict[str, Any], prompt_version: str) -> LLMUsage:
        return LLMUsage(
            model=self.model,
            tokens_in=res["tokens_in"],
            tokens_out=res["tokens_out"],
            latency_ms=res["latency_ms"],
            prompt_version=prompt_version,
        )

    async def recommend_outfits(self, payload: RecommendOutfitsInput, *, timeout_ms: int) -> RecommendOutfitsOutput:
        res = await self._chat(build_recommend_prompt(payload), timeout_ms)
        return RecommendOutfitsOutput(
            outfits=_safe_parse_outfits(res["content"]),
            usage=self._usage(res, payload.prompt_version),
        )

    async def occasion_outfit(self, payload: OccasionOutfitInput, *, timeout_ms: int) -> OccasionOutfitOutput:
        res = await self._chat(build_occasion_prompt(payload), timeout_ms)
        out = _safe_parse_model(res["content"], OccasionOutfitOutput) or OccasionOutfitOutput()
        out.usage = self._usage(res, payload.prompt_version)
        return out

    async def analyze_style(self, payload: StyleAnalysisInput, *, timeout_ms: int) -> StyleAnalysisOutput:
        res = await self._chat(build_style_prompt(payload), timeout_ms)
        out = _safe_parse_model(res["content"], StyleAnalysisOutput) or StyleAnalysisOutput()
        out.usage = self._usage(res, payload.prompt_version)
        return out


def _load(raw: str) -> Dict[str, Any] | None:
    try:
        data = json.loads(raw)
    except ValueError:
        logger.warning("llm:openai unparseable response chars=%d", len(raw or ""))
        return None
    return data if isinstance(data, dict) else None


def _clamp_score(value: Any) -> int | None:
    try:
        return max(1, min(100, int(value)))
    except (TypeError, ValueError):
        return None


def _safe_parse_outfits(raw: str) -> List[AIOutfitOut]:
    data = _load(raw)
    if data is None:
        return []
    out = []
    for entry in data.get("outfits", []) or []:
        if not isinstance(entry, dict):
            continue
        entry = dict(entry)
        entry["confidence_score"] = _clamp_score(entry.get("confidence_score"))
        try:
            out.append(AIOutfitOut.model_validate(entry))
        except ValidationError:
            continue
    return out


def _safe_parse_model(raw: str, model):
    data = _load(raw)
    if data is None:
        return None
    data.pop("usage", None)
    try:
        return model.model_validate(data)
    except ValidationError:
        logger.warning("llm:openai response failed validation model=%s", model.__name__)
        return None
