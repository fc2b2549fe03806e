from __future__ import annotations

from typing import Protocol

from app.services.llm.types import (
    LLMUsage,
    OccasionOutfitInput,
    OccasionOutfitOutput,
    RecommendOutfitsInput,
    RecommendOutfitsOutput,
    StyleAnalysisInput,
    StyleAnalysisOutput,
)


class LLMProvider(Protocol):
    async def recommend_outfits(self, payload: RecommendOutfitsInput, *, timeout_ms: int) -> RecommendOutfitsOutput:
        ...

    async def occasion_outfit(self, payload: OccasionOutfitInput, *, timeout_ms: int) -> OccasionOutfitOutput:
        ...

    async def analyze_style(self, payload: StyleAnalysisInput, *, timeout_ms: int) -> StyleAnalysisOutput:
        ...


class NullProvider:
    """Safety net provider used when LLM is disabled."""

    name = "disabled"

    def _usage(self, prompt_version: str) -> LLMUsage:
        return LLMUsage(model=self.name, prompt_version=prompt_version, cached=True)

    async def recommend_outfits(self, payload: RecommendOutfitsInput, *, timeout_ms: int) -> RecommendOutfitsOutput:
        return RecommendOutfitsOutput(outfits=[], usage=self._usage(payload.prompt_version))

    async def occasion_outfit(self, payload: OccasionOutfitInput, *, timeout_ms: int) -> OccasionOutfitOutput:
        return OccasionOutfitOutput(usage=self._usage(payload.prompt_version))

    async def analyze_style(self, payload: StyleAnalysisInput, *, timeout_ms: int) -> StyleAnalysisOutput:
        return StyleAnalysisOutput(usage=self._usage(payload.prompt_version))
