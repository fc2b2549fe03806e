from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class LLMUsage(BaseModel):
    model: str = ""
    tokens_in: int = 0
    tokens_out: int = 0
    latency_ms: int = 0
    cached: bool = False
    cache_key: Optional[str] = None
    prompt_version: str = "p1"


class WardrobeItemBrief(BaseModel):
    id: str
    name: str
    category: str
    color: Optional[str] = None
    description: Optional[str] = None
    tags: List[str] = Field(default_factory=list)


class RecommendOutfitsInput(BaseModel):
    items: List[WardrobeItemBrief] = Field(default_factory=list)
    mood: Optional[str] = None
    weather: Optional[str] = None
    occasion: Optional[str] = None
    preferences: Dict[str, Any] = Field(default_factory=dict)
    prompt_version: str = "p1"


class AIOutfitOut(BaseModel):
    name: str = "Untitled outfit"
    item_ids: List[str] = Field(default_factory=list)
    styling_tip: Optional[str] = None
    reasoning: Optional[str] = None
    confidence_score: Optional[int] = None


class RecommendOutfitsOutput(BaseModel):
    outfits: List[AIOutfitOut] = Field(default_factory=list)
    usage: LLMUsage = Field(default_factory=LLMUsage)


class OccasionOutfitInput(BaseModel):
    occasion: str
    items: List[WardrobeItemBrief] = Field(default_factory=list)
    weather: Optional[Dict[str, Any]] = None
    preferences: Dict[str, Any] = Field(default_factory=dict)
    prompt_version: str = "p1"


class OccasionOutfitOutput(BaseModel):
    name: Optional[str] = None
    item_ids: List[str] = Field(default_factory=list)
    accessories: List[str] = Field(default_factory=list)
    styling_instructions: Optional[str] = None
    occasion_reasoning: Optional[str] = None
    usage: LLMUsage = Field(default_factory=LLMUsage)


class StyleAnalysisInput(BaseModel):
    items: List[WardrobeItemBrief] = Field(default_factory=list)
    prompt_version: str = "p1"


class StyleAnalysisOutput(BaseModel):
    style_profile: Optional[str] = None
    color_palette: List[str] = Field(default_factory=list)
    patterns: List[str] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)
    development_areas: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    usage: LLMUsage = Field(default_factory=LLMUsage)
