from pydantic import BaseModel, Field
from typing import Optional, List, Any, Dict

from app.schemas.items import ItemOut
from app.schemas.weather import WeatherIn


class OutfitRecommendIn(BaseModel):
    weather: Optional[WeatherIn] = None
    location: Optional[str] = None
    mood: Optional[str] = None
    seed: Optional[int] = None


class OutfitRecommendOut(BaseModel):
    category: str
    recommendation: str
    clothing_types: List[str]
    mood: Optional[str] = None
    weather: Optional[WeatherIn] = None
    items: List[ItemOut]


class AIOutfitRequest(BaseModel):
    mood: str = Field(..., min_length=1)
    weather: str = Field(..., min_length=1)
    occasion: Optional[str] = "everyday"


class AIOutfitRecommendation(BaseModel):
    name: str
    items: List[ItemOut] = Field(default_factory=list)
    styling_tip: Optional[str] = None
    reasoning: Optional[str] = None
    confidence_score: Optional[int] = None


class AIOutfitResponse(BaseModel):
    recommendations: List[AIOutfitRecommendation]
    count: int
    message: Optional[str] = None


class OccasionOutfitIn(BaseModel):
    occasion: str = Field(..., min_length=1)
    weather: Optional[WeatherIn] = None


class OccasionOutfitOut(BaseModel):
    occasion: str
    recommendation: Dict[str, Any]


class StyleAnalysisOut(BaseModel):
    analysis: Dict[str, Any]
    item_count: int
