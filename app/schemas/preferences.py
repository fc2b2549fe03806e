from pydantic import BaseModel, Field
from typing import Optional, List, Literal

from app.schemas.items import Category

WeatherType = Literal["sunny", "cloudy", "rainy", "snowy", "windy", "cold", "hot", "mild"]


class WeatherPreferenceIn(BaseModel):
    weather_type: WeatherType
    preferred_categories: List[Category] = Field(default_factory=list)
    avoid_categories: List[Category] = Field(default_factory=list)


class WeatherPreferenceOut(BaseModel):
    id: str
    weather_type: str
    preferred_categories: List[str] = Field(default_factory=list)
    avoid_categories: List[str] = Field(default_factory=list)
    created_at: Optional[str] = None


class MoodPreferenceIn(BaseModel):
    mood: str = Field(..., min_length=1, max_length=32)
    preferred_categories: List[Category] = Field(default_factory=list)
    preferred_colors: List[str] = Field(default_factory=list)


class MoodPreferenceOut(BaseModel):
    id: Optional[str] = None
    mood: str
    preferred_categories: List[str] = Field(default_factory=list)
    preferred_colors: List[str] = Field(default_factory=list)
    description: Optional[str] = None
    created_at: Optional[str] = None
