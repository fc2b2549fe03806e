from pydantic import BaseModel, Field
from typing import Optional, List


class WeatherIn(BaseModel):
    temperature: Optional[float] = None
    condition: Optional[str] = None
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None


class WeatherRecommendationOut(BaseModel):
    condition: str
    recommendation: str
    clothing_types: List[str] = Field(default_factory=list)


class WeatherOut(BaseModel):
    location: str
    temperature: Optional[float] = None
    condition: str
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None
    icon: str
    recommendations: WeatherRecommendationOut
