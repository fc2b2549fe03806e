from pydantic import BaseModel, Field
from typing import Optional, List
import datetime as dt

from app.schemas.items import ItemOut, PublicItemOut


class OutfitCreate(BaseModel):
    name: str = Field(..., min_length=1)
    items: List[str] = Field(..., min_length=1)
    occasion: Optional[str] = None
    season: Optional[str] = None
    weather_conditions: Optional[str] = None
    mood: Optional[str] = None
    favorite: bool = False
    description: Optional[str] = None
    style_advice: Optional[str] = None
    source: Optional[str] = None


class OutfitUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    items: Optional[List[str]] = Field(None, min_length=1)
    occasion: Optional[str] = None
    season: Optional[str] = None
    weather_conditions: Optional[str] = None
    mood: Optional[str] = None
    favorite: Optional[bool] = None
    description: Optional[str] = None
    style_advice: Optional[str] = None


class OutfitOut(BaseModel):
    id: str
    name: str
    items: List[str]
    occasion: Optional[str] = None
    season: Optional[str] = None
    weather_conditions: Optional[str] = None
    mood: Optional[str] = None
    favorite: bool = False
    description: Optional[str] = None
    style_advice: Optional[str] = None
    source: Optional[str] = None
    shared: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    items_detail: Optional[List[ItemOut]] = None


class OutfitShareOut(BaseModel):
    share_token: str
    shareable_link: str


class SharedOutfitOut(BaseModel):
    id: str
    name: str
    items: List[PublicItemOut]
    occasion: str = "casual"
    season: str = "all"
    weather_conditions: Optional[str] = None
    mood: str = "neutral"
    shared: bool = True


class OutfitPlanIn(BaseModel):
    outfit_id: str
    date: dt.date
    notes: Optional[str] = None


class OutfitPlanOut(BaseModel):
    id: str
    outfit_id: str
    planned_date: str
    notes: Optional[str] = None
    outfit: Optional[OutfitOut] = None
