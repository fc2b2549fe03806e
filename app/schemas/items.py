from pydantic import BaseModel, Field
from typing import Optional, List, Literal
from datetime import date

Category = Literal["tops", "bottoms", "dresses", "outerwear", "shoes", "accessories", "makeup"]


class ItemCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    category: Category
    description: Optional[str] = None
    subcategory: Optional[str] = None
    color: Optional[str] = None
    brand: Optional[str] = None
    season: Optional[str] = None
    occasion: Optional[List[str]] = None
    image_url: Optional[str] = None
    tags: Optional[List[str]] = None
    favorite: bool = False
    purchase_date: Optional[date] = None


class ItemUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    category: Optional[Category] = None
    description: Optional[str] = None
    subcategory: Optional[str] = None
    color: Optional[str] = None
    brand: Optional[str] = None
    season: Optional[str] = None
    occasion: Optional[List[str]] = None
    image_url: Optional[str] = None
    tags: Optional[List[str]] = None
    favorite: Optional[bool] = None
    purchase_date: Optional[date] = None


class ItemOut(BaseModel):
    id: str
    name: str
    category: str
    description: Optional[str] = None
    subcategory: Optional[str] = None
    color: Optional[str] = None
    brand: Optional[str] = None
    season: Optional[str] = None
    occasion: Optional[List[str]] = None
    image_url: Optional[str] = None
    tags: Optional[List[str]] = None
    favorite: bool = False
    purchase_date: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class PublicItemOut(BaseModel):
    id: str
    name: str
    category: str
    subcategory: Optional[str] = None
    color: Optional[str] = None
    season: Optional[str] = None
    image_url: Optional[str] = None
    tags: Optional[List[str]] = None
