from pydantic import BaseModel
from typing import Optional, List


class InspirationOut(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    content: Optional[str] = None
    image_url: str
    tags: Optional[List[str]] = None
    category: Optional[str] = None
    source: Optional[str] = None
    created_at: Optional[str] = None


class InspirationRefreshOut(BaseModel):
    success: bool = True
    count: int
