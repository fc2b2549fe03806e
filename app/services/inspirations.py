from __future__ import annotations

import logging
import uuid
from enum import Enum
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.models import Inspiration

logger = logging.getLogger("uvicorn.error")


class InspirationCategory(str, Enum):
    CELEBRITY = "celebrity"
    RUNWAY = "runway"
    STREETSTYLE = "streetstyle"
    VINTAGE = "vintage"
    SEASONAL = "seasonal"
    TRENDING = "trending"
    SUSTAINABLE = "sustainable"
    FORMAL = "formal"
    CASUAL = "casual"
    BUSINESS = "business"


CURATED: List[Dict[str, Any]] = [
    {
        "title": "Classic Parisian Chic",
        "description": "Timeless elegance inspired by French fashion icons",
        "category": InspirationCategory.VINTAGE,
        "image_url": "https://images.unsplash.com/photo-1589100656800-6aa8f1c7b0c3",
        "source": "Paris Fashion Archives",
        "tags": ["french", "classic", "timeless", "sophisticated"],
        "content": "A tailored blazer, a crisp white shirt, well-fitting jeans and ballet flats. "
        "Keep accessories few and deliberate and stay with neutral colors.",
    },
    {
        "title": "Met Gala 2024 Highlights",
        "description": "The most iconic looks from fashion's biggest night",
        "category": InspirationCategory.CELEBRITY,
        "image_url": "https://images.unsplash.com/photo-1596112430947-3b5e8c7c8391",
        "source": "Fashion Forward Magazine",
        "tags": ["celebrity", "red carpet", "haute couture", "gala"],
        "content": "Architectural gowns in new sustainable materials and reworked historic silhouettes "
        "set the tone, mixing traditional craft with futuristic technique.",
    },
    {
        "title": "Tokyo Street Style Evolution",
        "description": "How Tokyo's street fashion keeps influencing global trends",
        "category": InspirationCategory.STREETSTYLE,
        "image_url": "https://images.unsplash.com/photo-1519699047748-de8e457a634e",
        "source": "Global Street Culture",
        "tags": ["japanese", "harajuku", "avant-garde", "streetwear"],
        "content": "From Harajuku maximalism to polished Shibuya looks: unexpected layering, "
        "mixed textures and playful proportions.",
    },
    {
        "title": "Sustainable Luxury Innovations",
        "description": "How luxury brands are pioneering environmental responsibility",
        "category": InspirationCategory.SUSTAINABLE,
        "image_url": "https://images.unsplash.com/photo-1606041008023-472dfb5e530f",
        "source": "Sustainable Fashion Collective",
        "tags": ["eco-friendly", "innovation", "circular fashion", "conscious"],
        "content": "Circular design, lab-grown leather alternatives, zero-waste pattern cutting "
        "and traceable supply chains.",
    },
    {
        "title": "Power Dressing for the Modern Workplace",
        "description": "Contemporary interpretations of professional attire",
        "category": InspirationCategory.BUSINESS,
        "image_url": "https://images.unsplash.com/photo-1520938852400-cd4de4fb6685",
        "source": "Executive Style Quarterly",
        "tags": ["professional", "office", "work attire", "tailoring"],
        "content": "Relaxed suiting, elevated separates and strong tailoring in quality fabrics, "
        "with room for personal touches.",
    },
    {
        "title": "Fall/Winter 2024 Color Trends",
        "description": "The palette defining the upcoming season",
        "category": InspirationCategory.SEASONAL,
        "image_url": "https://images.unsplash.com/photo-1604782206219-3b9576575203",
        "source": "Color Institute Forecast",
        "tags": ["color theory", "seasonal", "trends", "palette"],
        "content": "Burgundy, emerald and sapphire over camel, ecru and slate gray, "
        "with marigold and teal as accents.",
    },
    {
        "title": "Vintage Hollywood Glamour",
        "description": "Timeless elegance from cinema's golden age",
        "category": InspirationCategory.VINTAGE,
        "image_url": "https://images.unsplash.com/photo-1568252738398-ad8b74bc0db5",
        "source": "Cinema Style Archive",
        "tags": ["hollywood", "retro", "glamour", "cinema"],
        "content": "Bias-cut satin, structured shoulders, cinched waists and careful draping.",
    },
    {
        "title": "Spring 2024 Runway Report",
        "description": "The most influential collections from international fashion weeks",
        "category": InspirationCategory.RUNWAY,
        "image_url": "https://images.unsplash.com/photo-1509631179647-0177331693ae",
        "source": "Global Fashion Report",
        "tags": ["runway", "designer", "fashion week", "trends"],
        "content": "Utility workwear, sheer layering and modular separates in sunset hues "
        "and complex neutrals.",
    },
    {
        "title": "Elevated Casual: The New Everyday Uniform",
        "description": "Redefining comfortable dressing with sophistication",
        "category": InspirationCategory.CASUAL,
        "image_url": "https://images.unsplash.com/photo-1590400516695-36708d3f964a",
        "source": "Modern Lifestyle Journal",
        "tags": ["casual", "everyday", "comfort", "minimalist"],
        "content": "Premium t-shirts, well-cut denim and sculpted knitwear. Quality over logos.",
    },
    {
        "title": "Evening Wear Reinvented",
        "description": "Modern approaches to formal dressing for special occasions",
        "category": InspirationCategory.FORMAL,
        "image_url": "https://images.unsplash.com/photo-1519699047748-de8e457a634e",
        "source": "Celebrations Style Guide",
        "tags": ["formal", "evening", "occasion", "elegant"],
        "content": "Minimal shapes in rich textures and classic silhouettes in surprising colors.",
    },
]


async def refresh_curated(session: AsyncSession) -> int:
    """Replace every inspiration with the curated set. Returns the number created."""
    await session.execute(delete(Inspiration))
    for entry in CURATED:
        data = dict(entry)
        data["category"] = data["category"].value
        data["tags"] = list(data["tags"])
        session.add(Inspiration(**data))
    await session.commit()
    logger.info("inspirations: refreshed count=%d", len(CURATED))
    return len(CURATED)


async def list_inspirations(session: AsyncSession, category: Optional[str] = None) -> List[Inspiration]:
    count = await session.scalar(select(func.count()).select_from(Inspiration))
    if not count:
        await refresh_curated(session)
    q = select(Inspiration).order_by(Inspiration.created_at.desc(), Inspiration.title)
    if category:
        q = q.where(Inspiration.category == category.lower())
    res = await session.execute(q)
    return list(res.scalars().all())


async def get_inspiration(session: AsyncSession, inspiration_id: uuid.UUID) -> Optional[Inspiration]:
    return await session.get(Inspiration, inspiration_id)
