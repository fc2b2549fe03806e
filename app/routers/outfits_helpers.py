from __future__ import annotations

import secrets
import uuid
from typing import Optional, Sequence

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.models.models import Outfit, WardrobeItem
from app.routers.wardrobe_helpers import _build_item_out, _public_item_out, load_items_by_ids
from app.schemas.outfits import OutfitOut, SharedOutfitOut
from app.services.styling import expand_outfit_items


async def _validate_item_ids(session: AsyncSession, user_id: uuid.UUID, item_ids: list[str]) -> list[str]:
    """Ids must be unique and all belong to the user; returns them as canonical strings."""
    if len(set(item_ids)) != len(item_ids):
        raise HTTPException(status_code=422, detail="duplicate_item_ids")
    found = await load_items_by_ids(session, item_ids, user_id=user_id)
    if len(found) != len(item_ids):
        raise HTTPException(status_code=422, detail="item_not_owned_or_missing")
    return [str(uuid.UUID(i)) for i in item_ids]


async def _outfit_out(
    outfit: Outfit, session: AsyncSession, *, with_items: bool = True, items: Optional[list[WardrobeItem]] = None
) -> OutfitOut:
    """Pass ``items`` (any superset of the outfit's items) to skip the per-outfit lookup."""
    items_detail = None
    if with_items:
        if items is None:
            items = await load_items_by_ids(session, outfit.item_ids or [], user_id=outfit.user_id)
        items_detail = [_build_item_out(i) for i in expand_outfit_items(outfit.item_ids or [], items)]
    return OutfitOut(
        id=str(outfit.id),
        name=outfit.name,
        items=list(outfit.item_ids or []),
        occasion=outfit.occasion,
        season=outfit.season,
        weather_conditions=outfit.weather_conditions,
        mood=outfit.mood,
        favorite=bool(outfit.favorite),
        description=outfit.description,
        style_advice=outfit.style_advice,
        source=outfit.source,
        shared=outfit.share_token is not None,
        created_at=str(outfit.created_at) if outfit.created_at else None,
        updated_at=str(outfit.updated_at) if getattr(outfit, "updated_at", None) else None,
        items_detail=items_detail,
    )


async def _outfits_out(outfits: Sequence[Outfit], session: AsyncSession, user_id: uuid.UUID) -> list[OutfitOut]:
    """Serialize a listing with a single item query."""
    ids = {i for o in outfits for i in (o.item_ids or [])}
    items = await load_items_by_ids(session, ids, user_id=user_id)
    return [await _outfit_out(o, session, items=items) for o in outfits]


async def _shared_outfit_out(outfit: Outfit, session: AsyncSession) -> SharedOutfitOut:
    # public view: no owner, notes or timestamps
    found = await load_items_by_ids(session, outfit.item_ids or [], user_id=outfit.user_id)
    return SharedOutfitOut(
        id=str(outfit.id),
        name=outfit.name,
        items=[_public_item_out(i) for i in expand_outfit_items(outfit.item_ids or [], found)],
        occasion=outfit.occasion or "casual",
        season=outfit.season or "all",
        weather_conditions=outfit.weather_conditions,
        mood=outfit.mood or "neutral",
    )


def _new_share_token() -> str:
    return secrets.token_urlsafe(16)


def _share_link(token: str) -> str:
    return f"{settings.PUBLIC_BASE_URL.rstrip('/')}/shared-outfit/{token}"
