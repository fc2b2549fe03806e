import uuid
from typing import Any, Dict, Iterable, Optional

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.tags import normalize_many
from app.models.models import WardrobeItem
from app.schemas.items import ItemOut, PublicItemOut

_UPDATABLE = (
    "name",
    "category",
    "description",
    "subcategory",
    "color",
    "brand",
    "season",
    "occasion",
    "image_url",
    "tags",
    "favorite",
    "purchase_date",
)


def _tags_or_422(tags: Optional[Iterable[str]]) -> Optional[list[str]]:
    if tags is None:
        return None
    try:
        return normalize_many(tags)
    except ValueError:
        raise HTTPException(status_code=422, detail="invalid_tag")


def _apply_updates(item: WardrobeItem, data: Dict[str, Any]) -> None:
    for field in _UPDATABLE:
        if field not in data:
            continue
        value = data[field]
        if field in ("name", "category", "favorite") and value is None:
            continue
        if field == "tags":
            value = _tags_or_422(value)
        if field == "color" and value:
            value = value.strip()
        setattr(item, field, value)


def _build_item_out(item: WardrobeItem) -> ItemOut:
    return ItemOut(
        id=str(item.id),
        name=item.name,
        category=item.category,
        description=item.description,
        subcategory=item.subcategory,
        color=item.color,
        brand=item.brand,
        season=item.season,
        occasion=item.occasion,
        image_url=item.image_url,
        tags=item.tags,
        favorite=bool(item.favorite),
        purchase_date=item.purchase_date.isoformat() if item.purchase_date else None,
        created_at=str(item.created_at) if item.created_at else None,
        updated_at=str(item.updated_at) if getattr(item, "updated_at", None) else None,
    )


def _public_item_out(item: WardrobeItem) -> PublicItemOut:
    return PublicItemOut(
        id=str(item.id),
        name=item.name,
        category=item.category,
        subcategory=item.subcategory,
        color=item.color,
        season=item.season,
        image_url=item.image_url,
        tags=item.tags,
    )


def _parse_uuid(raw: str) -> Optional[uuid.UUID]:
    try:
        return uuid.UUID(str(raw))
    except ValueError:
        return None


async def load_wardrobe(session: AsyncSession, user_id: uuid.UUID) -> list[WardrobeItem]:
    res = await session.execute(
        select(WardrobeItem).where(WardrobeItem.user_id == user_id).order_by(WardrobeItem.created_at.desc())
    )
    return list(res.scalars().all())


async def load_items_by_ids(session: AsyncSession, item_ids: Iterable[str], user_id: uuid.UUID | None = None) -> list[WardrobeItem]:
    """Fetch the items that still exist for the given ids; malformed ids are ignored."""
    ids = [u for u in (_parse_uuid(i) for i in item_ids) if u is not None]
    if not ids:
        return []
    q = select(WardrobeItem).where(WardrobeItem.id.in_(ids))
    if user_id is not None:
        q = q.where(WardrobeItem.user_id == user_id)
    res = await session.execute(q)
    return list(res.scalars().all())
