import logging
from uuid import UUID
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from app.core.db import get_session
from app.auth.deps import get_current_user_id
from app.models.models import WardrobeItem
from app.routers.wardrobe_helpers import _apply_updates, _build_item_out, _tags_or_422
from app.schemas.items import ItemCreate, ItemUpdate, ItemOut

router = APIRouter(prefix="/wardrobe", tags=["wardrobe"])
logger = logging.getLogger("uvicorn.error")


async def _owned_item(session: AsyncSession, item_id: UUID, user_id: UUID) -> WardrobeItem:
    item = await session.get(WardrobeItem, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="item_not_found")
    if item.user_id != user_id:
        raise HTTPException(status_code=403, detail="forbidden")
    return item


@router.get("", response_model=list[ItemOut])
async def list_items(
    category: Optional[str] = Query(None),
    favorite: Optional[bool] = Query(None),
    tag: Optional[str] = Query(None),
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    q = select(WardrobeItem).where(WardrobeItem.user_id == user_id).order_by(WardrobeItem.created_at.desc())
    if category:
        q = q.where(WardrobeItem.category == category)
    if favorite is not None:
        q = q.where(WardrobeItem.favorite == favorite)
    res = await session.execute(q)
    items = res.scalars().all()
    # tags live in a JSON column; filter here to stay portable across backends
    if tag:
        wanted = (_tags_or_422([tag]) or [""])[0]
        items = [i for i in items if wanted in (i.tags or [])]
    return [_build_item_out(i) for i in items]


@router.post("", response_model=ItemOut, status_code=201)
async def create_item(
    payload: ItemCreate,
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    data = payload.model_dump()
    data["tags"] = _tags_or_422(data.get("tags"))
    if data.get("color"):
        data["color"] = data["color"].strip()
    item = WardrobeItem(user_id=user_id, **data)
    session.add(item)
    await session.commit()
    await session.refresh(item)
    logger.info("wardrobe:create user=%s item=%s category=%s", user_id, item.id, item.category)
    return _build_item_out(item)


@router.get("/{item_id}", response_model=ItemOut)
async def get_item(
    item_id: UUID,
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    return _build_item_out(await _owned_item(session, item_id, user_id))


@router.patch("/{item_id}", response_model=ItemOut)
async def update_item(
    item_id: UUID,
    payload: ItemUpdate,
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    item = await _owned_item(session, item_id, user_id)
    _apply_updates(item, payload.model_dump(exclude_unset=True))
    await session.commit()
    await session.refresh(item)
    return _build_item_out(item)


@router.delete("/{item_id}", status_code=204)
async def delete_item(
    item_id: UUID,
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    """Outfits keep referencing the deleted id; their detail views skip it."""
    item = await _owned_item(session, item_id, user_id)
    await session.delete(item)
    await session.commit()
    return None
