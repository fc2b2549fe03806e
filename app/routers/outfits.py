import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.deps import get_current_user_id
from app.core.db import get_session
from app.models.models import Outfit
from app.routers.outfits_helpers import (
    _new_share_token,
    _outfit_out,
    _outfits_out,
    _share_link,
    _shared_outfit_out,
    _validate_item_ids,
)
from app.schemas.outfits import OutfitCreate, OutfitOut, OutfitShareOut, OutfitUpdate, SharedOutfitOut

router = APIRouter(prefix="/outfits", tags=["outfits"])
public_router = APIRouter(tags=["outfits"])
logger = logging.getLogger("uvicorn.error")


async def _owned_outfit(session: AsyncSession, outfit_id: UUID, user_id: UUID) -> Outfit:
    res = await session.execute(select(Outfit).where(Outfit.id == outfit_id, Outfit.user_id == user_id))
    outfit = res.scalar_one_or_none()
    if not outfit:
        raise HTTPException(status_code=404, detail="outfit_not_found")
    return outfit


@router.post("", response_model=OutfitOut, status_code=201, summary="Create outfit")
async def create_outfit(
    payload: OutfitCreate = Body(
        ...,
        examples=[
            {
                "name": "Sunny Saturday",
                "items": ["uuid-top", "uuid-bottom", "uuid-shoes"],
                "weather_conditions": "sunny",
                "mood": "happy",
                "occasion": "casual",
            }
        ],
    ),
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    """
    Save an outfit. Item order is kept as given.
    Every id must be one of the caller's wardrobe items, with no repeats.
    """
    item_ids = await _validate_item_ids(session, user_id, payload.items)
    data = payload.model_dump(exclude={"items"})
    data["source"] = data.get("source") or "manual"
    outfit = Outfit(user_id=user_id, item_ids=item_ids, **data)
    session.add(outfit)
    await session.commit()
    await session.refresh(outfit)
    logger.info("outfits:create user=%s outfit=%s items=%d source=%s", user_id, outfit.id, len(item_ids), outfit.source)
    return await _outfit_out(outfit, session)


@router.get("", response_model=List[OutfitOut])
async def list_outfits(
    favorite: Optional[bool] = Query(None),
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    q = select(Outfit).where(Outfit.user_id == user_id).order_by(Outfit.created_at.desc())
    if favorite is not None:
        q = q.where(Outfit.favorite == favorite)
    res = await session.execute(q)
    return await _outfits_out(res.scalars().all(), session, user_id)


@router.get("/{outfit_id}", response_model=OutfitOut)
async def get_outfit(outfit_id: UUID, session: AsyncSession = Depends(get_session), user_id: UUID = Depends(get_current_user_id)):
    return await _outfit_out(await _owned_outfit(session, outfit_id, user_id), session)


@router.patch("/{outfit_id}", response_model=OutfitOut)
async def update_outfit(
    outfit_id: UUID,
    payload: OutfitUpdate,
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    outfit = await _owned_outfit(session, outfit_id, user_id)
    data = payload.model_dump(exclude_unset=True)
    items = data.pop("items", None)
    if items is not None:
        outfit.item_ids = await _validate_item_ids(session, user_id, items)
    for field, value in data.items():
        if field in ("name", "favorite") and value is None:
            continue
        setattr(outfit, field, value)
    await session.commit()
    await session.refresh(outfit)
    return await _outfit_out(outfit, session)


@router.delete("/{outfit_id}", status_code=204)
async def delete_outfit(
    outfit_id: UUID,
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    outfit = await _owned_outfit(session, outfit_id, user_id)
    await session.delete(outfit)
    await session.commit()
    return None


@router.post("/{outfit_id}/share", response_model=OutfitShareOut)
async def share_outfit(
    outfit_id: UUID,
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    """Idempotent: an outfit keeps its first share token."""
    outfit = await _owned_outfit(session, outfit_id, user_id)
    if not outfit.share_token:
        outfit.share_token = _new_share_token()
        await session.commit()
        await session.refresh(outfit)
    return OutfitShareOut(share_token=outfit.share_token, shareable_link=_share_link(outfit.share_token))


@public_router.get("/shared-outfit/{token}", response_model=SharedOutfitOut)
async def get_shared_outfit(token: str, session: AsyncSession = Depends(get_session)):
    res = await session.execute(select(Outfit).where(Outfit.share_token == token))
    outfit = res.scalar_one_or_none()
    if not outfit:
        raise HTTPException(status_code=404, detail="shared_outfit_not_found")
    return await _shared_outfit_out(outfit, session)
