import logging
from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.deps import get_current_user_id
from app.core.db import get_session
from app.models.models import Outfit, OutfitPlan
from app.routers.outfits_helpers import _outfit_out, _outfits_out
from app.routers.wardrobe_helpers import _parse_uuid
from app.schemas.outfits import OutfitOut, OutfitPlanIn, OutfitPlanOut

router = APIRouter(prefix="/calendar-outfits", tags=["calendar"])
logger = logging.getLogger("uvicorn.error")


def _plan_out(plan: OutfitPlan, outfit: Optional[OutfitOut]) -> OutfitPlanOut:
    return OutfitPlanOut(
        id=str(plan.id),
        outfit_id=str(plan.outfit_id),
        planned_date=plan.planned_date.isoformat(),
        notes=plan.notes,
        outfit=outfit,
    )


@router.get("", response_model=List[OutfitPlanOut])
async def list_plans(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    """Planned outfits between the two dates, both inclusive."""
    if start_date and end_date and start_date > end_date:
        raise HTTPException(status_code=400, detail="invalid_date_range")
    q = select(OutfitPlan).where(OutfitPlan.user_id == user_id)
    if start_date:
        q = q.where(OutfitPlan.planned_date >= start_date)
    if end_date:
        q = q.where(OutfitPlan.planned_date <= end_date)
    plans = (await session.execute(q.order_by(OutfitPlan.planned_date))).scalars().all()
    outfit_ids = {p.outfit_id for p in plans}
    outfits = []
    if outfit_ids:
        res = await session.execute(select(Outfit).where(Outfit.id.in_(outfit_ids), Outfit.user_id == user_id))
        outfits = res.scalars().all()
    by_id = {o.id: out for o, out in zip(outfits, await _outfits_out(outfits, session, user_id))}
    return [_plan_out(p, by_id.get(p.outfit_id)) for p in plans]


@router.post("", response_model=OutfitPlanOut, status_code=201)
async def plan_outfit(
    payload: OutfitPlanIn,
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    outfit_id = _parse_uuid(payload.outfit_id)
    outfit = await session.get(Outfit, outfit_id) if outfit_id else None
    if not outfit or outfit.user_id != user_id:
        raise HTTPException(status_code=404, detail="outfit_not_found")
    plan = OutfitPlan(user_id=user_id, outfit_id=outfit.id, planned_date=payload.date, notes=payload.notes)
    session.add(plan)
    await session.commit()
    await session.refresh(plan)
    logger.info("calendar:plan user=%s outfit=%s date=%s", user_id, outfit.id, plan.planned_date)
    return _plan_out(plan, await _outfit_out(outfit, session))
