import asyncio
import logging
from datetime import datetime, timezone
from typing import List
from uuid import UUID

import openai
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.deps import get_current_user_id
from app.core.db import get_session
from app.models.models import User, WardrobeItem
from app.routers.wardrobe_helpers import _build_item_out, load_wardrobe
from app.schemas.recommendations import (
    AIOutfitRecommendation,
    AIOutfitRequest,
    AIOutfitResponse,
    OccasionOutfitIn,
    OccasionOutfitOut,
    StyleAnalysisOut,
)
from app.services import llm as llm_service
from app.services.llm.types import (
    OccasionOutfitInput,
    RecommendOutfitsInput,
    StyleAnalysisInput,
    WardrobeItemBrief,
)
from app.services.styling import expand_outfit_items

router = APIRouter(tags=["ai"])
logger = logging.getLogger("uvicorn.error")

MIN_ITEMS_STYLE_ANALYSIS = 3


def _briefs(items: List[WardrobeItem]) -> List[WardrobeItemBrief]:
    return [
        WardrobeItemBrief(
            id=str(i.id),
            name=i.name,
            category=i.category,
            color=i.color,
            description=i.description,
            tags=list(i.tags or []),
        )
        for i in items
    ]


async def _user_preferences(session: AsyncSession, user_id: UUID) -> dict:
    user = await session.get(User, user_id)
    return dict(user.preferences or {}) if user else {}


async def _call_llm(what: str, coro):
    try:
        return await coro
    except (asyncio.TimeoutError, openai.APITimeoutError):
        logger.warning("ai:%s timed out", what)
        raise HTTPException(status_code=504, detail="ai_timeout")
    except openai.OpenAIError as e:
        logger.error("ai:%s provider error err=%s", what, e)
        raise HTTPException(status_code=502, detail="ai_unavailable")


@router.post("/ai-outfit-recommendations", response_model=AIOutfitResponse)
async def ai_outfit_recommendations(
    payload: AIOutfitRequest,
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    wardrobe = await load_wardrobe(session, user_id)
    if not wardrobe:
        return AIOutfitResponse(recommendations=[], count=0, message="Add some items to your wardrobe first.")
    out = await _call_llm(
        "outfits",
        llm_service.recommend_outfits(
            RecommendOutfitsInput(
                items=_briefs(wardrobe),
                mood=payload.mood,
                weather=payload.weather,
                occasion=payload.occasion,
                preferences=await _user_preferences(session, user_id),
            )
        ),
    )
    recs = []
    for outfit in out.outfits:
        # the model may invent or misspell ids; keep only real items
        items = expand_outfit_items(outfit.item_ids, wardrobe)
        if not items:
            continue
        recs.append(
            AIOutfitRecommendation(
                name=outfit.name,
                items=[_build_item_out(i) for i in items],
                styling_tip=outfit.styling_tip,
                reasoning=outfit.reasoning,
                confidence_score=outfit.confidence_score,
            )
        )
    logger.info("ai:outfits user=%s returned=%d kept=%d cached=%s", user_id, len(out.outfits), len(recs), out.usage.cached)
    return AIOutfitResponse(recommendations=recs, count=len(recs))


@router.post("/occasion-outfit", response_model=OccasionOutfitOut)
async def occasion_outfit(
    payload: OccasionOutfitIn,
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    wardrobe = await load_wardrobe(session, user_id)
    if not wardrobe:
        raise HTTPException(status_code=400, detail="no_wardrobe_items")
    out = await _call_llm(
        "occasion",
        llm_service.occasion_outfit(
            OccasionOutfitInput(
                occasion=payload.occasion,
                items=_briefs(wardrobe),
                weather=payload.weather.model_dump() if payload.weather else None,
                preferences=await _user_preferences(session, user_id),
            )
        ),
    )
    items = expand_outfit_items(out.item_ids, wardrobe)
    if not items:
        raise HTTPException(status_code=404, detail="no_suitable_outfit")
    return OccasionOutfitOut(
        occasion=payload.occasion,
        recommendation={
            "name": out.name or payload.occasion.title(),
            "items": [_build_item_out(i).model_dump() for i in items],
            "accessories": out.accessories,
            "styling_instructions": out.styling_instructions,
            "occasion_reasoning": out.occasion_reasoning,
        },
    )


async def _analyze(session: AsyncSession, user_id: UUID, min_items: int) -> tuple[dict, int]:
    wardrobe = await load_wardrobe(session, user_id)
    if len(wardrobe) < min_items:
        raise HTTPException(status_code=400, detail="not_enough_items")
    out = await _call_llm("style", llm_service.analyze_style(StyleAnalysisInput(items=_briefs(wardrobe))))
    return out.model_dump(exclude={"usage"}), len(wardrobe)


@router.get("/style-analysis", response_model=StyleAnalysisOut)
async def style_analysis(
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    analysis, count = await _analyze(session, user_id, MIN_ITEMS_STYLE_ANALYSIS)
    return StyleAnalysisOut(analysis=analysis, item_count=count)


@router.get("/style-profile", response_model=StyleAnalysisOut)
async def style_profile(
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    analysis, count = await _analyze(session, user_id, 1)
    analysis["profile_summary"] = f"Style profile based on {count} wardrobe items"
    analysis["created_at"] = datetime.now(timezone.utc).isoformat()
    return StyleAnalysisOut(analysis=analysis, item_count=count)
