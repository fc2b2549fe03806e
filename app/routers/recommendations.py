import logging
import random
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.deps import get_current_user_id
from app.core.config import settings
from app.core.db import get_session
from app.routers.wardrobe_helpers import _build_item_out, load_wardrobe
from app.routers.weather import fetch_report
from app.schemas.recommendations import OutfitRecommendIn, OutfitRecommendOut
from app.schemas.weather import WeatherIn
from app.services.preferences import apply_weather_preference, latest_weather_preference, user_mood_table
from app.services.styling import WeatherObservation, assemble, classify, recommend
from app.services.weather import WeatherService, get_weather_service

router = APIRouter(prefix="/recommendations", tags=["recommendations"])
logger = logging.getLogger("uvicorn.error")


@router.post("/outfit", response_model=OutfitRecommendOut)
async def recommend_outfit(
    payload: OutfitRecommendIn,
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
    weather_service: WeatherService = Depends(get_weather_service),
):
    """
    Rule-based outfit for the given (or looked-up) weather and optional mood.
    Pass ``seed`` to get the same outfit for the same wardrobe.
    """
    if payload.weather is not None:
        observation = WeatherObservation(**payload.weather.model_dump())
    elif payload.location:
        observation = (await fetch_report(weather_service, payload.location)).observation
    else:
        observation = None

    category = classify(observation)
    rec = recommend(category)
    preferred = apply_weather_preference(
        rec.clothing_types, await latest_weather_preference(session, user_id, category.value)
    )

    wardrobe = await load_wardrobe(session, user_id)
    rng = random.Random(payload.seed) if payload.seed is not None else random.Random()
    picks = assemble(
        wardrobe,
        preferred,
        payload.mood,
        rng=rng,
        min_pool=settings.OUTFIT_MIN_FILTERED_POOL,
        mood_bias=settings.OUTFIT_MOOD_BIAS,
        mood_table=await user_mood_table(session, user_id) if payload.mood else None,
    )
    logger.info(
        "recs:outfit user=%s category=%s mood=%s wardrobe=%d picked=%d",
        user_id,
        category.value,
        payload.mood,
        len(wardrobe),
        len(picks),
    )
    return OutfitRecommendOut(
        category=category.value,
        recommendation=rec.recommendation,
        clothing_types=preferred,
        mood=payload.mood,
        weather=WeatherIn(**vars(observation)) if observation else None,
        items=[_build_item_out(i) for i in picks],
    )
