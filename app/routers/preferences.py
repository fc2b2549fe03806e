from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.deps import get_current_user_id
from app.core.db import get_session
from app.models.models import MoodPreferenceRecord, WeatherPreference
from app.schemas.preferences import MoodPreferenceIn, MoodPreferenceOut, WeatherPreferenceIn, WeatherPreferenceOut
from app.services.styling import MOOD_DESCRIPTIONS, MOOD_PREFERENCES

router = APIRouter(tags=["preferences"])


def _weather_pref_out(p: WeatherPreference) -> WeatherPreferenceOut:
    return WeatherPreferenceOut(
        id=str(p.id),
        weather_type=p.weather_type,
        preferred_categories=p.preferred_categories or [],
        avoid_categories=p.avoid_categories or [],
        created_at=str(p.created_at) if p.created_at else None,
    )


def _mood_pref_out(p: MoodPreferenceRecord) -> MoodPreferenceOut:
    return MoodPreferenceOut(
        id=str(p.id),
        mood=p.mood,
        preferred_categories=p.preferred_categories or [],
        preferred_colors=p.preferred_colors or [],
        description=MOOD_DESCRIPTIONS.get(p.mood),
        created_at=str(p.created_at) if p.created_at else None,
    )


@router.get("/weather-preferences", response_model=List[WeatherPreferenceOut])
async def list_weather_preferences(
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    res = await session.execute(
        select(WeatherPreference).where(WeatherPreference.user_id == user_id).order_by(WeatherPreference.created_at.desc())
    )
    return [_weather_pref_out(p) for p in res.scalars().all()]


@router.post("/weather-preferences", response_model=WeatherPreferenceOut, status_code=201)
async def create_weather_preference(
    payload: WeatherPreferenceIn,
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    pref = WeatherPreference(user_id=user_id, **payload.model_dump())
    session.add(pref)
    await session.commit()
    await session.refresh(pref)
    return _weather_pref_out(pref)


@router.get("/mood-preferences", response_model=List[MoodPreferenceOut])
async def list_mood_preferences(
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    res = await session.execute(
        select(MoodPreferenceRecord)
        .where(MoodPreferenceRecord.user_id == user_id)
        .order_by(MoodPreferenceRecord.created_at.desc())
    )
    return [_mood_pref_out(p) for p in res.scalars().all()]


@router.post("/mood-preferences", response_model=MoodPreferenceOut, status_code=201)
async def create_mood_preference(
    payload: MoodPreferenceIn,
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    data = payload.model_dump()
    data["mood"] = data["mood"].strip().lower()
    pref = MoodPreferenceRecord(user_id=user_id, **data)
    session.add(pref)
    await session.commit()
    await session.refresh(pref)
    return _mood_pref_out(pref)


@router.get("/moods", response_model=List[MoodPreferenceOut])
async def list_moods():
    """The built-in mood table."""
    return [
        MoodPreferenceOut(
            mood=p.mood,
            preferred_categories=p.preferred_categories,
            preferred_colors=p.preferred_colors,
            description=MOOD_DESCRIPTIONS.get(p.mood),
        )
        for p in MOOD_PREFERENCES.values()
    ]
