import uuid
from typing import Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.models import MoodPreferenceRecord, WeatherPreference
from app.services.styling import MoodPreference


def apply_weather_preference(clothing_types: List[str], pref: Optional[WeatherPreference]) -> List[str]:
    """A stored preference replaces the default categories (when it names any), then drops the avoided ones."""
    if pref is None:
        return list(clothing_types)
    out = list(pref.preferred_categories) if pref.preferred_categories else list(clothing_types)
    avoid = set(pref.avoid_categories or [])
    return [c for c in out if c not in avoid]


async def latest_weather_preference(
    session: AsyncSession, user_id: uuid.UUID, weather_type: str
) -> Optional[WeatherPreference]:
    res = await session.execute(
        select(WeatherPreference)
        .where(WeatherPreference.user_id == user_id, WeatherPreference.weather_type == weather_type)
        .order_by(WeatherPreference.created_at.desc(), WeatherPreference.id)
        .limit(1)
    )
    return res.scalar_one_or_none()


async def user_mood_table(session: AsyncSession, user_id: uuid.UUID) -> Dict[str, MoodPreference]:
    res = await session.execute(
        select(MoodPreferenceRecord)
        .where(MoodPreferenceRecord.user_id == user_id)
        .order_by(MoodPreferenceRecord.created_at)
    )
    table: Dict[str, MoodPreference] = {}
    # later rows win
    for row in res.scalars().all():
        key = row.mood.strip().lower()
        table[key] = MoodPreference(
            mood=key,
            preferred_categories=list(row.preferred_categories or []),
            preferred_colors=list(row.preferred_colors or []),
        )
    return table
