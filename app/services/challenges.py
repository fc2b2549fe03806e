import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.models import Achievement, Challenge, UserChallenge, UserStats

logger = logging.getLogger("uvicorn.error")

POINTS_PER_LEVEL = 100


def level_for(points: int) -> int:
    return 1 + max(points, 0) // POINTS_PER_LEVEL


async def get_or_create_stats(session: AsyncSession, user_id: uuid.UUID) -> UserStats:
    """Stats row for the user, added to the session (not committed) when missing."""
    stats = await session.get(UserStats, user_id)
    if stats is None:
        stats = UserStats(user_id=user_id, points=0, level=1, challenges_completed=0, achievements_unlocked=0)
        session.add(stats)
    return stats


def award_points(stats: UserStats, points: int) -> None:
    stats.points = (stats.points or 0) + points
    stats.level = level_for(stats.points)


async def complete_challenge(session: AsyncSession, user_challenge: UserChallenge, challenge: Challenge) -> bool:
    """Mark a challenge done and credit its points once. Returns False when it was already complete."""
    if user_challenge.completed:
        return False
    user_challenge.completed = True
    user_challenge.progress = user_challenge.max_progress
    user_challenge.completed_at = datetime.now(timezone.utc)
    stats = await get_or_create_stats(session, user_challenge.user_id)
    stats.challenges_completed = (stats.challenges_completed or 0) + 1
    award_points(stats, challenge.points or 0)
    logger.info(
        "challenges:complete user=%s challenge=%s points=%s total=%s",
        user_challenge.user_id,
        challenge.id,
        challenge.points,
        stats.points,
    )
    return True


async def unlock_achievement(session: AsyncSession, achievement: Achievement) -> UserStats:
    session.add(achievement)
    stats = await get_or_create_stats(session, achievement.user_id)
    stats.achievements_unlocked = (stats.achievements_unlocked or 0) + 1
    award_points(stats, achievement.points_awarded or 0)
    return stats
