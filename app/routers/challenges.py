import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.deps import get_current_user_id
from app.core.db import get_session
from app.models.models import Achievement, Challenge, UserChallenge
from app.routers.wardrobe_helpers import _parse_uuid
from app.schemas.challenges import (
    AchievementIn,
    AchievementOut,
    ChallengeCreate,
    ChallengeOut,
    ChallengeUpdate,
    UserChallengeIn,
    UserChallengeOut,
    UserChallengeProgressIn,
    UserStatsOut,
)
from app.services import challenges as challenge_service

router = APIRouter(tags=["challenges"])
logger = logging.getLogger("uvicorn.error")


def _challenge_out(c: Challenge) -> ChallengeOut:
    return ChallengeOut(
        id=str(c.id),
        title=c.title,
        description=c.description,
        category=c.category,
        difficulty=c.difficulty,
        points=c.points,
        duration_days=c.duration_days,
        active=bool(c.active),
        created_at=str(c.created_at) if c.created_at else None,
    )


def _user_challenge_out(uc: UserChallenge, challenge: Optional[Challenge]) -> UserChallengeOut:
    return UserChallengeOut(
        id=str(uc.id),
        challenge_id=str(uc.challenge_id),
        progress=uc.progress,
        max_progress=uc.max_progress,
        completed=bool(uc.completed),
        completed_at=str(uc.completed_at) if uc.completed_at else None,
        created_at=str(uc.created_at) if uc.created_at else None,
        challenge=_challenge_out(challenge) if challenge else None,
    )


def _achievement_out(a: Achievement) -> AchievementOut:
    return AchievementOut(
        id=str(a.id),
        name=a.name,
        description=a.description,
        icon=a.icon,
        points_awarded=a.points_awarded,
        unlocked_at=str(a.unlocked_at) if a.unlocked_at else None,
    )


async def _get_challenge(session: AsyncSession, challenge_id: UUID) -> Challenge:
    challenge = await session.get(Challenge, challenge_id)
    if not challenge:
        raise HTTPException(status_code=404, detail="challenge_not_found")
    return challenge


async def _owned_user_challenge(session: AsyncSession, user_challenge_id: UUID, user_id: UUID) -> UserChallenge:
    uc = await session.get(UserChallenge, user_challenge_id)
    if not uc:
        raise HTTPException(status_code=404, detail="user_challenge_not_found")
    if uc.user_id != user_id:
        raise HTTPException(status_code=403, detail="forbidden")
    return uc


@router.get("/challenges", response_model=List[ChallengeOut])
async def list_challenges(active: Optional[bool] = Query(None), session: AsyncSession = Depends(get_session)):
    q = select(Challenge).order_by(Challenge.created_at.desc(), Challenge.title)
    if active is not None:
        q = q.where(Challenge.active == active)
    res = await session.execute(q)
    return [_challenge_out(c) for c in res.scalars().all()]


@router.get("/challenges/{challenge_id}", response_model=ChallengeOut)
async def get_challenge(challenge_id: UUID, session: AsyncSession = Depends(get_session)):
    return _challenge_out(await _get_challenge(session, challenge_id))


@router.post("/challenges", response_model=ChallengeOut, status_code=201)
async def create_challenge(
    payload: ChallengeCreate,
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    challenge = Challenge(**payload.model_dump())
    session.add(challenge)
    await session.commit()
    await session.refresh(challenge)
    logger.info("challenges:create by=%s challenge=%s points=%s", user_id, challenge.id, challenge.points)
    return _challenge_out(challenge)


@router.patch("/challenges/{challenge_id}", response_model=ChallengeOut)
async def update_challenge(
    challenge_id: UUID,
    payload: ChallengeUpdate,
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    challenge = await _get_challenge(session, challenge_id)
    for field, value in payload.model_dump(exclude_unset=True).items():
        if value is None and field in ("title", "difficulty", "points", "active"):
            continue
        setattr(challenge, field, value)
    await session.commit()
    await session.refresh(challenge)
    return _challenge_out(challenge)


@router.get("/user-challenges", response_model=List[UserChallengeOut])
async def list_user_challenges(
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    res = await session.execute(
        select(UserChallenge, Challenge)
        .join(Challenge, Challenge.id == UserChallenge.challenge_id)
        .where(UserChallenge.user_id == user_id)
        .order_by(UserChallenge.completed, UserChallenge.created_at.desc())
    )
    return [_user_challenge_out(uc, c) for uc, c in res.all()]


@router.post("/user-challenges", response_model=UserChallengeOut, status_code=201)
async def accept_challenge(
    payload: UserChallengeIn,
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    challenge_id = _parse_uuid(payload.challenge_id)
    challenge = await session.get(Challenge, challenge_id) if challenge_id else None
    if not challenge:
        raise HTTPException(status_code=404, detail="challenge_not_found")
    existing = await session.execute(
        select(UserChallenge).where(UserChallenge.user_id == user_id, UserChallenge.challenge_id == challenge.id)
    )
    if existing.scalar_one_or_none():
        raise HTTPException(status_code=409, detail="challenge_already_accepted")
    uc = UserChallenge(user_id=user_id, challenge_id=challenge.id, progress=0, max_progress=100, completed=False)
    session.add(uc)
    await session.commit()
    await session.refresh(uc)
    return _user_challenge_out(uc, challenge)


@router.patch("/user-challenges/{user_challenge_id}", response_model=UserChallengeOut)
async def update_progress(
    user_challenge_id: UUID,
    payload: UserChallengeProgressIn,
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    uc = await _owned_user_challenge(session, user_challenge_id, user_id)
    if uc.completed:
        raise HTTPException(status_code=409, detail="challenge_completed")
    uc.progress = min(payload.progress, uc.max_progress)
    await session.commit()
    await session.refresh(uc)
    return _user_challenge_out(uc, await session.get(Challenge, uc.challenge_id))


@router.post("/user-challenges/{user_challenge_id}/complete", response_model=UserChallengeOut)
async def complete_user_challenge(
    user_challenge_id: UUID,
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    """Idempotent: points are credited the first time only."""
    uc = await _owned_user_challenge(session, user_challenge_id, user_id)
    challenge = await session.get(Challenge, uc.challenge_id)
    if challenge and await challenge_service.complete_challenge(session, uc, challenge):
        await session.commit()
        await session.refresh(uc)
    return _user_challenge_out(uc, challenge)


@router.get("/achievements", response_model=List[AchievementOut])
async def list_achievements(
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    res = await session.execute(
        select(Achievement).where(Achievement.user_id == user_id).order_by(Achievement.unlocked_at.desc())
    )
    return [_achievement_out(a) for a in res.scalars().all()]


@router.post("/achievements", response_model=AchievementOut, status_code=201)
async def unlock_achievement(
    payload: AchievementIn,
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    name = payload.name.strip()
    existing = await session.execute(
        select(Achievement).where(Achievement.user_id == user_id, Achievement.name == name)
    )
    if existing.scalar_one_or_none():
        raise HTTPException(status_code=409, detail="achievement_exists")
    achievement = Achievement(user_id=user_id, **payload.model_dump(exclude={"name"}), name=name)
    stats = await challenge_service.unlock_achievement(session, achievement)
    await session.commit()
    await session.refresh(achievement)
    logger.info("achievements:unlock user=%s name=%s points=%s", user_id, name, stats.points)
    return _achievement_out(achievement)


@router.get("/user-stats", response_model=UserStatsOut)
async def user_stats(
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    stats = await challenge_service.get_or_create_stats(session, user_id)
    await session.commit()
    await session.refresh(stats)
    return UserStatsOut(
        points=stats.points,
        level=stats.level,
        challenges_completed=stats.challenges_completed,
        achievements_unlocked=stats.achievements_unlocked,
    )
