from pydantic import BaseModel, Field
from typing import Optional, Literal

Difficulty = Literal["easy", "medium", "hard"]


class ChallengeCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    category: Optional[str] = None
    difficulty: Difficulty = "easy"
    points: int = Field(50, ge=0, le=10000)
    duration_days: Optional[int] = Field(None, ge=1)
    active: bool = True


class ChallengeUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    category: Optional[str] = None
    difficulty: Optional[Difficulty] = None
    points: Optional[int] = Field(None, ge=0, le=10000)
    duration_days: Optional[int] = Field(None, ge=1)
    active: Optional[bool] = None


class ChallengeOut(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    category: Optional[str] = None
    difficulty: str
    points: int
    duration_days: Optional[int] = None
    active: bool
    created_at: Optional[str] = None


class UserChallengeIn(BaseModel):
    challenge_id: str


class UserChallengeProgressIn(BaseModel):
    progress: int = Field(..., ge=0)


class UserChallengeOut(BaseModel):
    id: str
    challenge_id: str
    progress: int
    max_progress: int
    completed: bool
    completed_at: Optional[str] = None
    created_at: Optional[str] = None
    challenge: Optional[ChallengeOut] = None


class AchievementIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    icon: Optional[str] = None
    points_awarded: int = Field(50, ge=0, le=10000)


class AchievementOut(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    points_awarded: int
    unlocked_at: Optional[str] = None


class UserStatsOut(BaseModel):
    points: int
    level: int
    challenges_completed: int
    achievements_unlocked: int
