import hashlib
import logging
import secrets
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, EmailStr, Field
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update
from app.core.config import settings
from app.core.db import get_session
from app.auth.deps import get_current_user_id, token_subject
from app.auth.jwt import mint_access, mint_refresh
from app.auth.passwords import hash_pw, verify_pw
from app.models.models import PasswordResetToken, User

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger("uvicorn.error")


class RegisterIn(BaseModel):
    username: str = Field(..., min_length=3, max_length=64)
    password: str = Field(..., min_length=6)
    email: EmailStr | None = None
    fullname: str | None = None


class LoginIn(BaseModel):
    username: str
    password: str


class TokenOut(BaseModel):
    access: str
    refresh: str


class RefreshIn(BaseModel):
    refresh: str


class MeOut(BaseModel):
    id: str
    username: str
    email: str | None = None
    fullname: str | None = None
    preferences: Dict[str, Any] | None = None
    created_at: str | None = None


class MePatch(BaseModel):
    email: EmailStr | None = None
    fullname: str | None = None
    preferences: Dict[str, Any] | None = None


class ChangePasswordIn(BaseModel):
    current_password: str
    new_password: str = Field(..., min_length=6)


class PasswordResetRequestIn(BaseModel):
    username: str | None = None
    email: EmailStr | None = None


class PasswordResetRequestOut(BaseModel):
    ok: bool = True
    reset_token: str | None = None
    expires_at: str | None = None


class PasswordResetConfirmIn(BaseModel):
    token: str
    new_password: str = Field(..., min_length=6)


def _tokens(user_id: uuid.UUID) -> TokenOut:
    return TokenOut(access=mint_access(user_id), refresh=mint_refresh(user_id))


def _hash_reset_token(token: str) -> str:
    return hashlib.sha256(f"{token}{settings.SECRET_KEY}".encode()).hexdigest()


def _me_out(user: User) -> MeOut:
    return MeOut(
        id=str(user.id),
        username=user.username,
        email=user.email,
        fullname=user.fullname,
        preferences=user.preferences,
        created_at=user.created_at.isoformat() if user.created_at else None,
    )


@router.post("/register", response_model=TokenOut, status_code=201)
async def register(body: RegisterIn, session: AsyncSession = Depends(get_session)):
    username = body.username.strip()
    existing = await session.execute(select(User).where(User.username == username))
    if existing.scalar_one_or_none():
        raise HTTPException(status_code=400, detail="username_exists")
    user = User(
        id=uuid.uuid4(),
        username=username,
        email=body.email,
        fullname=body.fullname,
        password_hash=hash_pw(body.password),
    )
    session.add(user)
    await session.commit()
    logger.info("auth:register user=%s", user.id)
    return _tokens(user.id)


@router.post("/login", response_model=TokenOut)
async def login(body: LoginIn, session: AsyncSession = Depends(get_session)):
    res = await session.execute(select(User).where(User.username == body.username.strip()))
    user = res.scalar_one_or_none()
    if not user or not verify_pw(user.password_hash, body.password):
        raise HTTPException(status_code=401, detail="invalid_credentials")
    return _tokens(user.id)


@router.post("/refresh", response_model=TokenOut)
async def refresh_token(body: RefreshIn):
    try:
        uid = token_subject(body.refresh, "refresh")
    except jwt.PyJWTError:
        raise HTTPException(status_code=401, detail="invalid_refresh")
    return _tokens(uid)


async def _load_user(session: AsyncSession, user_id: uuid.UUID) -> User:
    user = await session.get(User, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="user_not_found")
    return user


@router.get("/me", response_model=MeOut)
async def me(user_id: uuid.UUID = Depends(get_current_user_id), session: AsyncSession = Depends(get_session)):
    return _me_out(await _load_user(session, user_id))


@router.patch("/me", response_model=MeOut)
async def update_me(
    body: MePatch,
    user_id: uuid.UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    user = await _load_user(session, user_id)
    for field, value in body.model_dump(exclude_unset=True).items():
        setattr(user, field, value)
    await session.commit()
    await session.refresh(user)
    return _me_out(user)


@router.post("/change-password")
async def change_password(
    body: ChangePasswordIn,
    user_id: uuid.UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    user = await _load_user(session, user_id)
    if not verify_pw(user.password_hash, body.current_password):
        raise HTTPException(status_code=401, detail="invalid_credentials")
    user.password_hash = hash_pw(body.new_password)
    await session.commit()
    logger.info("auth:change_password user=%s", user.id)
    return {"ok": True}


@router.post("/password-reset/request", response_model=PasswordResetRequestOut)
async def request_password_reset(body: PasswordResetRequestIn, session: AsyncSession = Depends(get_session)):
    """Answers ok whether or not the account exists. Outside prod the token is returned in the body."""
    if body.username:
        q = select(User).where(User.username == body.username.strip())
    elif body.email:
        q = select(User).where(User.email == body.email)
    else:
        raise HTTPException(status_code=400, detail="username_or_email_required")
    user = (await session.execute(q)).scalars().first()
    if not user:
        return PasswordResetRequestOut(ok=True)

    now = datetime.now(timezone.utc)
    # one live token per user
    await session.execute(
        update(PasswordResetToken)
        .where(
            PasswordResetToken.user_id == user.id,
            PasswordResetToken.used_at.is_(None),
            PasswordResetToken.expires_at > now,
        )
        .values(used_at=now)
    )
    token = secrets.token_urlsafe(32)
    expires_at = now + timedelta(seconds=settings.PASSWORD_RESET_TTL_S)
    session.add(PasswordResetToken(user_id=user.id, token_hash=_hash_reset_token(token), expires_at=expires_at))
    await session.commit()
    logger.info("auth:password_reset_request user=%s", user.id)

    if settings.APP_ENV != "prod":
        return PasswordResetRequestOut(ok=True, reset_token=token, expires_at=expires_at.isoformat())
    return PasswordResetRequestOut(ok=True)


@router.post("/password-reset/confirm", response_model=TokenOut)
async def confirm_password_reset(body: PasswordResetConfirmIn, session: AsyncSession = Depends(get_session)):
    now = datetime.now(timezone.utc)
    res = await session.execute(
        select(PasswordResetToken).where(
            PasswordResetToken.token_hash == _hash_reset_token(body.token),
            PasswordResetToken.used_at.is_(None),
            PasswordResetToken.expires_at > now,
        )
    )
    prt = res.scalar_one_or_none()
    user = await session.get(User, prt.user_id) if prt else None
    if not user:
        raise HTTPException(status_code=400, detail="invalid_reset_token")
    user.password_hash = hash_pw(body.new_password)
    prt.used_at = now
    await session.commit()
    logger.info("auth:password_reset user=%s", user.id)
    return _tokens(user.id)
