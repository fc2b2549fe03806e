from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.deps import get_current_user_id
from app.core.db import get_session
from app.models.models import Inspiration
from app.schemas.inspirations import InspirationOut, InspirationRefreshOut
from app.services import inspirations as inspiration_service

router = APIRouter(prefix="/inspirations", tags=["inspirations"])


def _inspiration_out(i: Inspiration) -> InspirationOut:
    return InspirationOut(
        id=str(i.id),
        title=i.title,
        description=i.description,
        content=i.content,
        image_url=i.image_url,
        tags=i.tags,
        category=i.category,
        source=i.source,
        created_at=str(i.created_at) if i.created_at else None,
    )


@router.get("", response_model=List[InspirationOut])
async def list_inspirations(category: Optional[str] = Query(None), session: AsyncSession = Depends(get_session)):
    return [_inspiration_out(i) for i in await inspiration_service.list_inspirations(session, category)]


@router.post("/refresh", response_model=InspirationRefreshOut)
async def refresh_inspirations(
    session: AsyncSession = Depends(get_session),
    user_id: UUID = Depends(get_current_user_id),
):
    count = await inspiration_service.refresh_curated(session)
    return InspirationRefreshOut(count=count)


@router.get("/{inspiration_id}", response_model=InspirationOut)
async def get_inspiration(inspiration_id: UUID, session: AsyncSession = Depends(get_session)):
    inspiration = await inspiration_service.get_inspiration(session, inspiration_id)
    if not inspiration:
        raise HTTPException(status_code=404, detail="inspiration_not_found")
    return _inspiration_out(inspiration)
