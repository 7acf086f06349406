"""Recruitment notification feed."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.config import settings
from app.schemas.notification import NotificationResponse
from app.services.notifications import list_notifications

router = APIRouter()


@router.get("", response_model=List[NotificationResponse])
async def get_notifications(db: AsyncSession = Depends(get_db)):
    """Most recent first, capped at NOTIFICATIONS_PAGE_SIZE."""
    return await list_notifications(db, limit=settings.NOTIFICATIONS_PAGE_SIZE)
