"""Notification emitter and listing."""

import logging
from typing import Any, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.notification import Notification

logger = logging.getLogger(__name__)


class NotificationEmitter:
    """Writes notification rows inside the caller's session.

    ``emit`` flushes immediately so a failed write raises here and fails the
    operation that triggered it instead of being lost at commit time.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def emit(self, type: str, payload: Any) -> Notification:
        notification = Notification(type=type, payload=payload)
        self.db.add(notification)
        await self.db.flush()
        logger.debug(f"Notification {type} recorded: {payload}")
        return notification


async def list_notifications(db: AsyncSession, limit: int) -> List[Notification]:
    """Most recent first, capped at ``limit``."""
    result = await db.execute(
        select(Notification)
        .order_by(Notification.created_at.desc(), Notification.id.desc())
        .limit(limit)
    )
    return list(result.scalars().all())
