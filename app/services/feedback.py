"""Feedback ingestion with sentiment scoring."""

import logging
from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.exceptions import NotFoundError, ValidationFailed
from app.models.application import Application
from app.models.feedback import Feedback
from app.schemas.feedback import FeedbackCreate
from app.services.sentiment import score_sentiment

logger = logging.getLogger(__name__)


def parse_application_id(value: Any) -> Optional[int]:
    """Positive integer from an int or digit string, else None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return None
    return parsed if parsed > 0 else None


async def create_feedback(db: AsyncSession, data: FeedbackCreate) -> Feedback:
    """Store feedback with its sentiment, computed once at write time."""
    application_id = parse_application_id(data.application_id)
    text = (data.text or "").strip()
    if not application_id or not text:
        raise ValidationFailed("applicationId and text are required")

    if await db.get(Application, application_id) is None:
        raise NotFoundError("Application not found")

    sentiment = score_sentiment(text)
    feedback = Feedback(
        application_id=application_id,
        by=data.by or settings.DEFAULT_FEEDBACK_AUTHOR,
        text=text,
        sentiment_score=sentiment.score,
        sentiment_label=sentiment.label,
    )
    db.add(feedback)
    await db.flush()
    await db.refresh(feedback)
    logger.info(f"Feedback on application {application_id} scored {sentiment.score} ({sentiment.label})")
    return feedback


async def list_feedback(db: AsyncSession) -> List[Feedback]:
    result = await db.execute(select(Feedback).order_by(Feedback.created_at.desc(), Feedback.id.desc()))
    return list(result.scalars().all())
