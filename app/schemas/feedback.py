"""Feedback schemas."""

from datetime import datetime
from typing import Any, Optional

from app.schemas.common import CamelModel, LooseStr


class FeedbackCreate(CamelModel):
    """``applicationId`` may arrive as a number or a digit string."""

    application_id: Optional[Any] = None
    by: LooseStr = None
    text: LooseStr = None


class FeedbackResponse(CamelModel):
    id: int
    application_id: int
    by: str
    text: str
    sentiment_score: int
    sentiment_label: str
    created_at: datetime
