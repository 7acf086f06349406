"""Notification schemas."""

from datetime import datetime
from typing import Any, Optional

from app.schemas.common import CamelModel


class NotificationResponse(CamelModel):
    id: int
    type: str
    payload: Optional[Any] = None
    created_at: datetime
