"""
Pipeline stage policy.

The state machine is lenient: any canonical stage may be written over any
other, including ``hired`` -> ``rejected``. What it guarantees is that no
value outside ``Stage`` is ever persisted.

Two entry points share one allow-list:

- ``validate_stage`` is strict and raises ``InvalidStageError``; the
  dedicated stage endpoint uses it.
- ``coerce_stage`` is lenient and returns ``None``; the general application
  PATCH uses it and silently drops unknown stages.
"""

import logging
from enum import Enum
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError, ValidationFailed
from app.models.application import Application
from app.services.notifications import NotificationEmitter

logger = logging.getLogger(__name__)

STAGE_CHANGED = "application.stageChanged"


class Stage(str, Enum):
    """Pipeline stages, in funnel order."""

    APPLIED = "applied"
    SCREENING = "screening"
    INTERVIEW = "interview"
    OFFER = "offer"
    HIRED = "hired"
    REJECTED = "rejected"


ALL_STAGES = tuple(s.value for s in Stage)

# Stages that still hold candidates in flight; used for bottleneck detection
PRE_TERMINAL_STAGES = (Stage.APPLIED.value, Stage.SCREENING.value, Stage.INTERVIEW.value, Stage.OFFER.value)


class InvalidStageError(ValidationFailed):
    """Stage value outside the allow-list."""

    def __init__(self, value: Any):
        super().__init__("Invalid stage")
        self.value = value


def coerce_stage(value: Any) -> Optional[Stage]:
    """Return the matching Stage, or None for anything unknown."""
    if value is None:
        return None
    normalized = str(value).strip().lower()
    try:
        return Stage(normalized)
    except ValueError:
        return None


def validate_stage(value: Any) -> Stage:
    """Return the matching Stage or raise InvalidStageError."""
    stage = coerce_stage(value)
    if stage is None:
        raise InvalidStageError(value)
    return stage


async def transition_stage(db: AsyncSession, application_id: int, value: Any) -> Application:
    """Move an application to a new stage and record the change.

    Validation happens before any read or write. The stage update and the
    ``application.stageChanged`` notification are flushed in the caller's
    transaction, so they commit or roll back together.
    """
    stage = validate_stage(value)

    application = await db.get(Application, application_id)
    if application is None:
        raise NotFoundError("Application not found")

    previous = application.stage
    application.stage = stage.value
    await db.flush()

    await NotificationEmitter(db).emit(
        STAGE_CHANGED,
        {"applicationId": application.id, "stage": stage.value},
    )

    logger.info(f"Application {application.id} moved {previous} -> {stage.value}")
    return application
