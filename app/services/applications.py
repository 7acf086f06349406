"""Application repository operations."""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError, ValidationFailed
from app.models.application import Application
from app.models.candidate import Candidate
from app.models.job import Job
from app.schemas.application import ApplicationCreate, ApplicationUpdate
from app.services.screening import score_answers
from app.services.stage_policy import Stage, coerce_stage

logger = logging.getLogger(__name__)


async def list_applications(
    db: AsyncSession,
    stage: Optional[str] = None,
    job_id: Optional[int] = None,
    candidate_id: Optional[int] = None,
    q: Optional[str] = None,
) -> List[Application]:
    """Newest first, optionally filtered by stage, job, candidate or notes text."""
    query = select(Application)
    if stage:
        query = query.where(Application.stage == stage.strip().lower())
    if job_id is not None:
        query = query.where(Application.job_id == job_id)
    if candidate_id is not None:
        query = query.where(Application.candidate_id == candidate_id)
    if q:
        query = query.where(Application.notes.icontains(q, autoescape=True))
    query = query.order_by(Application.created_at.desc(), Application.id.desc())
    result = await db.execute(query)
    return list(result.scalars().all())


async def create_application(db: AsyncSession, data: ApplicationCreate) -> Application:
    """Apply a candidate to an open, unexpired job.

    When the job carries an enabled screening test the answers are scored
    and a failing score puts the application straight into ``rejected``.
    """
    if not data.job_id or not data.candidate_id:
        raise ValidationFailed("jobId and candidateId are required")

    job = await db.get(Job, data.job_id)
    if job is None:
        raise NotFoundError("job not found")
    if job.status == "closed":
        raise ValidationFailed("Job is closed. Applications are not allowed.")
    if job.expires_at and job.expires_at < datetime.utcnow():
        raise ValidationFailed("Job has expired. Applications are not allowed.")

    if await db.get(Candidate, data.candidate_id) is None:
        raise NotFoundError("candidate not found")

    stage = Stage.APPLIED
    if data.stage:
        stage = coerce_stage(data.stage)
        if stage is None:
            raise ValidationFailed("Invalid stage")

    answers = [a.model_dump(by_alias=True) for a in data.answers]
    score_percent = None
    passed = None

    test = job.test if job.test_enabled else None
    if test and test.get("enabled") and test.get("questions"):
        score_percent, passed = score_answers(test["questions"], answers, job.test_passing_percent)
        if not passed:
            stage = Stage.REJECTED
        logger.info(
            f"Screening test for job {job.id}, candidate {data.candidate_id}: "
            f"{score_percent}% ({'passed' if passed else 'failed'})"
        )

    application = Application(
        job_id=job.id,
        candidate_id=data.candidate_id,
        stage=stage.value,
        notes=data.notes or None,
        score_percent=score_percent,
        passed=passed,
        answers=answers or None,
    )
    db.add(application)
    await db.flush()
    await db.refresh(application)
    return application


async def get_application(db: AsyncSession, application_id: int) -> Application:
    application = await db.get(Application, application_id)
    if application is None:
        raise NotFoundError("Application not found")
    return application


async def update_application(db: AsyncSession, application_id: int, data: ApplicationUpdate) -> Application:
    """Partial update. A stage outside the allow-list is silently ignored and
    no notification is emitted here; see ``stage_policy.transition_stage``."""
    application = await get_application(db, application_id)
    fields = data.model_dump(exclude_unset=True)

    if fields.get("job_id") is not None:
        application.job_id = fields["job_id"]
    if fields.get("candidate_id") is not None:
        application.candidate_id = fields["candidate_id"]
    stage = coerce_stage(fields.get("stage"))
    if stage is not None:
        application.stage = stage.value
    if "notes" in fields:
        application.notes = fields["notes"] or None

    try:
        await db.flush()
    except IntegrityError:
        raise ConflictError("jobId or candidateId does not reference an existing record")
    await db.refresh(application)
    return application


async def delete_application(db: AsyncSession, application_id: int) -> None:
    application = await get_application(db, application_id)
    await db.delete(application)
    try:
        await db.flush()
    except IntegrityError:
        logger.warning(f"Refused to delete application {application_id}: still referenced")
        raise ConflictError("Application has feedback and cannot be deleted")
