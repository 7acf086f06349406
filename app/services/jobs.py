"""Job opening repository operations."""

import logging
from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError, ValidationFailed
from app.models.job import Job
from app.schemas.job import JobCreate, JobUpdate
from app.services.notifications import NotificationEmitter
from app.services.screening import normalize_test_config

logger = logging.getLogger(__name__)

JOB_STATUSES = ("open", "closed")
EXTERNAL_POST_STUB = "job.externalPostStub"

DESCRIPTION_TEMPLATE = (
    "We are seeking a {title} to join our {department} team.\n\n"
    "Responsibilities:\n"
    "- Work with cross-functional teams\n"
    "- Deliver high-quality outcomes\n\n"
    "Qualifications:\n"
    "- Relevant experience\n"
    "- Strong communication skills"
)


def render_description(title: str, department: Optional[str]) -> str:
    return DESCRIPTION_TEMPLATE.format(title=title, department=department or "")


async def list_jobs(db: AsyncSession, status: Optional[str] = None, q: Optional[str] = None) -> List[Job]:
    query = select(Job)
    if status in JOB_STATUSES:
        query = query.where(Job.status == status)
    if q:
        query = query.where(
            or_(
                Job.title.icontains(q, autoescape=True),
                Job.department.icontains(q, autoescape=True),
                Job.location.icontains(q, autoescape=True),
                Job.type.icontains(q, autoescape=True),
            )
        )
    query = query.order_by(Job.created_at.desc(), Job.id.desc())
    result = await db.execute(query)
    return list(result.scalars().all())


async def create_job(db: AsyncSession, data: JobCreate) -> Job:
    title = (data.title or "").strip()
    if not title:
        raise ValidationFailed("title is required")

    description = data.description or None
    if data.auto_template and not description:
        description = render_description(title, data.department)

    test = normalize_test_config(data.test)

    job = Job(
        title=title,
        department=data.department or None,
        location=data.location or None,
        type=data.type or None,
        description=description,
        description_rich=data.description_rich or None,
        expires_at=data.expires_at,
        auto_template=data.auto_template,
        external_post=data.external_post,
        status="closed" if data.status == "closed" else "open",
        test_enabled=test is not None,
        test_passing_percent=round(test["passingPercent"]) if test else None,
        test=test,
    )
    db.add(job)
    await db.flush()

    if job.external_post:
        await NotificationEmitter(db).emit(EXTERNAL_POST_STUB, {"jobId": job.id})

    await db.refresh(job)
    logger.info(f"Job {job.id} created: {job.title}")
    return job


async def get_job(db: AsyncSession, job_id: int) -> Job:
    job = await db.get(Job, job_id)
    if job is None:
        raise NotFoundError("Job not found")
    return job


async def update_job(db: AsyncSession, job_id: int, data: JobUpdate) -> Job:
    """Partial update. Null clears optional text fields; ``title`` ignores null."""
    job = await get_job(db, job_id)
    fields = data.model_dump(exclude_unset=True)

    if fields.get("title") is not None:
        title = fields["title"].strip()
        if not title:
            raise ValidationFailed("title cannot be empty")
        job.title = title
    for name in ("department", "location", "type", "description", "description_rich"):
        if name in fields:
            setattr(job, name, fields[name] or None)
    if "expires_at" in fields:
        job.expires_at = fields["expires_at"]
    if fields.get("status") in JOB_STATUSES:
        job.status = fields["status"]

    await db.flush()
    await db.refresh(job)
    return job


async def delete_job(db: AsyncSession, job_id: int) -> None:
    job = await get_job(db, job_id)
    await db.delete(job)
    try:
        await db.flush()
    except IntegrityError:
        logger.warning(f"Refused to delete job {job_id}: still referenced")
        raise ConflictError("Job has applications and cannot be deleted")
