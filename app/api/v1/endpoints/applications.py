"""
Application API - pipeline records linking candidates to jobs

Two ways to change a stage:
- `PATCH /{id}` drops an unknown stage silently and emits nothing
- `PATCH /{id}/stage` rejects an unknown stage with 400 and emits
  an `application.stageChanged` notification on success
"""

from typing import List, Optional

import structlog
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.schemas.application import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationUpdate,
    StageTransitionRequest,
)
from app.schemas.common import OkResponse
from app.services import applications as application_service
from app.services.stage_policy import transition_stage

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("", response_model=List[ApplicationResponse])
async def list_applications(
    stage: Optional[str] = None,
    job_id: Optional[int] = Query(None, alias="jobId"),
    candidate_id: Optional[int] = Query(None, alias="candidateId"),
    q: Optional[str] = Query(None, description="Search in notes"),
    db: AsyncSession = Depends(get_db),
):
    """List applications, newest first."""
    return await application_service.list_applications(
        db, stage=stage, job_id=job_id, candidate_id=candidate_id, q=q
    )


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def create_application(application_in: ApplicationCreate, db: AsyncSession = Depends(get_db)):
    """
    Apply a candidate to a job.

    The job must be open and unexpired. If it has a screening test, the
    submitted `answers` are scored and a failing score lands in `rejected`.
    """
    application = await application_service.create_application(db, application_in)
    await db.commit()
    logger.info("application_created", application_id=application.id, stage=application.stage)
    return application


@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application(application_id: int, db: AsyncSession = Depends(get_db)):
    return await application_service.get_application(db, application_id)


@router.patch("/{application_id}", response_model=ApplicationResponse)
async def update_application(
    application_id: int,
    application_in: ApplicationUpdate,
    db: AsyncSession = Depends(get_db),
):
    application = await application_service.update_application(db, application_id, application_in)
    await db.commit()
    return application


@router.patch("/{application_id}/stage", response_model=ApplicationResponse)
async def change_stage(
    application_id: int,
    transition: StageTransitionRequest,
    db: AsyncSession = Depends(get_db),
):
    """Move an application to another stage and record a notification."""
    application = await transition_stage(db, application_id, transition.stage)
    await db.commit()
    logger.info("stage_changed", application_id=application.id, stage=application.stage)
    return application


@router.delete("/{application_id}", response_model=OkResponse)
async def delete_application(application_id: int, db: AsyncSession = Depends(get_db)):
    await application_service.delete_application(db, application_id)
    await db.commit()
    logger.info("application_deleted", application_id=application_id)
    return OkResponse()
