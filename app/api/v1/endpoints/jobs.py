"""
Job API - openings candidates apply to
"""

from typing import List, Optional

import structlog
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.schemas.common import OkResponse
from app.schemas.job import JobCreate, JobResponse, JobUpdate
from app.services import jobs as job_service

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("", response_model=List[JobResponse])
async def list_jobs(
    status_filter: Optional[str] = Query(None, alias="status", description="open or closed"),
    q: Optional[str] = Query(None, description="Search in title, department, location, type"),
    db: AsyncSession = Depends(get_db),
):
    return await job_service.list_jobs(db, status=status_filter, q=q)


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(job_in: JobCreate, db: AsyncSession = Depends(get_db)):
    """
    Create a job opening.

    - `autoTemplate` fills an empty description from a template
    - `test` attaches a screening test (passing percent clamped to 0-100)
    - `externalPost` records a `job.externalPostStub` notification
    """
    job = await job_service.create_job(db, job_in)
    await db.commit()
    return job


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: int, db: AsyncSession = Depends(get_db)):
    return await job_service.get_job(db, job_id)


@router.patch("/{job_id}", response_model=JobResponse)
async def update_job(job_id: int, job_in: JobUpdate, db: AsyncSession = Depends(get_db)):
    job = await job_service.update_job(db, job_id, job_in)
    await db.commit()
    return job


@router.delete("/{job_id}", response_model=OkResponse)
async def delete_job(job_id: int, db: AsyncSession = Depends(get_db)):
    await job_service.delete_job(db, job_id)
    await db.commit()
    logger.info("job_deleted", job_id=job_id)
    return OkResponse()
