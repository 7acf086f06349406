"""
Candidate API - recruitment pipeline applicants
"""

from typing import List, Optional

import structlog
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.schemas.candidate import CandidateCreate, CandidateResponse, CandidateUpdate
from app.schemas.common import OkResponse
from app.services import candidates as candidate_service

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("", response_model=List[CandidateResponse])
async def list_candidates(
    q: Optional[str] = Query(None, description="Search in name or email"),
    db: AsyncSession = Depends(get_db),
):
    """List candidates, newest first."""
    return await candidate_service.list_candidates(db, q=q)


@router.post("", response_model=CandidateResponse, status_code=status.HTTP_201_CREATED)
async def create_candidate(candidate_in: CandidateCreate, db: AsyncSession = Depends(get_db)):
    """
    Create a candidate.

    `email` is stored lower-cased; duplicate candidates are not detected.
    """
    candidate = await candidate_service.create_candidate(db, candidate_in)
    await db.commit()
    logger.info("candidate_created", candidate_id=candidate.id)
    return candidate


@router.get("/{candidate_id}", response_model=CandidateResponse)
async def get_candidate(candidate_id: int, db: AsyncSession = Depends(get_db)):
    return await candidate_service.get_candidate(db, candidate_id)


@router.patch("/{candidate_id}", response_model=CandidateResponse)
async def update_candidate(
    candidate_id: int,
    candidate_in: CandidateUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Partially update a candidate.

    Omitted fields keep their value; `"email": null` clears the email.
    """
    candidate = await candidate_service.update_candidate(db, candidate_id, candidate_in)
    await db.commit()
    return candidate


@router.delete("/{candidate_id}", response_model=OkResponse)
async def delete_candidate(candidate_id: int, db: AsyncSession = Depends(get_db)):
    await candidate_service.delete_candidate(db, candidate_id)
    await db.commit()
    logger.info("candidate_deleted", candidate_id=candidate_id)
    return OkResponse()
