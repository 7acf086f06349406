"""Candidate repository operations."""

import logging
from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError, ValidationFailed
from app.models.candidate import Candidate
from app.schemas.candidate import CandidateCreate, CandidateUpdate

logger = logging.getLogger(__name__)


def normalize_email(email: Optional[str]) -> Optional[str]:
    """Lower-case an email; empty values become None. Format is not checked."""
    if not email:
        return None
    return email.strip().lower() or None


def normalize_skills(skills: List[str]) -> List[str]:
    """Drop repeated skills, keeping first-seen order."""
    seen = set()
    unique = []
    for skill in skills:
        if skill not in seen:
            seen.add(skill)
            unique.append(skill)
    return unique


async def create_candidate(db: AsyncSession, data: CandidateCreate) -> Candidate:
    name = (data.name or "").strip()
    if not name:
        raise ValidationFailed("name is required")

    candidate = Candidate(
        name=name,
        email=normalize_email(data.email),
        phone=data.phone or None,
        skills=normalize_skills(data.skills),
    )
    db.add(candidate)
    await db.flush()
    await db.refresh(candidate)
    return candidate


async def list_candidates(db: AsyncSession, q: Optional[str] = None) -> List[Candidate]:
    """Newest first; ``q`` matches name or email, case-insensitively."""
    query = select(Candidate)
    if q:
        query = query.where(
            or_(
                Candidate.name.icontains(q, autoescape=True),
                Candidate.email.icontains(q, autoescape=True),
            )
        )
    query = query.order_by(Candidate.created_at.desc(), Candidate.id.desc())
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_candidate(db: AsyncSession, candidate_id: int) -> Candidate:
    candidate = await db.get(Candidate, candidate_id)
    if candidate is None:
        raise NotFoundError("Candidate not found")
    return candidate


async def update_candidate(db: AsyncSession, candidate_id: int, data: CandidateUpdate) -> Candidate:
    """Overwrite only the fields present in the request body.

    ``name`` and ``skills`` are ignored when sent as null; ``email`` and
    ``phone`` sent as null clear the stored value.
    """
    candidate = await get_candidate(db, candidate_id)
    fields = data.model_dump(exclude_unset=True)

    if fields.get("name") is not None:
        name = fields["name"].strip()
        if not name:
            raise ValidationFailed("name cannot be empty")
        candidate.name = name
    if "email" in fields:
        candidate.email = normalize_email(fields["email"])
    if "phone" in fields:
        candidate.phone = fields["phone"] or None
    if fields.get("skills") is not None:
        candidate.skills = normalize_skills(fields["skills"])

    await db.flush()
    await db.refresh(candidate)
    return candidate


async def delete_candidate(db: AsyncSession, candidate_id: int) -> None:
    """Delete by id. Candidates with applications are not cascaded."""
    candidate = await get_candidate(db, candidate_id)
    await db.delete(candidate)
    try:
        await db.flush()
    except IntegrityError:
        logger.warning(f"Refused to delete candidate {candidate_id}: still referenced")
        raise ConflictError("Candidate has applications and cannot be deleted")
