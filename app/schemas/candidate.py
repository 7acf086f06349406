"""Candidate schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.schemas.common import CamelModel, LooseStr, OptionalStrList, StrList


class CandidateCreate(CamelModel):
    """Create candidate. ``name`` is checked by the service so that a blank
    name gets the same 400 as a missing one."""

    name: LooseStr = None
    email: LooseStr = None
    phone: LooseStr = None
    skills: StrList = Field(default_factory=list)


class CandidateUpdate(CamelModel):
    """Partial update. Fields left out of the body are untouched;
    ``email: null`` and ``phone: null`` clear the stored value."""

    name: LooseStr = None
    email: LooseStr = None
    phone: LooseStr = None
    skills: OptionalStrList = None


class CandidateResponse(CamelModel):
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: Optional[datetime] = None
