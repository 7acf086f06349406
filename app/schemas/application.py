"""Application and pipeline stage schemas."""

from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import Field, field_validator

from app.schemas.common import CamelModel, LooseStr


class ScreeningAnswer(CamelModel):
    """Answer to one screening question; multi-answer questions send a list."""

    question_id: str = ""
    answer: Union[List[str], str] = ""

    @field_validator("question_id", mode="before")
    @classmethod
    def coerce_question_id(cls, v):
        return "" if v is None else str(v)

    @field_validator("answer", mode="before")
    @classmethod
    def coerce_answer(cls, v):
        if isinstance(v, (list, tuple)):
            return [str(item) for item in v]
        return "" if v is None else str(v)


class ApplicationCreate(CamelModel):
    job_id: Optional[int] = None
    candidate_id: Optional[int] = None
    stage: LooseStr = None
    notes: LooseStr = None
    answers: List[ScreeningAnswer] = Field(default_factory=list)

    @field_validator("answers", mode="before")
    @classmethod
    def coerce_answers(cls, v):
        return v if isinstance(v, list) else []


class ApplicationUpdate(CamelModel):
    """Partial update. An unknown ``stage`` is dropped, not rejected."""

    job_id: Optional[int] = None
    candidate_id: Optional[int] = None
    stage: LooseStr = None
    notes: LooseStr = None


class StageTransitionRequest(CamelModel):
    stage: LooseStr = None


class ApplicationResponse(CamelModel):
    id: int
    job_id: int
    candidate_id: int
    stage: str
    notes: Optional[str] = None
    score_percent: Optional[int] = None
    passed: Optional[bool] = None
    answers: Optional[List[Any]] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
