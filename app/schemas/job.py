"""Job opening schemas."""

from datetime import datetime, timezone
from typing import Annotated, Any, List, Optional

from pydantic import AfterValidator, Field, field_validator

from app.schemas.common import CamelModel, LooseStr, OptionalStrList, StrList


def _to_naive_utc(v: Optional[datetime]) -> Optional[datetime]:
    """Columns are timezone-naive UTC."""
    if v is not None and v.tzinfo is not None:
        return v.astimezone(timezone.utc).replace(tzinfo=None)
    return v


UtcDatetime = Annotated[Optional[datetime], AfterValidator(_to_naive_utc)]


class ScreeningQuestion(CamelModel):
    id: LooseStr = None
    text: LooseStr = None
    options: OptionalStrList = None
    correct_answers: StrList = Field(default_factory=list)


class ScreeningTestConfig(CamelModel):
    enabled: bool = False
    passing_percent: Optional[float] = None
    questions: List[ScreeningQuestion] = Field(default_factory=list)

    @field_validator("questions", mode="before")
    @classmethod
    def coerce_questions(cls, v):
        return v if isinstance(v, list) else []


class JobCreate(CamelModel):
    """Create job. Only ``title`` is required; the service enforces it."""

    title: LooseStr = None
    department: LooseStr = None
    location: LooseStr = None
    type: LooseStr = None
    description: LooseStr = None
    description_rich: LooseStr = None
    expires_at: UtcDatetime = None
    auto_template: bool = False
    external_post: bool = False
    status: LooseStr = None
    test: Optional[ScreeningTestConfig] = None


class JobUpdate(CamelModel):
    """Partial update. ``status`` other than open/closed is ignored."""

    title: LooseStr = None
    department: LooseStr = None
    location: LooseStr = None
    type: LooseStr = None
    description: LooseStr = None
    description_rich: LooseStr = None
    expires_at: UtcDatetime = None
    status: LooseStr = None


class JobResponse(CamelModel):
    id: int
    title: str
    department: Optional[str] = None
    location: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    description_rich: Optional[str] = None
    expires_at: Optional[datetime] = None
    auto_template: bool = False
    external_post: bool = False
    status: str
    test_enabled: bool = False
    test_passing_percent: Optional[int] = None
    test: Optional[Any] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
