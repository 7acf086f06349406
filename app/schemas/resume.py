"""Resume parsing schemas."""

from typing import List, Optional

from app.schemas.common import CamelModel, LooseStr


class ResumeParseRequest(CamelModel):
    text: LooseStr = None
    base64: LooseStr = None


class ResumeParseResponse(CamelModel):
    skills: List[str]
    years_of_experience: Optional[int] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    summary: str
