"""Resume parsing."""

from fastapi import APIRouter

from app.core.exceptions import ValidationFailed
from app.schemas.resume import ResumeParseRequest, ResumeParseResponse
from app.services.resume_parser import decode_base64_text, parse_resume

router = APIRouter()


@router.post("/parse", response_model=ResumeParseResponse)
async def parse(request: ResumeParseRequest):
    """Extract skills, experience and contact details from `text` or `base64`."""
    text = request.text or ""
    if not text and request.base64:
        text = decode_base64_text(request.base64)
    if not text:
        raise ValidationFailed("Provide text or base64")
    return parse_resume(text)
