"""Heuristic resume text parser."""

import base64
import binascii
import re
from typing import Dict, Optional

from app.config import settings

KNOWN_SKILLS = [
    "javascript", "typescript", "react", "next", "node", "express", "postgres", "prisma", "tailwind",
    "python", "django", "flask", "java", "spring", "aws", "gcp", "azure", "docker", "kubernetes",
]

YEARS_PATTERN = re.compile(r"(\d+)[+]?\s*(years|yrs)", re.IGNORECASE)
EMAIL_PATTERN = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE)
PHONE_PATTERN = re.compile(r"\+?\d[\d\s\-]{7,}\d")


def decode_base64_text(value: Optional[str]) -> str:
    """Decode base64 into UTF-8 text; undecodable input yields ''."""
    if not value:
        return ""
    try:
        raw = base64.b64decode(value)
    except (binascii.Error, ValueError):
        return ""
    return raw.decode("utf-8", errors="replace")


def parse_resume(text: str, summary_length: Optional[int] = None) -> Dict:
    """Pull skills, years of experience and contact details out of plain text.

    Skills are substring hits against ``KNOWN_SKILLS`` (so "javascript" also
    reports "java"), returned in list order without duplicates.
    """
    if summary_length is None:
        summary_length = settings.RESUME_SUMMARY_LENGTH

    lower = text.lower()
    skills = [skill for skill in KNOWN_SKILLS if skill in lower]

    years_match = YEARS_PATTERN.search(text)
    email_match = EMAIL_PATTERN.search(text)
    phone_match = PHONE_PATTERN.search(text)

    return {
        "skills": skills,
        "years_of_experience": int(years_match.group(1)) if years_match else None,
        "email": email_match.group(0) if email_match else None,
        "phone": phone_match.group(0) if phone_match else None,
        "summary": text[:summary_length],
    }
