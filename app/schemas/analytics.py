"""Recruitment analytics schemas."""

from typing import Dict, Optional

from app.schemas.common import CamelModel


class AnalyticsSnapshot(CamelModel):
    """Funnel snapshot, recomputed on every request."""

    total: int
    by_stage: Dict[str, int]
    interviews: int
    offers: int
    hires: int
    offer_to_hire_ratio: float
    bottleneck: Optional[str] = None
