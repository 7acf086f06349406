"""
Recruitment funnel analytics.

``build_snapshot`` is pure and holds all the rules; ``compute_snapshot``
only fetches the two counts it needs. The snapshot is not a point-in-time
view: writes landing between the two queries may be reflected in one count
and not the other.
"""

import logging
from typing import Dict, Mapping, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.application import Application
from app.services.stage_policy import ALL_STAGES, PRE_TERMINAL_STAGES, Stage

logger = logging.getLogger(__name__)


def offer_to_hire_ratio(offers: int, hires: int) -> float:
    """Hires per offer as a percentage, one decimal. Zero offers gives 0."""
    if offers > 0:
        return round(hires / offers * 100, 1)
    return 0.0


def find_bottleneck(by_stage: Mapping[str, int]) -> Optional[str]:
    """Pre-terminal stage with the most applications; first one wins ties."""
    bottleneck = None
    best = -1
    for stage in PRE_TERMINAL_STAGES:
        count = by_stage.get(stage, 0)
        if count > best:
            best = count
            bottleneck = stage
    return bottleneck


def build_snapshot(total: int, stage_counts: Mapping[str, int]) -> Dict:
    """Assemble the snapshot. Every canonical stage is present, zero-filled."""
    by_stage = {stage: 0 for stage in ALL_STAGES}
    for stage, count in stage_counts.items():
        if stage in by_stage:
            by_stage[stage] = int(count)

    interviews = by_stage[Stage.INTERVIEW.value]
    offers = by_stage[Stage.OFFER.value]
    hires = by_stage[Stage.HIRED.value]

    return {
        "total": int(total),
        "by_stage": by_stage,
        "interviews": interviews,
        "offers": offers,
        "hires": hires,
        "offer_to_hire_ratio": offer_to_hire_ratio(offers, hires),
        "bottleneck": find_bottleneck(by_stage),
    }


async def compute_snapshot(db: AsyncSession) -> Dict:
    """One grouped count by stage plus one total count."""
    grouped = await db.execute(
        select(Application.stage, func.count(Application.id)).group_by(Application.stage)
    )
    stage_counts = {stage: count for stage, count in grouped.all()}

    total = await db.scalar(select(func.count()).select_from(Application))

    snapshot = build_snapshot(total or 0, stage_counts)
    logger.debug(f"Analytics snapshot computed: total={snapshot['total']}")
    return snapshot
