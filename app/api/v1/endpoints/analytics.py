"""Recruitment funnel analytics."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.schemas.analytics import AnalyticsSnapshot
from app.services.analytics import compute_snapshot

router = APIRouter()


@router.get("", response_model=AnalyticsSnapshot)
async def get_analytics(db: AsyncSession = Depends(get_db)):
    """
    Pipeline snapshot.

    - `byStage` always lists all six stages, zero-filled
    - `offerToHireRatio` is hires / offers * 100, or 0 with no offers
    - `bottleneck` is the busiest of applied, screening, interview, offer
    """
    return await compute_snapshot(db)
