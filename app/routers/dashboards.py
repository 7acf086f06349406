"""
Dashboard API - one landing view per role

RoleRoutingMiddleware has already redirected users away from the other
role's area before these handlers run; the role dependencies below enforce
the same rule for clients that skip the middleware.
"""

from typing import Dict

import structlog
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, require_role
from app.core.security import Role
from app.models.candidate import Candidate
from app.models.job import Job
from app.models.user import User
from app.schemas.analytics import AnalyticsSnapshot
from app.schemas.auth import UserResponse
from app.schemas.common import CamelModel
from app.services.analytics import compute_snapshot

logger = structlog.get_logger(__name__)
router = APIRouter()


class AdminDashboardResponse(CamelModel):
    open_jobs: int
    candidates: int
    users_by_role: Dict[str, int]
    pipeline: AnalyticsSnapshot


class EmployeeDashboardResponse(BaseModel):
    user: UserResponse


@router.get("/admin/dashboard", response_model=AdminDashboardResponse)
async def admin_dashboard(
    current_user: User = Depends(require_role(Role.ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    """Headline recruitment numbers for admins."""
    open_jobs = await db.scalar(select(func.count()).select_from(Job).where(Job.status == "open"))
    candidates = await db.scalar(select(func.count()).select_from(Candidate))

    result = await db.execute(select(User.role, func.count(User.id)).group_by(User.role))
    users_by_role = {role.value: 0 for role in Role}
    for role, count in result.all():
        users_by_role[role] = count

    snapshot = await compute_snapshot(db)
    logger.debug("admin_dashboard_served", user_id=current_user.id)

    return AdminDashboardResponse(
        open_jobs=open_jobs or 0,
        candidates=candidates or 0,
        users_by_role=users_by_role,
        pipeline=AnalyticsSnapshot(**snapshot),
    )


@router.get("/employee/dashboard", response_model=EmployeeDashboardResponse)
async def employee_dashboard(current_user: User = Depends(require_role(Role.EMPLOYEE))):
    """The signed-in employee's own profile."""
    return EmployeeDashboardResponse(user=UserResponse.model_validate(current_user))
