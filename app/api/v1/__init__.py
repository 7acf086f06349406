"""API v1 routes."""

from fastapi import APIRouter, Depends

from app.api.deps import require_admin
from app.api.v1 import auth, users
from app.api.v1.endpoints import (
    analytics,
    applications,
    candidates,
    feedback,
    jobs,
    notifications,
    resume,
)

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(users.router, prefix="/users", tags=["Users"])

# Recruitment - admin only
recruitment_router = APIRouter(dependencies=[Depends(require_admin)])
recruitment_router.include_router(candidates.router, prefix="/candidates", tags=["Recruitment - Candidates"])
recruitment_router.include_router(applications.router, prefix="/applications", tags=["Recruitment - Applications"])
recruitment_router.include_router(jobs.router, prefix="/jobs", tags=["Recruitment - Jobs"])
recruitment_router.include_router(feedback.router, prefix="/feedback", tags=["Recruitment - Feedback"])
recruitment_router.include_router(notifications.router, prefix="/notifications", tags=["Recruitment - Notifications"])
recruitment_router.include_router(analytics.router, prefix="/analytics", tags=["Recruitment - Analytics"])
recruitment_router.include_router(resume.router, prefix="/resume", tags=["Recruitment - Resume"])

api_router.include_router(recruitment_router, prefix="/recruitment")
