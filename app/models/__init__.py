"""Database models."""

# Import all models in dependency order to ensure proper relationship initialization

# Base models (no foreign keys)
from app.models.user import User
from app.models.job import Job
from app.models.candidate import Candidate
from app.models.notification import Notification

# Models with foreign keys to base models
from app.models.application import Application
from app.models.feedback import Feedback

# Export all models
__all__ = [
    "User",
    "Job",
    "Candidate",
    "Notification",
    "Application",
    "Feedback",
]
