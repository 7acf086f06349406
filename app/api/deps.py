"""
API Dependencies
Common dependencies for API endpoints (database session, authentication, roles)
"""

from app.core.security import get_current_user, require_admin, require_role
from app.db.session import get_db

__all__ = ["get_db", "get_current_user", "require_admin", "require_role"]
