"""User administration schemas."""

from app.schemas.common import CamelModel, LooseStr


class UserCreate(CamelModel):
    """Create user. Required fields are checked by the service (400 on miss)."""

    email: LooseStr = None
    password: LooseStr = None
    name: LooseStr = None
    role: LooseStr = None


class UserRoleUpdate(CamelModel):
    role: LooseStr = None
