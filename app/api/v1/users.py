"""User administration endpoints."""

import structlog
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, require_admin
from app.models.user import User
from app.schemas.auth import UserResponse
from app.schemas.common import OkResponse
from app.schemas.user import UserCreate, UserRoleUpdate
from app.services import users as user_service

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_in: UserCreate,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """
    Create a user account.

    Emails are unique case-insensitively; a duplicate returns 409.

    **RBAC**: admin
    """
    user = await user_service.create_user(db, user_in)
    await db.commit()
    logger.info("user_created", user_id=user.id, by=current_user.id)
    return user


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user_role(
    user_id: int,
    role_in: UserRoleUpdate,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """
    Change a user's role to ADMIN or EMPLOYEE.

    **RBAC**: admin
    """
    user = await user_service.update_user_role(db, user_id, role_in.role)
    await db.commit()
    logger.info("user_role_updated", user_id=user_id, role=user.role, by=current_user.id)
    return user


@router.delete("/{user_id}", response_model=OkResponse)
async def delete_user(
    user_id: int,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """
    Delete a user.

    **RBAC**: admin
    """
    await user_service.delete_user(db, user_id)
    await db.commit()
    logger.info("user_deleted", user_id=user_id, by=current_user.id)
    return OkResponse()
