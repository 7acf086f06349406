"""User administration."""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError, ValidationFailed
from app.core.security import get_password_hash, normalize_role, verify_password
from app.models.user import User
from app.schemas.user import UserCreate

logger = logging.getLogger(__name__)

VALID_ROLE_INPUTS = ("ADMIN", "EMPLOYEE")


async def get_user_by_email(db: AsyncSession, email: str):
    """Case-insensitive lookup."""
    result = await db.execute(select(User).where(func.lower(User.email) == email.strip().lower()))
    return result.scalar_one_or_none()


async def create_user(db: AsyncSession, data: UserCreate) -> User:
    if not data.email or not data.password:
        raise ValidationFailed("Email and password are required")

    email = data.email.strip().lower()
    if await get_user_by_email(db, email) is not None:
        raise ConflictError("User with this email already exists")

    user = User(
        email=email,
        name=data.name or None,
        password_hash=get_password_hash(data.password),
        role=normalize_role(data.role).value,
    )
    db.add(user)
    try:
        await db.flush()
    except IntegrityError:
        # Lost a race with a concurrent create for the same email
        raise ConflictError("User with this email already exists")
    await db.refresh(user)
    logger.info(f"User {user.email} created with role {user.role}")
    return user


async def authenticate(db: AsyncSession, email: str, password: str):
    """Return the user when the credentials match, else None."""
    user = await get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        return None
    return user


async def get_user(db: AsyncSession, user_id: int) -> User:
    user = await db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


async def update_user_role(db: AsyncSession, user_id: int, role) -> User:
    if not role or str(role).strip().upper() not in VALID_ROLE_INPUTS:
        raise ValidationFailed("Invalid role. Use 'ADMIN' or 'EMPLOYEE'")

    user = await get_user(db, user_id)
    user.role = normalize_role(role).value
    await db.flush()
    await db.refresh(user)
    logger.info(f"User {user.email} role set to {user.role}")
    return user


async def delete_user(db: AsyncSession, user_id: int) -> None:
    user = await get_user(db, user_id)
    await db.delete(user)
    await db.flush()
