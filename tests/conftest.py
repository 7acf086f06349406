"""Shared fixtures.

Every test drives its own event loop with ``asyncio.run``; the fixtures
below hand out async context managers so that the database, the app and the
HTTP client all live inside that single loop.
"""

from contextlib import asynccontextmanager

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.pool import StaticPool

from app.core.security import create_access_token, get_password_hash
from app.db.session import Database
from app.main import create_app
from app.models.user import User

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_PASSWORD = "secret-password"


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_database() -> Database:
    database = Database(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    event.listen(database.engine.sync_engine, "connect", _enable_foreign_keys)
    return database


async def seed_user(database: Database, email: str, role: str, is_active: bool = True) -> User:
    async with database.session_factory() as session:
        user = User(
            email=email,
            name=email.split("@")[0],
            password_hash=get_password_hash(TEST_PASSWORD),
            role=role,
            is_active=is_active,
        )
        session.add(user)
        await session.commit()
        await session.refresh(user)
        return user


def token_for(user: User) -> str:
    return create_access_token({"sub": str(user.id), "role": user.role})


@asynccontextmanager
async def _db_session():
    database = build_database()
    await database.create_all()
    try:
        async with database.session_factory() as session:
            yield session
    finally:
        await database.dispose()


@asynccontextmanager
async def _api_client(role: str = "admin", raise_app_exceptions: bool = True):
    """HTTP client signed in as a freshly seeded user of ``role``.

    ``role=None`` gives an anonymous client. The seeded user is available
    as ``client.user`` and the app as ``client.app``.
    """
    database = build_database()
    await database.create_all()
    app = create_app(database=database)

    headers = {}
    user = None
    if role is not None:
        user = await seed_user(database, f"{role}@example.com", role)
        headers["Authorization"] = f"Bearer {token_for(user)}"

    transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
    try:
        async with AsyncClient(transport=transport, base_url="http://test", headers=headers) as client:
            client.app = app
            client.database = database
            client.user = user
            yield client
    finally:
        await database.dispose()


@pytest.fixture
def db_session():
    return _db_session


@pytest.fixture
def api_client():
    return _api_client
