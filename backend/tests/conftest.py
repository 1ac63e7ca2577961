from __future__ import annotations

from collections.abc import AsyncGenerator
from datetime import datetime

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from fintrack.api.deps import get_clock
from fintrack.database import Base, get_db
from fintrack.main import app
from fintrack.models import *  # noqa: F401, F403 (registers every mapped model)
from fintrack.models.user import User
from fintrack.reporting.clock import FixedClock
from fintrack.services.auth_service import create_access_token

FIXED_NOW = datetime(2024, 7, 15, 12, 0, 0)


@pytest.fixture()
async def async_db(tmp_path) -> AsyncGenerator[AsyncSession]:
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with session_factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture()
def fixed_clock() -> FixedClock:
    return FixedClock(FIXED_NOW)


@pytest.fixture()
async def client(
    async_db: AsyncSession, fixed_clock: FixedClock
) -> AsyncGenerator[httpx.AsyncClient]:
    async def _override_get_db() -> AsyncGenerator[AsyncSession]:
        yield async_db

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_clock] = lambda: fixed_clock

    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture()
async def test_user(async_db: AsyncSession) -> User:
    user = User(username="testuser", email="test@test.com")
    async_db.add(user)
    await async_db.commit()
    await async_db.refresh(user)
    return user


@pytest.fixture()
def auth_token(test_user: User) -> str:
    return create_access_token(test_user.id)


@pytest.fixture()
def auth_headers(auth_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {auth_token}"}
