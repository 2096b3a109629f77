"""Shared fixtures: in-memory database, seeded profiles and an API client."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import hustle_village.models  # noqa: F401
from hustle_village.core.middleware import booking_limiter
from hustle_village.database import Base, get_db
from hustle_village.main import app
from hustle_village.models import Profile, Service
from tests.helpers import make_profile, make_service


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


@pytest.fixture
async def client(session_maker) -> AsyncGenerator[AsyncClient, None]:
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def no_rate_limit() -> None:
        return None

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[booking_limiter] = no_rate_limit
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
async def buyer(db_session) -> Profile:
    return await make_profile(db_session, role="buyer", full_name="Bea Buyer")


@pytest.fixture
async def seller(db_session) -> Profile:
    return await make_profile(db_session, role="seller", full_name="Sam Seller")


@pytest.fixture
async def outsider(db_session) -> Profile:
    return await make_profile(db_session, role="both", full_name="Olly Outsider")


@pytest.fixture
async def service(db_session, seller) -> Service:
    return await make_service(db_session, seller)
