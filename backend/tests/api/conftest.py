"""API test fixtures — async DB, deterministic stamps, FastAPI test client, accounts.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db and get_stamps dependencies overridden for the test's lifetime
    - db_manager patched so the readiness probe sees the test engine
    - The clock starts a minute in the past and advances 1ms per call: rows get
      distinct created_at values and freshly issued tokens are already valid

Design Decisions:
    - StaticPool: one shared connection keeps the in-memory database alive
      across sessions
    - Accounts are created through the join endpoints, so every test also
      exercises the real token path
"""

import itertools
import uuid
from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

import shopping_mall.infrastructure.database as db_module
import shopping_mall.models  # noqa: F401
from shopping_mall.core.capabilities import Stamps
from shopping_mall.db.base import Base
from shopping_mall.infrastructure.clock import get_stamps
from shopping_mall.infrastructure.database import DatabaseSessionManager, get_db
from shopping_mall.main import app
from tests.api.helpers import (
    admin_payload, create_channel, create_sale, join, latest_snapshot,
    member_payload, seller_payload,
)


class FakeClock:
    def __init__(self, start: datetime, step: timedelta = timedelta(milliseconds=1)):
        self.current = start
        self.step = step

    def now(self) -> datetime:
        self.current += self.step
        return self.current


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def clock():
    return FakeClock(datetime.now(timezone.utc) - timedelta(seconds=60))


@pytest.fixture
def stamps(clock):
    counter = itertools.count(1)
    return Stamps(clock=clock, new_id=lambda: uuid.UUID(int=next(counter)))


@pytest.fixture
async def client(test_engine, test_session_factory, stamps):
    """FastAPI test client with DB and stamps dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_stamps] = lambda: stamps

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


# ─── Accounts ────────────────────────────────────────────────────

@pytest.fixture
async def member(client):
    return await join(client, "member", member_payload())


@pytest.fixture
async def other_member(client):
    return await join(client, "member", member_payload("other@example.com"))


@pytest.fixture
async def seller(client):
    return await join(client, "seller", seller_payload())


@pytest.fixture
async def other_seller(client):
    return await join(client, "seller", seller_payload("rival@example.com"))


@pytest.fixture
async def admin(client):
    return await join(client, "admin", admin_payload())


@pytest.fixture
async def guest(client):
    return await join(client, "guest", {"ip_address": "10.0.0.1", "user_agent": "pytest"})


@pytest.fixture
async def channel(client, admin):
    return await create_channel(client, admin)


@pytest.fixture
async def snapshot(client, seller, channel):
    """Snapshot recorded when the seller's sale was created."""
    sale = await create_sale(client, seller, channel["id"], code="SNAP-1")
    return await latest_snapshot(client, seller, sale["id"])
