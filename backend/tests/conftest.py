"""Root conftest: test environment and per-test in-memory database.

Invariants:
    - Required settings exist before qrdesk.main is imported (it reads them at import)
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("STRIPE_SECRET_KEY", "sk_test_fake_key")

import pytest  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from qrdesk.core.passwords import build_password_context  # noqa: E402
from qrdesk.core.tokens import TokenService  # noqa: E402
from qrdesk.db.base import Base  # noqa: E402
import qrdesk.models  # noqa: E402,F401

TEST_JWT_SECRET = "test-jwt-secret"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enforce_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

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
def token_service():
    return TokenService(TEST_JWT_SECRET)


@pytest.fixture
def password_context():
    return build_password_context(10)
