"""Shared test fixtures - async SQLite in memory, one schema per test."""

import os

# In-memory SQLite for tests (no Docker needed); set before friendmatch reads its settings
TEST_DATABASE_URL = "sqlite+aiosqlite:///file::memory:?cache=shared&uri=true"
os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from friendmatch.db.database import Base, get_db  # noqa: E402

test_engine = create_async_engine(TEST_DATABASE_URL, echo=False)
test_session_factory = async_sessionmaker(
    test_engine, class_=AsyncSession, expire_on_commit=False
)


async def _override_get_db():
    async with test_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


@pytest.fixture(autouse=True)
async def setup_db():
    """Fresh users/profiles/quiz_responses tables for every test."""
    import friendmatch.models  # noqa: F401

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def db():
    """Direct async DB session for service and store tests."""
    async with test_session_factory() as session:
        yield session
        await session.commit()


@pytest.fixture
def add_user(db):
    """Factory: add_user("maya", name="Maya", bio=...) inserts a user plus profile."""
    from friendmatch.models import Profile, User

    async def _add(user_id: str, name: str | None = None, **profile_fields) -> User:
        user = User(id=user_id, name=name, email=f"{user_id}@example.com")
        db.add(user)
        db.add(Profile(id=user_id, **profile_fields))
        await db.flush()
        return user

    return _add


@pytest.fixture
async def client():
    """HTTP client wired to the app with the test database."""
    from friendmatch.main import app

    app.dependency_overrides[get_db] = _override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
