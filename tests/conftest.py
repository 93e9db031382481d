import os
import tempfile

UPLOAD_DIR = tempfile.mkdtemp(prefix="portfolio-tests-")

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["UPLOAD_DIR"] = UPLOAD_DIR
os.environ["MEDIA_BASE_URL"] = ""
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from portfolio.core.security import create_access_token
from portfolio.db.base import Base
from portfolio.db.session import build_engine, get_db
from portfolio.main import app
from portfolio.models.blog_post import BlogPost


@pytest_asyncio.fixture
async def engine():
    """Fresh in-memory database per test, foreign keys enforced."""
    engine = build_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_maker):
    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict[str, str]:
    token = create_access_token("owner@example.com", role="admin")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def reader_headers() -> dict[str, str]:
    """Valid token without the admin role."""
    token = create_access_token("reader@example.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_post(session_maker):
    """Insert a blog post in its own committed transaction and return its id."""
    counter = {"n": 0}

    async def _make(**overrides) -> int:
        counter["n"] += 1
        values = {
            "title": f"Post {counter['n']}",
            "slug": f"post-{counter['n']}",
            "excerpt": "Short summary",
            "content": "Body of the post",
            "cover_image_url": "/uploads/blog/cover.png",
            "published_at": f"2026-01-{counter['n']:02d}",
            "author": "Owner",
            "is_featured": False,
            "tags": [],
        }
        values.update(overrides)
        async with session_maker() as session:
            post = BlogPost(**values)
            session.add(post)
            await session.commit()
            return post.id

    return _make
