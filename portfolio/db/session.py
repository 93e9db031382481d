"""Engine, declarative base and the per-request session dependency."""
from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from portfolio.core.config import settings

SERVER_POOL_OPTIONS = {
    "pool_pre_ping": True,
    "pool_size": 10,
    "max_overflow": 20,
    "connect_args": {"timeout": 10},
}


def _sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, **overrides: Any) -> AsyncEngine:
    """Engine for any async URL.

    PostgreSQL gets a sized pool. SQLite keeps its own pool class and has foreign keys
    switched on per connection, so post and comment cascades behave the same in local runs.
    """
    is_sqlite = url.startswith("sqlite")
    options: dict[str, Any] = {"echo": settings.DEBUG}
    if not is_sqlite:
        options.update(SERVER_POOL_OPTIONS)
    options.update(overrides)
    new_engine = create_async_engine(url, **options)
    if is_sqlite:
        event.listen(new_engine.sync_engine, "connect", _sqlite_foreign_keys)
    return new_engine


engine = build_engine(settings.DATABASE_URL)


class Base(DeclarativeBase):
    pass


async_session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """One session per request. Endpoints commit their own writes; anything left is committed here."""
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
