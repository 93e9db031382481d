import pytest
from sqlalchemy import text

from portfolio.db.session import build_engine


@pytest.mark.asyncio
async def test_sqlite_enforces_foreign_keys(engine):
    async with engine.connect() as conn:
        assert (await conn.execute(text("PRAGMA foreign_keys"))).scalar() == 1


@pytest.mark.asyncio
async def test_server_url_gets_sized_pool():
    engine = build_engine("postgresql+asyncpg://user:pw@localhost:5432/portfolio_db")

    assert engine.pool.size() == 10
    await engine.dispose()
