"""Integration test fixtures.

These fixtures talk to the MySQL server named by DATABASE_URL (see the
root conftest) and skip the test when it is not reachable.
"""

import aiomysql
import pytest

import app.db.pool as pool_module
from app.config import settings


@pytest.fixture
async def db_pool(monkeypatch):
    """Create the test database and install a real pool as the app's global pool."""
    conn_kwargs = pool_module._parse_database_url(settings.DATABASE_URL)
    db_name = conn_kwargs.pop("db")

    try:
        root_conn = await aiomysql.connect(autocommit=True, connect_timeout=2, **conn_kwargs)
    except (aiomysql.Error, OSError) as exc:
        pytest.skip(f"MySQL not reachable: {exc}")

    async with root_conn.cursor() as cur:
        await cur.execute(f"CREATE DATABASE IF NOT EXISTS `{db_name}`")
    root_conn.close()

    monkeypatch.setattr(pool_module, "_pool", None)
    monkeypatch.setattr(pool_module, "_pool_creation", None)
    pool = await pool_module.init_pool(settings)

    yield pool

    await pool_module.close_pool()
