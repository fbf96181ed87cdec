"""Root conftest — shared test configuration and a real SQLAlchemy pool over SQLite.

Invariants:
    - DATABASE_URL set before catapi.main is imported (settings are read at import)
    - Every test gets a fresh file-backed SQLite database under tmp_path
    - Test pools are real AsyncAdaptedQueuePools: size 2, no overflow, short timeout

Design Decisions:
    - File database over :memory:, which forces StaticPool, which has no
      capacity limit to exercise
    - get_db_pool overridden: ASGITransport does not run the lifespan
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import insert  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import AsyncAdaptedQueuePool  # noqa: E402

from catapi.db.base import Base  # noqa: E402
from catapi.infrastructure.database import DatabasePool, get_db_pool  # noqa: E402
from catapi.main import app  # noqa: E402
from catapi.models.cat import Cat  # noqa: E402

TOM = {"id": 1, "name": "Tom", "image_path": "tom.png"}
FELIX = {"id": 2, "name": "Felix", "image_path": "felix.png"}


@pytest.fixture
async def engine_factory():
    """Build pooled SQLite engines; all disposed at teardown."""
    engines = []

    def make(path, pool_size=2, pool_timeout=0.2):
        engine = create_async_engine(
            f"sqlite+aiosqlite:///{path}",
            poolclass=AsyncAdaptedQueuePool,
            pool_size=pool_size,
            max_overflow=0,
            pool_timeout=pool_timeout,
        )
        engines.append(engine)
        return engine

    yield make
    for engine in engines:
        await engine.dispose()


@pytest.fixture
def bare_engine(engine_factory, tmp_path):
    """Engine over an empty database file with no cats table."""
    return engine_factory(tmp_path / "bare.db")


@pytest.fixture
async def test_engine(engine_factory, tmp_path):
    engine = engine_factory(tmp_path / "cats.db")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    return engine


@pytest.fixture
async def seed_cats(test_engine):
    """Insert Tom and Felix."""
    async with test_engine.begin() as conn:
        await conn.execute(insert(Cat), [TOM, FELIX])
    return [TOM, FELIX]


@pytest.fixture
def db_pool(test_engine):
    return DatabasePool(test_engine)


@pytest.fixture
async def client(db_pool):
    """FastAPI test client with the pool dependency overridden."""
    app.dependency_overrides[get_db_pool] = lambda: db_pool
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
