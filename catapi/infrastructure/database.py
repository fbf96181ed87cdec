"""Database Connection Pool — bounded async pool that leases one connection per request.

Invariants:
    - Never more than pool_size + max_overflow connections checked out
    - Acquisition waits at most pool_timeout seconds, then fails (never hangs)
    - Every leased connection is closed (returned to the pool) on every exit path
    - Acquisition failures surface as PoolUnavailableError, never raw driver errors

Design Decisions:
    - SQLAlchemy async engine over a hand-rolled free-list: AsyncAdaptedQueuePool
      already serializes checkout/checkin and enforces the timeout
    - Pool built once in the FastAPI lifespan and stored on app.state; routes reach
      it through get_db_pool, so tests can override the dependency
    - Raw AsyncConnection instead of AsyncSession: reads only, no unit of work needed
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError, TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.pool import AsyncAdaptedQueuePool, QueuePool

from catapi.core.domain_types import PoolFailure
from catapi.core.errors import PoolUnavailableError

logger = logging.getLogger(__name__)


class DatabasePool:
    """Lends pooled connections with failure mapping and health checks."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    @asynccontextmanager
    async def connection(self) -> AsyncGenerator[AsyncConnection, None]:
        """Lease a connection for the duration of the block."""
        conn = await self._acquire()
        try:
            yield conn
        finally:
            await conn.close()

    async def _acquire(self) -> AsyncConnection:
        try:
            return await self.engine.connect()
        except PoolTimeoutError as e:
            logger.error(f"DB pool exhausted: {e}")
            raise PoolUnavailableError(PoolFailure.EXHAUSTED) from e
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"DB connect failed: {e}")
            raise PoolUnavailableError(PoolFailure.UNAVAILABLE) from e

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.connection() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    def status(self) -> dict:
        """Snapshot of pool occupancy."""
        pool = self.engine.pool
        if isinstance(pool, QueuePool):
            return {
                "size": pool.size(),
                "checked_out": pool.checkedout(),
                "checked_in": pool.checkedin(),
                "overflow": pool.overflow(),
            }
        return {"pool": pool.status()}

    async def dispose(self) -> None:
        await self.engine.dispose()


def create_db_pool(
    database_url: str,
    pool_size: int = 10,
    max_overflow: int = 0,
    pool_timeout: float = 30.0,
) -> DatabasePool:
    """Build the process-wide pool. Called once from the lifespan."""
    engine = create_async_engine(
        database_url,
        poolclass=AsyncAdaptedQueuePool,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_timeout=pool_timeout,
        pool_pre_ping=True,
        pool_recycle=3600,
    )
    return DatabasePool(engine)


def get_db_pool(request: Request) -> DatabasePool:
    """FastAPI dependency for the pool built in the lifespan."""
    pool = getattr(request.app.state, "db_pool", None)
    if pool is None:
        raise RuntimeError("Database pool not initialized")
    return pool
