"""Cat Handlers — list_cats and get_cat, composing validator, pool and repository.

Invariants:
    - get_cat validates before acquiring a connection (bad input never spends a lease)
    - A connection is held only inside one `async with pool.connection()` block
    - Zero rows is RecordNotFoundError; store malfunction is QueryFailedError
    - No retries: every failure propagates immediately to the error mapper

Design Decisions:
    - Pool and repository injected through the constructor: tests pass fakes
    - Handlers return domain records; the route layer serializes them
"""

import logging

from catapi.core.domain_types import LIST_LIMIT, CatRecord
from catapi.core.errors import RecordNotFoundError
from catapi.core.repository_protocols import CatRepository, ConnectionPool
from catapi.core.validate_cat_id import validate_cat_id

logger = logging.getLogger(__name__)


class CatHandlers:
    """Request handlers for the cats endpoints."""

    def __init__(self, pool: ConnectionPool, repository: CatRepository):
        self.pool = pool
        self.repository = repository

    async def list_cats(self) -> list[CatRecord]:
        """Return up to LIST_LIMIT records in store scan order."""
        async with self.pool.connection() as conn:
            cats = await self.repository.list_cats(conn, LIST_LIMIT)
        logger.debug(
            "Listed cats", extra={"row_count": len(cats), "limit": LIST_LIMIT},
        )
        return cats

    async def get_cat(self, raw_id: str) -> CatRecord:
        """Return the record for a raw path id."""
        cat_id = validate_cat_id(raw_id)
        async with self.pool.connection() as conn:
            cat = await self.repository.get_cat(conn, cat_id)
        if cat is None:
            raise RecordNotFoundError(cat_id)
        return cat
