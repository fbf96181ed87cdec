"""Boundary Protocols — contracts between the request handlers and the store.

Invariants:
    - Handlers depend on these Protocols, never on SQLAlchemy directly
    - A connection obtained from ConnectionPool.connection() is only passed to
      the repository inside that context (never stored, never shared)

Design Decisions:
    - Protocol over ABC: structural subtyping, tests substitute fakes without inheritance
    - Connection typed as object: the handler never inspects it, only hands it on
"""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from catapi.core.domain_types import CatId, CatRecord


class ConnectionPool(Protocol):
    """Contract for the bounded connection pool, implemented by infrastructure.

    connection() raises PoolUnavailableError when no connection can be leased
    and releases the lease on every exit path.
    """
    def connection(self) -> AbstractAsyncContextManager[object]: ...


class CatRepository(Protocol):
    """Contract for record queries, implemented by infrastructure.

    Store malfunctions surface as QueryFailedError.
    """
    async def list_cats(self, conn: object, limit: int) -> list[CatRecord]: ...
    async def get_cat(self, conn: object, cat_id: CatId) -> CatRecord | None: ...
