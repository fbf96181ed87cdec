"""Cat Repository — bounded read queries over the cats table.

Invariants:
    - list_cats never returns more than `limit` rows and imposes no ORDER BY
    - get_cat returns None for zero rows; id is a primary key so never more than one
    - Every SQLAlchemy or socket error is re-raised as QueryFailedError (chained)
    - The repository never acquires or releases connections itself
"""

import logging

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection

from catapi.core.domain_types import CatId, CatRecord
from catapi.core.errors import QueryFailedError
from catapi.models.cat import Cat

logger = logging.getLogger(__name__)

_COLUMNS = (Cat.id, Cat.name, Cat.image_path)


class SqlCatRepository:
    """CatRepository backed by SQLAlchemy Core statements."""

    async def list_cats(self, conn: AsyncConnection, limit: int) -> list[CatRecord]:
        rows = await self._fetch(conn, select(*_COLUMNS).limit(limit), "list_cats")
        return [_to_record(row) for row in rows]

    async def get_cat(self, conn: AsyncConnection, cat_id: CatId) -> CatRecord | None:
        stmt = select(*_COLUMNS).where(Cat.id == cat_id)
        rows = await self._fetch(conn, stmt, "get_cat")
        return _to_record(rows[0]) if rows else None

    async def _fetch(self, conn: AsyncConnection, stmt: Select, operation: str) -> list:
        try:
            result = await conn.execute(stmt)
            return list(result.all())
        except (SQLAlchemyError, OSError) as e:
            logger.error(
                f"DB query failed ({operation}): {e}",
                extra={"operation": operation},
            )
            raise QueryFailedError(operation) from e


def _to_record(row) -> CatRecord:
    return CatRecord(id=row.id, name=row.name, image_path=row.image_path)
