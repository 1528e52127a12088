"""URL repository — async save/get/delete for the url table."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, cast

import psycopg
import structlog
from psycopg.sql import SQL

from shortener_storage.exceptions import (
    StorageOperationError,
    URLExistsError,
    URLNotFoundError,
    is_unique_violation,
)
from shortener_storage.mappers import URLRecordMapper

if TYPE_CHECKING:
    from shortener_core.models.entities import URLRecord
    from shortener_storage.pool import ConnectionPool

logger = structlog.get_logger(__name__)


class URLRepository:
    """Async repository for alias → URL mappings against PostgreSQL.

    Every call checks a connection out of the pool and runs a single
    statement on it, so the repository keeps no state of its own and can be
    shared between concurrent tasks. Alias uniqueness is left to the table's
    UNIQUE constraint.

    Each operation takes an optional ``timeout`` in seconds. When it expires
    the running statement is cancelled and ``StorageOperationError`` is raised.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    async def save(self, url: str, alias: str, *, timeout: float | None = None) -> int:
        """Insert a new mapping and return its id. Raises URLExistsError if the alias is taken."""
        op = "storage.postgres.save"
        try:
            async with (
                asyncio.timeout(timeout),
                self._pool.connection() as conn,
                conn.cursor() as cur,
            ):
                await cur.execute(
                    SQL("INSERT INTO url (alias, url) VALUES (%(alias)s, %(url)s) RETURNING id"),
                    {"alias": alias, "url": url},
                )
                row = await cur.fetchone()
        except psycopg.Error as exc:
            if is_unique_violation(exc):
                logger.debug("url_alias_taken", alias=alias)
                raise URLExistsError(alias) from None
            raise self._failed(op, exc) from exc
        except TimeoutError as exc:
            raise self._failed(op, exc) from exc
        if row is None:  # pragma: no cover
            msg = "INSERT RETURNING produced no rows"
            raise self._failed(op, RuntimeError(msg))
        url_id = int(cast("int", row["id"]))
        logger.info("url_saved", alias=alias, id=url_id)
        return url_id

    async def get(self, alias: str, *, timeout: float | None = None) -> str:
        """Return the URL stored under *alias*. Raises URLNotFoundError if missing."""
        op = "storage.postgres.get"
        try:
            async with (
                asyncio.timeout(timeout),
                self._pool.connection() as conn,
                conn.cursor() as cur,
            ):
                await cur.execute(
                    SQL("SELECT url FROM url WHERE alias = %(alias)s"),
                    {"alias": alias},
                )
                row = await cur.fetchone()
        except (psycopg.Error, TimeoutError) as exc:
            raise self._failed(op, exc) from exc
        if row is None:
            raise URLNotFoundError(alias)
        return str(row["url"])

    async def get_record(self, alias: str, *, timeout: float | None = None) -> URLRecord:
        """Return the full record stored under *alias*. Raises URLNotFoundError if missing."""
        op = "storage.postgres.get_record"
        try:
            async with (
                asyncio.timeout(timeout),
                self._pool.connection() as conn,
                conn.cursor() as cur,
            ):
                await cur.execute(
                    SQL("SELECT id, alias, url FROM url WHERE alias = %(alias)s"),
                    {"alias": alias},
                )
                row = await cur.fetchone()
        except (psycopg.Error, TimeoutError) as exc:
            raise self._failed(op, exc) from exc
        if row is None:
            raise URLNotFoundError(alias)
        return URLRecordMapper.from_row(dict(row))

    async def delete(self, alias: str, *, timeout: float | None = None) -> int:
        """Delete the mapping for *alias* and return the number of removed rows.

        Raises URLNotFoundError when nothing was deleted.
        """
        op = "storage.postgres.delete"
        try:
            async with (
                asyncio.timeout(timeout),
                self._pool.connection() as conn,
                conn.cursor() as cur,
            ):
                await cur.execute(
                    SQL("DELETE FROM url WHERE alias = %(alias)s"),
                    {"alias": alias},
                )
                affected = cur.rowcount
        except (psycopg.Error, TimeoutError) as exc:
            raise self._failed(op, exc) from exc
        if affected < 0:
            raise self._failed(op, RuntimeError("affected row count is unavailable"))
        if affected == 0:
            raise URLNotFoundError(alias)
        logger.info("url_deleted", alias=alias, affected=affected)
        return affected

    @staticmethod
    def _failed(op: str, exc: BaseException) -> StorageOperationError:
        logger.debug("storage_operation_failed", op=op, error=repr(exc))
        return StorageOperationError(op, exc)
