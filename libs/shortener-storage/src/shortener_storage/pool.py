"""Async connection pool wrapper for psycopg3."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Self

import structlog
from psycopg import AsyncConnection
from psycopg.rows import dict_row
from psycopg_pool import AsyncConnectionPool, PoolClosed

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from shortener_storage.config import DatabaseConfig

logger = structlog.get_logger(__name__)


class ConnectionPool:
    """Manages an async psycopg connection pool.

    Connections are handed out with dict rows. A connection block that exits
    cleanly is committed; one that raises is rolled back.
    """

    def __init__(self, config: DatabaseConfig) -> None:
        self._config = config
        self._pool: AsyncConnectionPool[AsyncConnection[dict[str, object]]] | None = None

    async def open(self) -> None:
        """Create and open the connection pool."""
        self._pool = AsyncConnectionPool[AsyncConnection[dict[str, object]]](
            conninfo=self._config.dsn,
            min_size=self._config.min_pool_size,
            max_size=self._config.max_pool_size,
            timeout=self._config.pool_timeout,
            open=False,
            kwargs={
                "row_factory": dict_row,
                "application_name": self._config.application_name,
            },
        )
        await self._pool.open()
        logger.info(
            "connection_pool_opened",
            host=self._config.host,
            database=self._config.name,
            min_size=self._config.min_pool_size,
            max_size=self._config.max_pool_size,
        )

    async def close(self) -> None:
        """Close the connection pool."""
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
            logger.info("connection_pool_closed")

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[AsyncConnection[dict[str, object]]]:
        """Yield an async connection from the pool.

        Raises PoolClosed, a psycopg OperationalError, if the pool is not open.
        """
        if self._pool is None:
            msg = "Connection pool is not open. Call open() first."
            raise PoolClosed(msg)
        async with self._pool.connection() as conn:
            yield conn

    async def __aenter__(self) -> Self:
        await self.open()
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.close()
