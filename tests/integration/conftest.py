"""Integration test fixtures — PostgreSQL via testcontainers."""

from collections.abc import AsyncIterator
from typing import Any

import pytest
from psycopg import AsyncConnection
from psycopg.rows import dict_row
from testcontainers.postgres import PostgresContainer  # type: ignore[import-untyped]

from shortener_storage.config import DatabaseConfig
from shortener_storage.pool import ConnectionPool
from shortener_storage.repositories.url import URLRepository

POSTGRES_IMAGE = "postgres:16-alpine"


@pytest.fixture(scope="session")
def postgres_container() -> Any:
    """Start a PostgreSQL container for the test session."""
    with PostgresContainer(
        image=POSTGRES_IMAGE,
        username="test",
        password="test",
        dbname="test_shortener",
    ) as container:
        yield container


@pytest.fixture(scope="session")
def db_config(postgres_container: Any) -> DatabaseConfig:
    """Build a DatabaseConfig pointing at the test container."""
    host = postgres_container.get_container_host_ip()
    port = int(postgres_container.get_exposed_port(5432))
    return DatabaseConfig(
        host=host,
        port=port,
        user="test",
        password="test",
        name="test_shortener",
    )


@pytest.fixture(scope="session")
def _run_migrations(db_config: DatabaseConfig) -> None:
    """Run Alembic migrations against the test database."""
    from alembic import command
    from alembic.config import Config

    alembic_cfg = Config()
    alembic_cfg.set_main_option(
        "script_location",
        "libs/shortener-storage/src/shortener_storage/migrations",
    )
    alembic_cfg.set_main_option("sqlalchemy.url", db_config.dsn)
    command.upgrade(alembic_cfg, "head")


@pytest.fixture
async def pool(
    db_config: DatabaseConfig,
    _run_migrations: None,
) -> AsyncIterator[ConnectionPool]:
    """Provide an open ConnectionPool for each test and empty the table afterwards."""
    async with ConnectionPool(db_config) as p:
        yield p
        async with p.connection() as connection:
            await connection.execute("TRUNCATE url RESTART IDENTITY")


@pytest.fixture
def url_repo(pool: ConnectionPool) -> URLRepository:
    """Provide a URLRepository bound to the test pool."""
    return URLRepository(pool)


@pytest.fixture
async def raw_conn(
    db_config: DatabaseConfig,
    _run_migrations: None,
) -> AsyncIterator[AsyncConnection[dict[str, object]]]:
    """Provide a raw psycopg connection (without pool) for verification queries."""
    conn = await AsyncConnection.connect(db_config.dsn, row_factory=dict_row, autocommit=True)
    try:
        yield conn
    finally:
        await conn.close()
