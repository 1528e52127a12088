"""Database settings for the url store, read from SHORTENER_DB_* env vars."""

from pydantic import Field
from pydantic_settings import BaseSettings


class DatabaseConfig(BaseSettings):
    """Where the url table lives and how many connections to keep to it.

    The defaults match a local development database.
    """

    model_config = {"env_prefix": "SHORTENER_DB_"}

    host: str = "localhost"
    port: int = Field(default=5432, gt=0, lt=65536)
    user: str = "shortener"
    password: str = "shortener_dev"  # noqa: S105
    name: str = "shortener"

    # Shown in pg_stat_activity for every pooled connection.
    application_name: str = "shortener-storage"

    min_pool_size: int = Field(default=1, ge=0)
    max_pool_size: int = Field(default=10, gt=0)
    pool_timeout: float = Field(default=30.0, gt=0)

    @property
    def dsn(self) -> str:
        """PostgreSQL connection string."""
        return f"postgresql://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"
