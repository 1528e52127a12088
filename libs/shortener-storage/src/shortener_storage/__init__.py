"""Shortener Storage — PostgreSQL persistence for alias → URL mappings."""

__version__ = "0.1.0"

from shortener_storage.config import DatabaseConfig
from shortener_storage.exceptions import (
    StorageError,
    StorageOperationError,
    URLExistsError,
    URLNotFoundError,
)
from shortener_storage.pool import ConnectionPool
from shortener_storage.repositories.url import URLRepository

__all__ = [
    "ConnectionPool",
    "DatabaseConfig",
    "StorageError",
    "StorageOperationError",
    "URLExistsError",
    "URLNotFoundError",
    "URLRepository",
]
