"""Storage error hierarchy for shortener-storage.

Callers branch on `URLExistsError` and `URLNotFoundError`. Everything else the
database can throw at us comes out as `StorageOperationError`, tagged with the
operation that failed.
"""

from __future__ import annotations

import psycopg
from psycopg import errors as pg_errors

UNIQUE_VIOLATION = "23505"


class StorageError(Exception):
    """Base exception for all storage-related errors."""


class URLExistsError(StorageError):
    """A URL with the same alias is already stored."""

    def __init__(self, alias: str) -> None:
        super().__init__(f"URL already exists for alias {alias!r}")
        self.alias = alias


class URLNotFoundError(StorageError):
    """No URL is stored under the requested alias."""

    def __init__(self, alias: str) -> None:
        super().__init__(f"URL not found for alias {alias!r}")
        self.alias = alias


class StorageOperationError(StorageError):
    """A storage operation failed for a reason other than a domain outcome."""

    def __init__(self, op: str, cause: BaseException) -> None:
        super().__init__(f"{op}: {cause}")
        self.op = op
        self.cause = cause


def is_unique_violation(exc: BaseException) -> bool:
    """Return True if *exc* is a unique-constraint violation raised by the database."""
    if isinstance(exc, pg_errors.UniqueViolation):
        return True
    return isinstance(exc, psycopg.Error) and exc.sqlstate == UNIQUE_VIOLATION
