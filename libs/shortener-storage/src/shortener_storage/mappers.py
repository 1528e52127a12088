"""Mapper from rows of the url table to URLRecord."""

from __future__ import annotations

from typing import Any

from shortener_core.models.entities import URLRecord
from shortener_core.models.identifiers import Alias, URLId


class URLRecordMapper:
    """Builds URLRecord domain objects from database rows."""

    @staticmethod
    def from_row(row: dict[str, Any]) -> URLRecord:
        """Reconstruct a URLRecord from a database row."""
        return URLRecord(
            id=URLId(row["id"]),
            alias=Alias(row["alias"]),
            url=row["url"],
        )
