"""Shortener domain model — re-exports all public types."""

from shortener_core.models.entities import URLRecord
from shortener_core.models.identifiers import Alias, URLId

__all__ = [
    # Identifiers
    "Alias",
    "URLId",
    # Entities
    "URLRecord",
]
