"""Repository layer for shortener-storage."""

from shortener_storage.repositories.url import URLRepository

__all__ = ["URLRepository"]
