"""Core entities for the shortener domain model."""

from pydantic import BaseModel, ConfigDict, Field

from shortener_core.models.identifiers import Alias, URLId


class URLRecord(BaseModel):
    """A stored alias → URL mapping.

    The alias is unique across all live records and compared case-sensitively.
    The URL is stored as given; nothing here checks that it is well formed.
    """

    model_config = ConfigDict(frozen=True)

    id: URLId = Field(gt=0)
    alias: Alias
    url: str
