"""Typed identifiers — NewType wrappers so ids and aliases are not confused with plain values."""

from typing import NewType

URLId = NewType("URLId", int)
Alias = NewType("Alias", str)
