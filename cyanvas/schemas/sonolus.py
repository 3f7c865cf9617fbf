"""Sonolus Schemas — envelopes around serialized level/background items."""

from typing import Any

from pydantic import BaseModel


class ItemDetails(BaseModel):
    """Single item response: the wire item plus its long description."""
    item: dict[str, Any]
    description: str = ""


class ItemList(BaseModel):
    """Random listing response: sampled items plus the eligible total."""
    items: list[dict[str, Any]] = []
    total: int = 0
