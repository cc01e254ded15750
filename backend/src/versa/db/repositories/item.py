"""Repository for Item entities."""

from __future__ import annotations

from typing import Any

from versa.db.models import Item
from versa.db.repositories.base import DynamoRepository


class ItemRepository(DynamoRepository):
    """Repository for Item CRUD operations."""

    def __init__(self, table: Any):
        super().__init__(table, Item.MAPPING)

    def create(self, item: Item) -> Item:
        """Store a new item and return it."""
        self.put(item.to_record())
        return item
