"""Item entity and its table mapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from typing import ClassVar
from typing import Mapping
from typing import Optional
from uuid import uuid4

from versa.db.models.base import Record
from versa.db.models.base import TableMapping
from versa.db.models.base import compact


@dataclass(frozen=True)
class Item:
    """A generic record addressed by ``itemId``.

    ``item_id`` is assigned once by :meth:`new` and never changes.
    """

    MAPPING: ClassVar[TableMapping] = TableMapping(partition_key="itemId")

    item_id: str
    name: str
    description: Optional[str] = None

    @classmethod
    def new(cls, name: str, description: Optional[str] = None) -> "Item":
        """Create an item with a freshly generated identifier."""
        return cls(item_id=str(uuid4()), name=name, description=description)

    def to_record(self) -> Record:
        """Convert to the attribute dict stored in DynamoDB."""
        return compact(
            {
                "itemId": self.item_id,
                "name": self.name,
                "description": self.description,
            }
        )

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Item":
        """Build an item from a stored attribute dict."""
        return cls(
            item_id=record["itemId"],
            name=record["name"],
            description=record.get("description"),
        )
