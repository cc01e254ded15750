"""Shared pieces of the entity-to-table mapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from typing import Mapping

Record = dict[str, Any]


@dataclass(frozen=True)
class TableMapping:
    """How an entity is addressed in its DynamoDB table.

    Attributes:
        partition_key: Attribute name of the table's hash key.
    """

    partition_key: str

    def key_for(self, identifier: str) -> Record:
        """Build the primary key dict for ``get_item``/``delete_item``."""
        return {self.partition_key: identifier}


def compact(record: Mapping[str, Any]) -> Record:
    """Drop unset optional attributes before writing a record."""
    return {key: value for key, value in record.items() if value is not None}
