"""Base repository over a DynamoDB table.

This module defines the repository interface used by handlers and a
generic implementation backed by a boto3 ``Table`` resource.
"""

from __future__ import annotations

from typing import Any
from typing import Mapping
from typing import Optional
from typing import Protocol

from versa.db.models.base import Record
from versa.db.models.base import TableMapping


class RecordRepository(Protocol):
    """Interface handlers depend on; any key-value store can implement it."""

    mapping: TableMapping

    def get(self, identifier: str) -> Optional[Record]: ...

    def put(self, record: Mapping[str, Any]) -> None: ...

    def delete(self, identifier: str) -> None: ...

    def scan(self) -> list[Record]: ...


class DynamoRepository:
    """Point get/put/delete and full scan against one DynamoDB table.

    Single-record operations are atomic in DynamoDB; nothing here spans
    more than one record.
    """

    def __init__(self, table: Any, mapping: TableMapping):
        """Initialize the repository.

        Args:
            table: boto3 ``dynamodb.Table`` resource.
            mapping: Key layout of the records stored in ``table``.
        """
        self._table = table
        self.mapping = mapping

    def get(self, identifier: str) -> Optional[Record]:
        """Get a record by its primary key.

        Args:
            identifier: The partition key value.

        Returns:
            The record if found, None otherwise.
        """
        response = self._table.get_item(Key=self.mapping.key_for(identifier))
        return response.get("Item")

    def put(self, record: Mapping[str, Any]) -> None:
        """Write a record unconditionally, replacing any existing one."""
        self._table.put_item(Item=dict(record))

    def delete(self, identifier: str) -> None:
        """Delete a record by key.

        Deleting a key that does not exist is not an error.
        """
        self._table.delete_item(Key=self.mapping.key_for(identifier))

    def scan(self) -> list[Record]:
        """Read every record in the table.

        Follows ``LastEvaluatedKey`` until DynamoDB reports no more pages.
        The order is whatever DynamoDB returns.
        """
        records: list[Record] = []
        kwargs: dict[str, Any] = {}
        while True:
            response = self._table.scan(**kwargs)
            records.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return records
            kwargs["ExclusiveStartKey"] = last_key

    def scan_page(
        self,
        limit: int,
        start_key: Optional[Mapping[str, Any]] = None,
    ) -> tuple[list[Record], Optional[Record]]:
        """Read one page of at most ``limit`` records.

        Args:
            limit: Maximum number of records to evaluate.
            start_key: ``LastEvaluatedKey`` of the previous page.

        Returns:
            Tuple of (records, last evaluated key or None on the final page).
        """
        kwargs: dict[str, Any] = {"Limit": limit}
        if start_key:
            kwargs["ExclusiveStartKey"] = dict(start_key)
        response = self._table.scan(**kwargs)
        return response.get("Items", []), response.get("LastEvaluatedKey")

