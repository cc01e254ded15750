"""Repository implementations for table operations.

Repositories provide a clean abstraction over DynamoDB operations,
making handler logic independent of the persistence layer.
"""

from versa.db.repositories.base import DynamoRepository, RecordRepository
from versa.db.repositories.item import ItemRepository
from versa.db.repositories.report import ReportRepository

__all__ = [
    "DynamoRepository",
    "ItemRepository",
    "RecordRepository",
    "ReportRepository",
]
