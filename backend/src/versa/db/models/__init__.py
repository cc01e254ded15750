"""Entity models and their DynamoDB table mappings."""

from versa.db.models.base import Record, TableMapping
from versa.db.models.enums import ReportStatus
from versa.db.models.item import Item
from versa.db.models.report import Location, Report

__all__ = [
    "Item",
    "Location",
    "Record",
    "Report",
    "ReportStatus",
    "TableMapping",
]
