"""Repository for Report entities."""

from __future__ import annotations

from typing import Any

from versa.db.models import Report
from versa.db.repositories.base import DynamoRepository


class ReportRepository(DynamoRepository):
    """Repository for Report writes and lookups."""

    def __init__(self, table: Any):
        super().__init__(table, Report.MAPPING)

    def create(self, report: Report) -> Report:
        """Store a new report in a single unconditional write."""
        self.put(report.to_record())
        return report
