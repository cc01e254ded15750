"""Enum definitions for stored entities."""

from __future__ import annotations

import enum


class ReportStatus(str, enum.Enum):
    """Lifecycle status for submitted reports."""

    NEW = "NEW"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"
