"""Report entity and its table mapping."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from datetime import datetime
from datetime import timezone
from decimal import Decimal
from typing import Any
from typing import ClassVar
from typing import Mapping
from typing import Optional
from uuid import uuid4

from versa.db.models.base import Record
from versa.db.models.base import TableMapping
from versa.db.models.base import compact
from versa.db.models.enums import ReportStatus


@dataclass(frozen=True)
class Location:
    """A latitude/longitude pair."""

    lat: Decimal
    lng: Decimal

    def to_record(self) -> Record:
        return {"lat": self.lat, "lng": self.lng}


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class Report:
    """A submitted issue report referencing an uploaded image.

    ``report_id`` and ``created_at`` are generated server-side by :meth:`new`.
    """

    MAPPING: ClassVar[TableMapping] = TableMapping(partition_key="reportId")

    report_id: str
    created_at: str
    name: str
    location: Location
    image_key: str
    contact: Optional[str] = None
    status: ReportStatus = field(default=ReportStatus.NEW)

    @classmethod
    def new(
        cls,
        name: str,
        location: Location,
        image_key: str,
        contact: Optional[str] = None,
    ) -> "Report":
        """Create a report with generated id, timestamp and ``NEW`` status."""
        return cls(
            report_id=str(uuid4()),
            created_at=_utc_now_iso(),
            name=name,
            location=location,
            image_key=image_key,
            contact=contact,
            status=ReportStatus.NEW,
        )

    def to_record(self) -> Record:
        """Convert to the attribute dict stored in DynamoDB."""
        return compact(
            {
                "reportId": self.report_id,
                "createdAt": self.created_at,
                "name": self.name,
                "contact": self.contact,
                "location": self.location.to_record(),
                "imageKey": self.image_key,
                "status": self.status.value,
            }
        )

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Report":
        location = record["location"]
        return cls(
            report_id=record["reportId"],
            created_at=record["createdAt"],
            name=record["name"],
            location=Location(lat=location["lat"], lng=location["lng"]),
            image_key=record["imageKey"],
            contact=record.get("contact"),
            status=ReportStatus(record.get("status", ReportStatus.NEW.value)),
        )
