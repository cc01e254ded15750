"""Report API handlers."""

from __future__ import annotations

import base64
import json
from typing import Any
from typing import Mapping
from typing import Optional

from versa.api.base import ApiHandler
from versa.api.base import lambda_entrypoint
from versa.api.request import parse_body
from versa.api.request import path_param
from versa.api.request import query_param
from versa.api.request import validate_body
from versa.api.schemas import REQUIRED_REPORT_FIELDS
from versa.api.schemas import CreateReportRequest
from versa.config import DEFAULT_DOWNLOAD_URL_EXPIRES_IN
from versa.config import Settings
from versa.db.models import Location
from versa.db.models import Record
from versa.db.models import Report
from versa.db.repositories import ReportRepository
from versa.db.tables import get_table
from versa.exceptions import MissingFieldsError
from versa.exceptions import MissingParameterError
from versa.exceptions import NotFoundError
from versa.exceptions import ValidationError
from versa.services.aws_clients import get_s3_client
from versa.utils.logging import get_logger
from versa.utils.parsers import parse_int
from versa.utils.parsers import to_decimal
from versa.utils.responses import json_response

logger = get_logger(__name__)

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class CreateReportHandler(ApiHandler):
    """POST /reports"""

    operation = "create report"

    def __init__(self, repository: ReportRepository):
        self._repository = repository

    def handle(self, event: Mapping[str, Any]) -> dict[str, Any]:
        body = parse_body(event)

        if any(not body.get(name) for name in REQUIRED_REPORT_FIELDS):
            logger.warning("Report is missing required fields")
            raise MissingFieldsError(REQUIRED_REPORT_FIELDS)

        request = validate_body(CreateReportRequest, body)
        report = Report.new(
            name=request.name,
            contact=request.contact,
            location=Location(
                lat=to_decimal(request.location.lat),
                lng=to_decimal(request.location.lng),
            ),
            image_key=request.image_key,
        )
        self._repository.create(report)
        logger.info("Report created", extra={"reportId": report.report_id})

        return json_response(
            201,
            {"message": "Report created", "reportId": report.report_id},
            event=event,
        )


class GetReportHandler(ApiHandler):
    """GET /reports/{reportId}

    Adds ``imageUrl``, a short-lived download URL for the report image.
    """

    operation = "get report"

    def __init__(
        self,
        repository: ReportRepository,
        s3_client: Any,
        bucket_name: Optional[str],
        expires_in: int = DEFAULT_DOWNLOAD_URL_EXPIRES_IN,
    ):
        self._repository = repository
        self._s3 = s3_client
        self._bucket_name = bucket_name
        self._expires_in = expires_in

    def handle(self, event: Mapping[str, Any]) -> dict[str, Any]:
        report_id = path_param(event, "reportId")
        if not report_id:
            logger.warning("Missing reportId in path parameters")
            raise MissingParameterError("reportId")

        record = self._repository.get(report_id)
        if record is None:
            logger.warning("Report not found", extra={"reportId": report_id})
            raise NotFoundError("Report", report_id)

        body = dict(record)
        body["imageUrl"] = self._image_url(record.get("imageKey"))
        return json_response(200, body, event=event)

    def _image_url(self, key: Optional[str]) -> Optional[str]:
        if not key or not self._bucket_name:
            return None
        try:
            return self._s3.generate_presigned_url(
                "get_object",
                Params={"Bucket": self._bucket_name, "Key": key},
                ExpiresIn=self._expires_in,
            )
        except Exception:
            logger.exception("Failed to presign image URL", extra={"key": key})
            return None


class ListReportsHandler(ApiHandler):
    """GET /reports?limit=20&nextToken=...

    Pages through the reports table. Each page is sorted newest first;
    ordering across pages follows the table's scan order.
    """

    operation = "list reports"

    def __init__(self, repository: ReportRepository):
        self._repository = repository

    def handle(self, event: Mapping[str, Any]) -> dict[str, Any]:
        limit = _parse_limit(query_param(event, "limit"))
        start_key = _parse_next_token(query_param(event, "nextToken"))

        records, last_key = self._repository.scan_page(limit, start_key)
        records.sort(key=lambda record: record.get("createdAt", ""), reverse=True)

        return json_response(
            200,
            {
                "items": records,
                "nextToken": _encode_next_token(last_key) if last_key else None,
            },
            event=event,
        )


def _parse_limit(value: Optional[str]) -> int:
    try:
        limit = parse_int(value)
    except ValueError as exc:
        raise ValidationError("limit must be an integer", field="limit") from exc
    if limit is None:
        return DEFAULT_PAGE_SIZE
    if not 1 <= limit <= MAX_PAGE_SIZE:
        raise ValidationError(
            f"limit must be between 1 and {MAX_PAGE_SIZE}",
            field="limit",
        )
    return limit


def _encode_next_token(key: Record) -> str:
    """Encode a LastEvaluatedKey as an opaque URL-safe token."""
    payload = json.dumps(key, default=str).encode("utf-8")
    return base64.urlsafe_b64encode(payload).decode("utf-8").rstrip("=")


def _parse_next_token(token: Optional[str]) -> Optional[Record]:
    if not token:
        return None
    try:
        padding = "=" * (-len(token) % 4)
        key = json.loads(base64.urlsafe_b64decode(token + padding))
    except (ValueError, TypeError) as exc:
        raise ValidationError("Invalid nextToken", field="nextToken") from exc
    partition_key = Report.MAPPING.partition_key
    if (
        not isinstance(key, dict)
        or set(key) != {partition_key}
        or not isinstance(key[partition_key], str)
    ):
        raise ValidationError("Invalid nextToken", field="nextToken")
    return key


# --- Lambda entrypoints ---


def _report_repository(settings: Settings) -> ReportRepository:
    return ReportRepository(get_table(settings, "reports_table"))


def build_create_report_handler() -> CreateReportHandler:
    return CreateReportHandler(_report_repository(Settings.from_env()))


def build_get_report_handler() -> GetReportHandler:
    settings = Settings.from_env()
    return GetReportHandler(
        _report_repository(settings),
        get_s3_client(region_name=settings.region_name),
        settings.bucket_name,
        expires_in=settings.download_url_expires_in,
    )


def build_list_reports_handler() -> ListReportsHandler:
    return ListReportsHandler(_report_repository(Settings.from_env()))


create_report = lambda_entrypoint(build_create_report_handler)
get_report = lambda_entrypoint(build_get_report_handler)
list_reports = lambda_entrypoint(build_list_reports_handler)
