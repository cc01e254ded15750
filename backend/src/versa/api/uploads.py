"""Presigned upload URL handler."""

from __future__ import annotations

from typing import Any
from typing import Mapping
from uuid import uuid4

from versa.api.base import ApiHandler
from versa.api.base import lambda_entrypoint
from versa.api.request import query_param
from versa.config import DEFAULT_UPLOAD_URL_EXPIRES_IN
from versa.config import Settings
from versa.exceptions import ValidationError
from versa.services.aws_clients import get_s3_client
from versa.utils.logging import get_logger
from versa.utils.responses import json_response

logger = get_logger(__name__)

UPLOAD_PREFIX = "uploads/"
DEFAULT_CONTENT_TYPE = "image/jpeg"
DEFAULT_EXTENSION = "jpeg"


def build_upload_key(content_type: str) -> str:
    """Return a fresh object key whose extension follows the content subtype.

    ``image/png`` gives ``uploads/<uuid>.png``; a bare ``image/`` falls
    back to ``jpeg``.
    """
    _, _, subtype = content_type.partition("/")
    extension = subtype or DEFAULT_EXTENSION
    return f"{UPLOAD_PREFIX}{uuid4()}.{extension}"


class GenerateUploadUrlHandler(ApiHandler):
    """GET /uploads/url?contentType=image/png

    Signs a single ``put_object`` for a new key. The URL only accepts the
    declared content type and expires after ``expires_in`` seconds.
    """

    operation = "generate upload url"

    def __init__(
        self,
        s3_client: Any,
        bucket_name: str,
        expires_in: int = DEFAULT_UPLOAD_URL_EXPIRES_IN,
    ):
        self._s3 = s3_client
        self._bucket_name = bucket_name
        self._expires_in = expires_in

    def handle(self, event: Mapping[str, Any]) -> dict[str, Any]:
        content_type = query_param(event, "contentType") or DEFAULT_CONTENT_TYPE
        if not content_type.startswith("image/"):
            logger.warning(
                "Rejected non-image content type",
                extra={"contentType": content_type},
            )
            raise ValidationError(
                "Invalid content type. Must be an image.",
                field="contentType",
            )

        key = build_upload_key(content_type)
        upload_url = self._s3.generate_presigned_url(
            "put_object",
            Params={
                "Bucket": self._bucket_name,
                "Key": key,
                "ContentType": content_type,
            },
            ExpiresIn=self._expires_in,
        )
        logger.info("Generated upload URL", extra={"key": key})

        return json_response(200, {"uploadUrl": upload_url, "key": key}, event=event)


def build_generate_upload_url_handler() -> GenerateUploadUrlHandler:
    settings = Settings.from_env()
    return GenerateUploadUrlHandler(
        get_s3_client(region_name=settings.region_name),
        settings.require("bucket_name"),
        expires_in=settings.upload_url_expires_in,
    )


generate_upload_url = lambda_entrypoint(build_generate_upload_url_handler)
