"""Lambda entrypoint for upload URL."""

from __future__ import annotations

from typing import Any
from typing import Mapping

from versa.api.uploads import generate_upload_url as _handler
from versa.utils.logging import configure_logging

configure_logging()


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Delegate to the upload URL handler."""
    return _handler(event, context)
