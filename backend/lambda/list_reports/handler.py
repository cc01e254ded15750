"""Lambda entrypoint for list-reports."""

from __future__ import annotations

from typing import Any
from typing import Mapping

from versa.api.reports import list_reports as _handler
from versa.utils.logging import configure_logging

configure_logging()


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Delegate to the list-reports handler."""
    return _handler(event, context)
