"""Lambda entrypoint for get-item."""

from __future__ import annotations

from typing import Any
from typing import Mapping

from versa.api.items import get_item as _handler
from versa.utils.logging import configure_logging

configure_logging()


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Delegate to the get-item handler."""
    return _handler(event, context)
