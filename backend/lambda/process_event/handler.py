"""Lambda entrypoint for EventBridge domain events."""

from __future__ import annotations

from typing import Any
from typing import Mapping

from versa.api.events import process_event as _handler
from versa.utils.logging import configure_logging

configure_logging()


def lambda_handler(event: Mapping[str, Any], context: Any) -> None:
    """Delegate to the event-processing handler."""
    _handler(event, context)
