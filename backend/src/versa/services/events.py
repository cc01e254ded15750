"""Domain event publishing to EventBridge."""

from __future__ import annotations

import json
from typing import Any
from typing import Mapping
from typing import Optional

from versa.utils.logging import get_logger

logger = get_logger(__name__)

EVENT_SOURCE = "versa.api"
ITEM_CREATED = "ItemCreated"


class EventPublisher:
    """Publishes domain events onto an EventBridge bus.

    A publisher without a bus name is disabled: ``publish`` logs and
    returns False without calling EventBridge.
    """

    def __init__(self, client: Any, event_bus_name: Optional[str]):
        self._client = client
        self._event_bus_name = event_bus_name

    @property
    def enabled(self) -> bool:
        return bool(self._event_bus_name)

    def publish(self, detail_type: str, detail: Mapping[str, Any]) -> bool:
        """Put a single event on the bus.

        Args:
            detail_type: EventBridge ``DetailType``, e.g. ``ItemCreated``.
            detail: JSON-serializable event payload.

        Returns:
            True if the event was accepted by EventBridge.

        Raises:
            RuntimeError: If EventBridge reports the entry as failed.
        """
        if not self.enabled:
            logger.debug(f"Event bus not configured, skipping {detail_type}")
            return False

        response = self._client.put_events(
            Entries=[
                {
                    "Source": EVENT_SOURCE,
                    "DetailType": detail_type,
                    "Detail": json.dumps(dict(detail), default=str),
                    "EventBusName": self._event_bus_name,
                }
            ]
        )
        if response.get("FailedEntryCount", 0):
            entry = (response.get("Entries") or [{}])[0]
            raise RuntimeError(
                f"EventBridge rejected {detail_type}: "
                f"{entry.get('ErrorCode')} {entry.get('ErrorMessage')}"
            )

        logger.info(f"Published {detail_type} event")
        return True
