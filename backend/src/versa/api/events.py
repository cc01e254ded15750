"""EventBridge event-processing handler."""

from __future__ import annotations

from typing import Any
from typing import Mapping

from versa.services.events import ITEM_CREATED
from versa.utils.logging import clear_request_context
from versa.utils.logging import get_logger
from versa.utils.logging import set_request_context

logger = get_logger(__name__)


class ProcessEventHandler:
    """Logs domain events delivered by EventBridge.

    Only ``ItemCreated`` gets extra handling; other detail types are
    acknowledged with the receipt log alone. The return value is ignored
    by EventBridge.
    """

    def __call__(self, event: Mapping[str, Any], context: Any = None) -> None:
        set_request_context(req_id=getattr(context, "aws_request_id", None))
        try:
            detail_type = event.get("detail-type")
            logger.info(
                f"Received event: {detail_type}",
                extra={"detailType": detail_type, "source": event.get("source")},
            )

            if detail_type == ITEM_CREATED:
                self._item_created(event.get("detail"))
        finally:
            clear_request_context()

    def _item_created(self, detail: Any) -> None:
        item_id = detail.get("itemId") if isinstance(detail, Mapping) else None
        logger.info(
            f'Processing ItemCreated event, itemId: "{item_id}"',
            extra={"itemId": item_id},
        )


process_event = ProcessEventHandler()
