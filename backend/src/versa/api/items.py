"""Item CRUD API handlers.

Each handler performs a single table operation through the injected
repository. Module-level entrypoints build the process-wide singletons.
"""

from __future__ import annotations

from typing import Any
from typing import Mapping

from versa.api.base import ApiHandler
from versa.api.base import lambda_entrypoint
from versa.api.request import parse_body
from versa.api.request import path_param
from versa.api.request import validate_body
from versa.api.schemas import CreateItemRequest
from versa.config import Settings
from versa.db.models import Item
from versa.db.repositories import ItemRepository
from versa.db.repositories import RecordRepository
from versa.db.tables import get_table
from versa.exceptions import MissingParameterError
from versa.exceptions import NotFoundError
from versa.services.aws_clients import get_events_client
from versa.services.events import ITEM_CREATED
from versa.services.events import EventPublisher
from versa.utils.logging import get_logger
from versa.utils.responses import json_response

logger = get_logger(__name__)


def _require_item_id(event: Mapping[str, Any]) -> str:
    item_id = path_param(event, "itemId")
    if not item_id:
        logger.warning("Missing itemId in path parameters")
        raise MissingParameterError("itemId")
    return item_id


class GetItemHandler(ApiHandler):
    """GET /items/{itemId}"""

    operation = "get item"

    def __init__(self, repository: RecordRepository):
        self._repository = repository

    def handle(self, event: Mapping[str, Any]) -> dict[str, Any]:
        item_id = _require_item_id(event)

        record = self._repository.get(item_id)
        if record is None:
            logger.warning("Item not found", extra={"itemId": item_id})
            raise NotFoundError("Item", item_id)

        return json_response(200, record, event=event)


class ListItemsHandler(ApiHandler):
    """GET /items

    Returns every item from a full table scan; there is no pagination.
    """

    operation = "list items"

    def __init__(self, repository: RecordRepository):
        self._repository = repository

    def handle(self, event: Mapping[str, Any]) -> dict[str, Any]:
        records = self._repository.scan()
        logger.info(f"Listed {len(records)} items")
        return json_response(200, records, event=event)


class DeleteItemHandler(ApiHandler):
    """DELETE /items/{itemId}

    Deletes unconditionally: a missing item is reported as deleted.
    """

    operation = "delete item"

    def __init__(self, repository: RecordRepository):
        self._repository = repository

    def handle(self, event: Mapping[str, Any]) -> dict[str, Any]:
        item_id = _require_item_id(event)

        self._repository.delete(item_id)
        logger.info("Item deleted", extra={"itemId": item_id})

        return json_response(200, {"message": "Item deleted"}, event=event)


class CreateItemHandler(ApiHandler):
    """POST /items

    Stores a new item and announces it with an ``ItemCreated`` event.
    Publishing is best effort and never fails the request.
    """

    operation = "create item"

    def __init__(self, repository: ItemRepository, publisher: EventPublisher):
        self._repository = repository
        self._publisher = publisher

    def handle(self, event: Mapping[str, Any]) -> dict[str, Any]:
        body = parse_body(event)
        request = validate_body(CreateItemRequest, body)
        logger.info("Creating item", extra={"itemName": request.name})

        item = self._repository.create(
            Item.new(name=request.name, description=request.description)
        )
        record = item.to_record()
        logger.info("Item created", extra={"itemId": item.item_id})

        self._publish_created(record)

        return json_response(201, record, event=event)

    def _publish_created(self, record: Mapping[str, Any]) -> None:
        try:
            self._publisher.publish(ITEM_CREATED, record)
        except Exception:
            logger.exception(
                "Failed to publish ItemCreated event",
                extra={"itemId": record.get("itemId")},
            )


# --- Lambda entrypoints ---


def _item_repository(settings: Settings) -> ItemRepository:
    return ItemRepository(get_table(settings, "table_name"))


def build_get_item_handler() -> GetItemHandler:
    return GetItemHandler(_item_repository(Settings.from_env()))


def build_list_items_handler() -> ListItemsHandler:
    return ListItemsHandler(_item_repository(Settings.from_env()))


def build_delete_item_handler() -> DeleteItemHandler:
    return DeleteItemHandler(_item_repository(Settings.from_env()))


def build_create_item_handler() -> CreateItemHandler:
    settings = Settings.from_env()
    publisher = EventPublisher(
        get_events_client(region_name=settings.region_name),
        settings.event_bus_name,
    )
    return CreateItemHandler(_item_repository(settings), publisher)


get_item = lambda_entrypoint(build_get_item_handler)
list_items = lambda_entrypoint(build_list_items_handler)
delete_item = lambda_entrypoint(build_delete_item_handler)
create_item = lambda_entrypoint(build_create_item_handler)
