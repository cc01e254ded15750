"""Table resources for the configured DynamoDB tables."""

from __future__ import annotations

from typing import Any

from versa.config import Settings
from versa.services.aws_clients import get_dynamodb_resource


def get_table(settings: Settings, setting_name: str) -> Any:
    """Return the boto3 ``Table`` named by a required setting.

    Args:
        settings: Process settings.
        setting_name: ``"table_name"`` or ``"reports_table"``.

    Raises:
        ConfigurationError: If the table name is not configured.
    """
    resource = get_dynamodb_resource(
        region_name=settings.region_name,
        endpoint_url=settings.dynamodb_endpoint,
    )
    return resource.Table(settings.require(setting_name))
