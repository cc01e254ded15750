"""Shared boto3 client factory with caching.

Clients are created once per Lambda process and reused across
invocations. Entrypoints pass them into handler constructors.
"""

from __future__ import annotations

from typing import Any

import boto3
from botocore.config import Config

_CLIENT_CACHE: dict[tuple[str, str, str | None, str | None], Any] = {}

# Presigned URLs must be SigV4 so that they work against every region.
_S3_CONFIG = Config(signature_version="s3v4")


def get_client(
    service: str,
    region_name: str | None = None,
    endpoint_url: str | None = None,
) -> Any:
    """Return a cached boto3 client for the given service."""
    cache_key = ("client", service, region_name, endpoint_url)
    if cache_key in _CLIENT_CACHE:
        return _CLIENT_CACHE[cache_key]
    config = _S3_CONFIG if service == "s3" else None
    client = boto3.client(  # type: ignore[call-overload]
        service,
        region_name=region_name,
        endpoint_url=endpoint_url,
        config=config,
    )
    _CLIENT_CACHE[cache_key] = client
    return client


def get_resource(
    service: str,
    region_name: str | None = None,
    endpoint_url: str | None = None,
) -> Any:
    """Return a cached boto3 service resource."""
    cache_key = ("resource", service, region_name, endpoint_url)
    if cache_key in _CLIENT_CACHE:
        return _CLIENT_CACHE[cache_key]
    resource = boto3.resource(  # type: ignore[call-overload]
        service,
        region_name=region_name,
        endpoint_url=endpoint_url,
    )
    _CLIENT_CACHE[cache_key] = resource
    return resource


def clear_client_cache() -> None:
    """Clear cached boto3 clients (useful in tests)."""
    _CLIENT_CACHE.clear()


def get_dynamodb_resource(
    region_name: str | None = None,
    endpoint_url: str | None = None,
) -> Any:
    return get_resource("dynamodb", region_name=region_name, endpoint_url=endpoint_url)


def get_s3_client(region_name: str | None = None) -> Any:
    return get_client("s3", region_name=region_name)


def get_events_client(region_name: str | None = None) -> Any:
    return get_client("events", region_name=region_name)
