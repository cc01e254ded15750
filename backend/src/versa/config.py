"""Runtime configuration read from the Lambda environment.

Table, bucket and event bus names are injected by the deployment stack.
Nothing here is hard-coded to a specific environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping
from typing import Optional

from versa.exceptions import ConfigurationError

DEFAULT_UPLOAD_URL_EXPIRES_IN = 300
DEFAULT_DOWNLOAD_URL_EXPIRES_IN = 3600

_ENV_NAMES = {
    "table_name": "TABLE_NAME",
    "reports_table": "REPORTS_TABLE",
    "bucket_name": "BUCKET_NAME",
    "event_bus_name": "EVENT_BUS_NAME",
}


@dataclass(frozen=True)
class Settings:
    """Environment-provided settings for a single Lambda process."""

    table_name: Optional[str] = None
    reports_table: Optional[str] = None
    bucket_name: Optional[str] = None
    event_bus_name: Optional[str] = None
    region_name: Optional[str] = None
    dynamodb_endpoint: Optional[str] = None
    upload_url_expires_in: int = DEFAULT_UPLOAD_URL_EXPIRES_IN
    download_url_expires_in: int = DEFAULT_DOWNLOAD_URL_EXPIRES_IN

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            Settings with empty values normalized to None.

        Raises:
            ConfigurationError: If an expiry value is not a positive integer.
        """
        env = os.environ if environ is None else environ
        return cls(
            table_name=env.get("TABLE_NAME") or None,
            reports_table=env.get("REPORTS_TABLE") or None,
            bucket_name=env.get("BUCKET_NAME") or None,
            event_bus_name=env.get("EVENT_BUS_NAME") or None,
            region_name=env.get("AWS_REGION") or None,
            dynamodb_endpoint=env.get("LOCAL_DYNAMODB_ENDPOINT") or None,
            upload_url_expires_in=_positive_int(
                env, "UPLOAD_URL_EXPIRES_IN", DEFAULT_UPLOAD_URL_EXPIRES_IN
            ),
            download_url_expires_in=_positive_int(
                env, "DOWNLOAD_URL_EXPIRES_IN", DEFAULT_DOWNLOAD_URL_EXPIRES_IN
            ),
        )

    def require(self, name: str) -> str:
        """Return a required setting or raise ConfigurationError.

        Args:
            name: Attribute name, e.g. ``"table_name"``.
        """
        value = getattr(self, name)
        if not value:
            raise ConfigurationError(_ENV_NAMES.get(name, name.upper()))
        return value


def _positive_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(key, f"{key} must be an integer") from exc
    if value <= 0:
        raise ConfigurationError(key, f"{key} must be positive")
    return value
