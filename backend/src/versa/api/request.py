"""Request parsing helpers for API Gateway proxy events."""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any
from typing import Mapping
from typing import Optional
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from versa.exceptions import MissingFieldsError
from versa.exceptions import MissingParameterError
from versa.exceptions import ValidationError
from versa.utils.parsers import collect_query_params
from versa.utils.parsers import first_param

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def parse_body(event: Mapping[str, Any]) -> dict[str, Any]:
    """Parse the JSON request body into a dict.

    Raises:
        MissingParameterError: If there is no body.
        ValidationError: If the body is not a JSON object.
    """
    raw = event.get("body")
    if isinstance(raw, dict):
        return raw
    if not raw:
        raise MissingParameterError("body", "Missing body")
    try:
        if event.get("isBase64Encoded"):
            raw = base64.b64decode(raw).decode("utf-8")
        body = json.loads(raw)
    except (binascii.Error, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValidationError("Invalid JSON body", field="body") from exc
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object", field="body")
    return body


def path_param(event: Mapping[str, Any], name: str) -> Optional[str]:
    """Return a path parameter value, or None when absent or empty."""
    params = event.get("pathParameters") or {}
    value = params.get(name)
    return value or None


def query_param(event: Mapping[str, Any], name: str) -> Optional[str]:
    """Return a query parameter value."""
    params = collect_query_params(event)
    return first_param(params, name)


def validate_body(schema: type[SchemaT], body: Mapping[str, Any]) -> SchemaT:
    """Validate a parsed body against a pydantic schema.

    Missing fields are reported together as a MissingFieldsError; any other
    schema violation becomes a ValidationError naming the first bad field.
    """
    try:
        return schema.model_validate(body)
    except PydanticValidationError as exc:
        errors = exc.errors()
        missing = [_field_name(error) for error in errors if error["type"] == "missing"]
        if missing:
            raise MissingFieldsError(missing) from exc
        first = errors[0]
        field = _field_name(first)
        raise ValidationError(
            f"Invalid {field}: {first['msg']}",
            field=field,
        ) from exc


def _field_name(error: Mapping[str, Any]) -> str:
    return ".".join(str(part) for part in error.get("loc", ())) or "body"
