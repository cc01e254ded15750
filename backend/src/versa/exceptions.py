"""Custom exception classes for the application.

This module provides domain-specific exception classes that carry
appropriate HTTP status codes and structured error information.
"""

from __future__ import annotations

from typing import Any
from typing import Optional
from typing import Sequence


class AppError(Exception):
    """Base exception for application errors.

    All application-specific exceptions should inherit from this class.
    Each exception carries an HTTP status code and optional details.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code (default 500).
        detail: Optional additional context.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        detail: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response body."""
        result: dict[str, Any] = {"error": self.message}
        if self.detail:
            result["detail"] = self.detail
        return result


class ValidationError(AppError):
    """Raised when client input fails a semantic check.

    Use for malformed requests, invalid parameter values,
    or constraint violations in user input.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        detail: Optional[str] = None,
    ):
        if detail is None and field:
            detail = f"Field: {field}"
        super().__init__(message, status_code=400, detail=detail)
        self.field = field


class MissingParameterError(ValidationError):
    """Raised when a required path or query parameter is absent."""

    def __init__(self, parameter: str, message: Optional[str] = None):
        super().__init__(message or f"Missing {parameter}", field=parameter)
        self.parameter = parameter


class MissingFieldsError(ValidationError):
    """Raised when a request body lacks one or more required fields."""

    def __init__(self, fields: Sequence[str]):
        self.fields = list(fields)
        super().__init__(
            f"Missing required fields: {', '.join(self.fields)}",
            detail=None,
        )


class NotFoundError(AppError):
    """Raised when a requested resource is not found.

    Use when a specific entity lookup fails (e.g., by ID).
    """

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found", status_code=404)
        self.resource = resource
        self.identifier = identifier


class ConfigurationError(AppError):
    """Raised when required configuration is missing.

    Use when environment variables or settings are not properly configured.
    """

    def __init__(self, config_name: str, message: Optional[str] = None):
        super().__init__(
            message or f"Missing required configuration: {config_name}",
            status_code=500,
        )
        self.config_name = config_name
