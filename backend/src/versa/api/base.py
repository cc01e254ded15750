"""Handler base class and the shared error boundary.

Every HTTP handler converts failures into a JSON response here, so no
exception ever reaches the Lambda runtime as an unhandled fault.
"""

from __future__ import annotations

from typing import Any
from typing import Callable
from typing import Mapping
from typing import Optional

from versa.exceptions import AppError
from versa.utils.logging import clear_request_context
from versa.utils.logging import get_logger
from versa.utils.logging import log_lambda_event
from versa.utils.logging import log_response
from versa.utils.logging import set_request_context
from versa.utils.responses import error_response
from versa.utils.responses import json_response

logger = get_logger(__name__)

LambdaHandler = Callable[[Mapping[str, Any], Any], dict[str, Any]]


class ApiHandler:
    """Base class for API Gateway proxy handlers.

    Subclasses receive their collaborators through ``__init__`` and
    implement :meth:`handle`, raising :class:`AppError` subclasses for
    client errors.
    """

    operation = "request"

    def __call__(self, event: Mapping[str, Any], context: Any = None) -> dict[str, Any]:
        set_request_context(req_id=_request_id(event, context))
        try:
            log_lambda_event(logger, event)
            response = self._safe_handle(event)
            log_response(logger, response["statusCode"])
            return response
        finally:
            clear_request_context()

    def handle(self, event: Mapping[str, Any]) -> dict[str, Any]:
        raise NotImplementedError

    def _safe_handle(self, event: Mapping[str, Any]) -> dict[str, Any]:
        try:
            return self.handle(event)
        except AppError as exc:
            return json_response(exc.status_code, exc.to_dict(), event=event)
        except Exception as exc:
            logger.exception(f"Error during {self.operation}")
            return error_response(500, _describe(exc), event=event)


def lambda_entrypoint(factory: Callable[[], ApiHandler]) -> LambdaHandler:
    """Wrap a handler factory as a Lambda entrypoint.

    The factory runs once, on the first invocation of the process, and the
    handler it returns is reused afterwards. A factory failure (e.g. missing
    configuration) is answered with an error response and retried on the
    next invocation.
    """
    instance: Optional[ApiHandler] = None

    def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
        nonlocal instance
        if instance is None:
            try:
                instance = factory()
            except AppError as exc:
                logger.exception("Handler initialization failed")
                return json_response(exc.status_code, exc.to_dict(), event=event)
            except Exception as exc:
                logger.exception("Handler initialization failed")
                return error_response(500, _describe(exc), event=event)
        return instance(event, context)

    return lambda_handler


def _request_id(event: Mapping[str, Any], context: Any) -> Optional[str]:
    request_context = event.get("requestContext") or {}
    return request_context.get("requestId") or getattr(context, "aws_request_id", None)


def _describe(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__
