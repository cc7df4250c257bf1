"""
Service-layer exceptions and the handlers that turn failures into
JSON error responses.

Every error body has the same shape::

    {"status": 404, "error": "Not Found", "message": "Profile not found with id: 9"}

Only ``GenericException`` (and therefore ``NotFoundException``) and
HTTP errors raised by the framework or the authorization gate carry
their own message to the client.  Anything else is logged with its
traceback and answered with a fixed 500 message so internal details
never leak.
"""

import logging
from http import HTTPStatus
from typing import Any, Awaitable, Callable, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class GenericException(Exception):
    """Error raised deliberately by services, carrying an HTTP status."""

    def __init__(self, message: str, status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR) -> None:
        super().__init__(message)
        self.message = message
        self.status = HTTPStatus(status_code)


class NotFoundException(GenericException):
    """The requested record does not exist in the store."""

    def __init__(self, entity_name: str, entity_id: Any) -> None:
        super().__init__(f"{entity_name} not found with id: {entity_id}", HTTPStatus.NOT_FOUND)
        self.entity_name = entity_name
        self.entity_id = entity_id


def error_body(status_code: int, message: str) -> Dict[str, Any]:
    """Build the standard error payload for ``status_code``."""
    try:
        reason = HTTPStatus(status_code).phrase
    except ValueError:
        reason = "Error"
    return {"status": int(status_code), "error": reason, "message": message}


def error_response(
    status_code: int, message: str, headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_body(status_code, message), headers=headers)


async def handle_generic_exception(request: Request, exc: GenericException) -> JSONResponse:
    logger.warning("Error [%s]: %s", exc.status.value, exc.message)
    return error_response(exc.status.value, exc.message)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else HTTPStatus(exc.status_code).phrase
    return error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


async def handle_validation_exception(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"Invalid request at {location}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    logger.debug("Rejected request %s %s: %s", request.method, request.url.path, message)
    return error_response(HTTPStatus.BAD_REQUEST, message)


async def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unexpected error: %s", exc, exc_info=exc)
    return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR_MESSAGE)


async def catch_unexpected_exceptions(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """HTTP middleware answering uncaught errors with the generic 500 body.

    Must be added before ``CORSMiddleware`` so the 500 response passes
    through it and carries the CORS headers.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        return await handle_unexpected_exception(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers above to ``app``."""
    app.add_exception_handler(GenericException, handle_generic_exception)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_exception)
    app.add_exception_handler(Exception, handle_unexpected_exception)
