"""Error types raised by the services and their HTTP rendering.

Every failure reaches the client as a JSON body of the form
``{"errors": ...}`` together with an HTTP status code.
"""

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from .logging import get_logger

logger = get_logger(__name__)


class ValidationError(Exception):
    """Input failed schema validation; nothing was written."""

    def __init__(self, errors: list[dict[str, Any]]):
        super().__init__("Validation failed")
        self.errors = errors


class NotFoundError(Exception):
    """The requested row does not exist or is not owned by the caller."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def format_errors(raw_errors) -> list[dict[str, Any]]:
    """
    Reduce pydantic error entries to ``{"field", "message"}`` pairs.

    Args:
        raw_errors: Iterable of pydantic/FastAPI error dictionaries.

    Returns:
        list[dict]: Field path joined with dots and the error message.
    """
    formatted = []
    for error in raw_errors:
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        formatted.append({"field": ".".join(location), "message": error.get("msg")})
    return formatted


async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"errors": exc.errors}
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": format_errors(exc.errors())},
    )


async def not_found_error_handler(request: Request, exc: NotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content={"errors": exc.message}
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"errors": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on the application."""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
