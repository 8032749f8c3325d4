"""Exception handlers that render framework errors as ``{"error": ...}`` bodies."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from med_translate_engine.core.logging import get_logger

logger = get_logger(__name__)

METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed"


def format_validation_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """Collapse pydantic validation errors into one readable sentence."""
    parts: list[str] = []
    for error in errors:
        if error.get("type") == "json_invalid":
            parts.append("request body must be valid JSON")
            continue
        field = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        message = str(error.get("msg", "invalid value"))
        parts.append(f"{field}: {message}" if field else message)
    return "; ".join(parts) or "Invalid request"


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors raised by routing or routes with the shared error body."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        message = METHOD_NOT_ALLOWED_MESSAGE
    else:
        message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Reject malformed request bodies with 400 before any outbound call."""
    message = format_validation_errors(exc.errors())
    logger.info("rejected invalid request to %s: %s", request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the shared error renderers to ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]


__all__ = [
    "METHOD_NOT_ALLOWED_MESSAGE",
    "format_validation_errors",
    "http_exception_handler",
    "validation_exception_handler",
    "register_exception_handlers",
]
