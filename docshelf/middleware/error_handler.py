"""
Error Handler Middleware

Maps exceptions to the single error envelope of the API:

    {"error": {"code": "NOT_FOUND", "message": "Page not found: intro", "details": {...}}}

- DocshelfException   -> its own status and code, logged as a warning
- pydantic ValidationError raised inside a handler or service -> 400
- anything else       -> 500, logged with the traceback

FastAPI's own request validation (malformed bodies, bad query params)
keeps its default 422 response.
"""

from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from docshelf.core.exceptions import DocshelfException
from docshelf.core.logging import logger


def _envelope(
    status_code: int,
    code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> JSONResponse:
    body: dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content={"error": body})


async def handle_docshelf_error(_request: Request, exc: DocshelfException) -> JSONResponse:
    logger.warning(
        "Request rejected",
        error_code=exc.error_code,
        status_code=exc.status_code,
        reason=exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def handle_pydantic_error(_request: Request, exc: ValidationError) -> JSONResponse:
    errors = exc.errors(include_url=False, include_context=False)
    logger.warning("Payload failed validation", error_count=len(errors))
    return _envelope(400, "VALIDATION_ERROR", "Validation failed", {"errors": errors})


async def handle_unexpected_error(_request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception", error_type=type(exc).__name__, exc_info=exc)
    return _envelope(500, "INTERNAL_ERROR", "An unexpected error occurred")


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the error envelope handlers on the application."""
    app.add_exception_handler(DocshelfException, handle_docshelf_error)
    app.add_exception_handler(ValidationError, handle_pydantic_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
