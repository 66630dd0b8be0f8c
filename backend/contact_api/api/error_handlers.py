"""Error Handlers — map every failure on the contacts API to the ContactApiError envelope.

Invariants:
    - ContactApiError → its own http_status and to_response() body
    - RequestValidationError → 400 ValidationError envelope naming the contact field
      (body.name → "name", query.name → "name") plus per-field details
    - Exception (catch-all) → 500 INTERNAL_ERROR envelope, never leaks internal details
    - All three bodies share one shape, built by ContactApiError.to_response()
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from contact_api.core.errors import (
    ContactApiError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    ValidationError,
)

logger = logging.getLogger(__name__)

REQUEST_SOURCES: tuple[str, ...] = ("body", "query")


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(ContactApiError, contact_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def contact_error_handler(request: Request, exc: ContactApiError):
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={**exc.to_log_extra(), "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def request_validation_handler(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": contact_field(e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    fields = sorted({d["field"] for d in details})
    error = ValidationError(
        f"Invalid contact data: {', '.join(fields)}",
        fields[0] if fields else "contact",
        context=ErrorContext(contact_name=_submitted_name(exc.body)),
    )
    logger.warning(
        f"{error.message} on {request.url.path}",
        extra={**error.to_log_extra(), "path": request.url.path},
    )
    body = error.to_response()
    body["error"]["details"] = details
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"path": request.url.path},
    )
    error = ContactApiError(
        "An unexpected error occurred", "INTERNAL_ERROR",
        ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error.to_response(),
    )


def contact_field(loc: tuple | list) -> str:
    """Pydantic error location → contact attribute it refers to."""
    parts = [str(p) for p in loc]
    if parts and parts[0] in REQUEST_SOURCES:
        parts = parts[1:]
    return ".".join(parts) if parts else "contact"


def _submitted_name(body: object) -> str | None:
    if isinstance(body, dict) and isinstance(body.get("name"), str):
        return body["name"] or None
    return None
