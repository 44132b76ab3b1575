"""Error Handlers: global exception handlers for the Campfinder API.

Invariants:
    - CampfinderError → its own http_status and to_response() envelope
    - RequestValidationError → 400; top-level message is the first field error
      (the admin panel shows it verbatim), details list every field
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (CampfinderError), validation (Pydantic), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from campfinder.core.errors import CampfinderError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)

_PYDANTIC_VALUE_ERROR_PREFIX = "Value error, "


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(CampfinderError, _handle_domain_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)


def _error_body(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
    **extra,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **extra,
        },
    }


async def _handle_domain_error(request: Request, exc: CampfinderError):
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        f"CampfinderError: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _field_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"].removeprefix(_PYDANTIC_VALUE_ERROR_PREFIX),
            "type": e["type"],
        }
        for e in exc.errors()
    ]


async def _handle_validation_error(request: Request, exc: RequestValidationError):
    details = _field_errors(exc)
    logger.warning(
        f"Validation error on {request.url.path}: {details}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    message = details[0]["message"] if details else "Invalid request data"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(
            "VALIDATION_ERROR", message,
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
            details=details,
        ),
    )


async def _handle_unexpected_error(request: Request, exc: Exception):
    """Catch-all: never leaks internal details."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )
