"""Exception handlers for converting exceptions to HTTP responses.

Declined registrations and logins never reach these handlers; they end in
a redirect. What arrives here are dependency failures (database, password
hashing) and programming errors. The HTTP status code comes from the
exception's error_code via ERROR_CODE_TO_HTTP_STATUS.

To add a new exception:
1. Create the exception class (inheriting from ApplicationError or DomainException)
2. Add its error_code to ERROR_CODE_TO_HTTP_STATUS in error_codes.py
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from blog_auth.application.exceptions import ApplicationError
from blog_auth.domain.exceptions import DomainException
from blog_auth.presentation.error_codes import get_http_status_for_error_code

logger = logging.getLogger(__name__)


async def application_error_handler(
    request: Request, exc: ApplicationError
) -> JSONResponse:
    """Handle ALL application layer exceptions."""
    http_status = get_http_status_for_error_code(exc.error_code)

    if http_status >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{exc.error_code} on {request.url.path}: {exc.message}", exc_info=exc)
        detail = "An internal server error occurred"
    else:
        detail = exc.message

    return JSONResponse(
        status_code=http_status,
        content={
            "detail": detail,
            "error_code": exc.error_code,
        },
    )


async def domain_exception_handler(
    request: Request, exc: DomainException
) -> JSONResponse:
    """Handle ALL domain layer exceptions."""
    http_status = get_http_status_for_error_code(exc.error_code)

    return JSONResponse(
        status_code=http_status,
        content={
            "detail": exc.message,
            "error_code": exc.error_code,
        },
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request parsing errors raised by FastAPI itself.

    Form fields default to empty strings, so field rules are reported by the
    registration validator instead; this only sees malformed requests.
    """
    validation_errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content={
            "detail": "Validation failed",
            "error_code": "VALIDATION_ERROR",
            "errors": validation_errors,
        },
    )


async def database_error_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Handle database errors without exposing internal details."""
    logger.error(f"Database error: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An internal database error occurred",
            "error_code": "DATABASE_ERROR",
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for anything unexpected."""
    logger.error(f"Unhandled error: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An internal server error occurred",
            "error_code": "INTERNAL_SERVER_ERROR",
        },
    )
