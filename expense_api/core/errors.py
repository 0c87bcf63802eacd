from typing import List

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from .cors import cors_headers

logger = logging.getLogger("expense_api.errors")

CREATION_FAILED_MESSAGE = "Internal Server Error during expense creation"


class ExpenseValidationError(Exception):
    """Raised when a POST payload fails one or more field checks."""

    def __init__(self, details: List[str]):
        super().__init__("; ".join(details))
        self.details = details


class ExpenseCreationError(Exception):
    """Raised for any unexpected failure while building or storing an expense."""


def _error_body(error: str, **extra) -> dict:
    return {"success": False, "error": error, **extra}


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(f"Method {request.method} Not Allowed"),
            headers=getattr(exc, "headers", None),
        )
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(f"No route for {request.method} {request.url.path}"),
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def expense_validation_error_handler(request: Request, exc: ExpenseValidationError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("Validation Failed", details=exc.details),
    )


def expense_creation_error_handler(request: Request, exc: ExpenseCreationError):  # type: ignore
    logger.error("expense creation failed", exc_info=exc.__cause__ or exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(CREATION_FAILED_MESSAGE),
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    # Runs outside the http middleware stack, so CORS headers are added here.
    logger.exception("unhandled exception")
    settings = getattr(request.app.state, "settings", None)
    origin = settings.cors_allow_origin if settings is not None else "*"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Internal Server Error"),
        headers=cors_headers(origin),
    )
