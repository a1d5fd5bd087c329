"""
Exception handlers - map failures to JSON error responses.

Domain errors carry a stable ``code``; the HTTP status is picked here so the
domain and application layers stay free of HTTP concerns. Body shape:

    {"error": "<code>", "message": "<text>"}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from directchat.domain.exceptions import (
    AccessDeniedError,
    ArtifactMissingError,
    ConflictError,
    DomainError,
    DomainValidationError,
    EntityNotFoundError,
    InvalidCredentialsError,
)

logger = logging.getLogger(__name__)

UNPROCESSABLE = 422

# Most specific first; ArtifactMissingError is an EntityNotFoundError
STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ArtifactMissingError, status.HTTP_410_GONE),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (AccessDeniedError, status.HTTP_403_FORBIDDEN),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (ConflictError, status.HTTP_409_CONFLICT),
]

# Validation subclasses that describe a bad request rather than bad data
BAD_REQUEST_CODES = {"self_conversation", "missing_file_reference"}


def status_for(exc: DomainError) -> int:
    if isinstance(exc, DomainValidationError):
        if exc.code in BAD_REQUEST_CODES:
            return status.HTTP_400_BAD_REQUEST
        return UNPROCESSABLE
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def register_exception_handlers(app: FastAPI) -> None:
    # Also catches InvalidValueError raised by value objects on bad input
    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        status_code = status_for(exc)
        logger.info(
            f"{request.method} {request.url.path} -> {status_code} {exc.code}: {exc}"
        )
        return JSONResponse(
            status_code=status_code,
            content={"error": exc.code, "message": exc.message},
        )

    # Request schema errors - shows detailed Pydantic errors
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        errors = jsonable_encoder(exc.errors())
        logger.info(f"Request validation failed: {errors}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": DomainValidationError.code,
                "message": "Request validation failed",
                "details": errors,
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.info(f"[HTTP ERROR {exc.status_code}] {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "internal_error", "message": "Internal server error"},
        )
