"""
Application exceptions and the FastAPI handlers that serialize them.

Every error response has the shape ``{"error": <message>}``; validation
failures add a ``details`` list with one entry per offending field.
"""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
from typing import Any, List, Optional, Sequence


logger = logging.getLogger(__name__)

VALIDATION_FAILED = "Validation failed"


class AppException(Exception):
    """Base application exception."""
    def __init__(self, message: str, status_code: int = 500, details: Any = None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """Input is malformed or refers to rows that do not exist."""
    def __init__(self, details: List[dict]):
        super().__init__(VALIDATION_FAILED, status.HTTP_400_BAD_REQUEST, details)


class ConflictError(AppException):
    """The request conflicts with the current state of the store."""
    def __init__(self, message: str):
        super().__init__(message, status.HTTP_409_CONFLICT)


class StoreError(AppException):
    """The underlying persistence layer failed."""
    def __init__(self, message: str = "Database operation failed"):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR)


def field_error(field: str, message: str, error_type: str = "value_error") -> dict:
    """Field-level error entry, shaped like a Pydantic error."""
    return {"type": error_type, "loc": ["body", field], "msg": message}


def _error_body(message: str, details: Optional[Sequence[Any]] = None) -> dict:
    body = {"error": message}
    if details is not None:
        body["details"] = jsonable_encoder(details)
    return body


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle custom application exceptions."""
    if exc.status_code >= 500:
        logger.error(
            f"Application exception: {exc.message}",
            exc_info=exc.__cause__ or exc,
            extra={"status_code": exc.status_code, "path": request.url.path},
        )
    else:
        logger.warning(
            f"Application exception: {exc.message}",
            extra={
                "status_code": exc.status_code,
                "path": request.url.path,
                "details": exc.details,
            },
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.message, exc.details),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions."""
    logger.warning(
        f"HTTP exception: {exc.detail}",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
        },
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def _serialize_validation_errors(errors: Sequence[dict]) -> list:
    """Convert validation errors to JSON-serializable format."""
    serialized = []
    for error in errors:
        serialized_error = {}
        for key, value in error.items():
            if key == "ctx" and isinstance(value, dict):
                # Context may carry exception instances
                serialized_error[key] = {
                    ctx_key: str(ctx_value) if isinstance(ctx_value, Exception) else ctx_value
                    for ctx_key, ctx_value in value.items()
                }
            elif isinstance(value, Exception):
                serialized_error[key] = str(value)
            else:
                serialized_error[key] = value
        serialized.append(serialized_error)
    return serialized


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors."""
    serialized_errors = _serialize_validation_errors(exc.errors())

    logger.warning(
        f"Validation error: {serialized_errors}",
        extra={
            "path": request.url.path,
            "errors": serialized_errors,
        },
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(VALIDATION_FAILED, serialized_errors),
    )


async def store_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle database errors that escaped the service layer."""
    error = StoreError()
    error.__cause__ = exc
    return await app_exception_handler(request, error)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(
        f"Unhandled exception: {str(exc)}",
        extra={
            "path": request.url.path,
            "exception_type": type(exc).__name__,
        },
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Internal server error"),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, store_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
