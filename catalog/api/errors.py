"""Exception handlers producing the JSON error envelope."""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.errors import AppError, RateLimitError, ValidationError
from catalog.schemas.common import ErrorBody, ErrorResponse

logger = logging.getLogger(__name__)


def error_response(
    status_code: int,
    code: str,
    message: str,
    details: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(error=ErrorBody(code=code, message=message, details=details))
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body, exclude_none=True),
        headers=headers,
    )


def _field_name(loc: tuple[Any, ...]) -> str:
    # Drop the leading "body"/"query"/"path" segment
    parts = [str(part) for part in loc[1:]] or [str(part) for part in loc]
    return ".".join(parts)


def register_exception_handlers(app: FastAPI, expose_errors: bool = True) -> None:
    """Install handlers on ``app``; ``expose_errors=False`` hides unexpected error messages."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        log = logger.error if exc.status_code >= 500 else logger.info
        log("%s %s -> %s %s", request.method, request.url.path, exc.code, exc.message)

        headers = None
        if isinstance(exc, RateLimitError):
            headers = {"Retry-After": str(exc.retry_after)}
        return error_response(exc.status_code, exc.code, exc.message, exc.details, headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        details = [
            {"field": _field_name(tuple(err["loc"])), "message": err["msg"], "code": err["type"]}
            for err in exc.errors()
        ]
        logger.info("%s %s -> validation failed: %s", request.method, request.url.path, details)
        return error_response(
            ValidationError.status_code,
            "VALIDATION_ERROR",
            "Validation failed",
            details,
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
        logger.warning("%s %s -> integrity error: %s", request.method, request.url.path, exc.orig)
        if "foreign key" in str(exc.orig).lower():
            return error_response(
                status.HTTP_400_BAD_REQUEST, "FOREIGN_KEY_VIOLATION", "Invalid reference"
            )
        return error_response(
            status.HTTP_409_CONFLICT, "UNIQUE_CONSTRAINT_VIOLATION", "Resource already exists"
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            code = "ROUTE_NOT_FOUND"
            message = f"Route {request.method} {request.url.path} not found"
        elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            code = "METHOD_NOT_ALLOWED"
            message = f"Method {request.method} not allowed on {request.url.path}"
        else:
            code = "HTTP_ERROR"
            message = str(exc.detail)
        logger.info("%s %s -> %s", request.method, request.url.path, exc.status_code)
        return error_response(exc.status_code, code, message, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        message = str(exc) if expose_errors else "An unexpected error occurred"
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_SERVER_ERROR", message
        )
