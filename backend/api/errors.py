"""
Exception handlers.

Translate application exceptions into the JSON error envelope:
validation 400, authentication 401, authorization 403, not found 404,
everything else 500. Routing errors (404, 405) keep their status
and use the same envelope. Details of unexpected errors are only exposed
outside production.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.config import Settings
from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    MentorError,
    NotFoundError,
    ValidationError,
)

from .models.errors import ErrorResponse, ValidationErrorResponse
from .responses import JSONResponse

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: list[tuple[type[MentorError], int]] = [
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
]


def status_for(exc: MentorError) -> int:
    """Map an application exception to its HTTP status code."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return 500


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Install the application's exception handlers on an app."""

    async def handle_app_error(request: Request, exc: MentorError) -> JSONResponse:
        status_code = status_for(exc)
        body = ErrorResponse(error=exc.message, code=exc.code)

        if status_code >= 500:
            logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.details}")
            if not settings.is_production:
                body.detail = getattr(exc, "original_error", None) or exc.message

        headers = None
        if isinstance(exc, AuthenticationError):
            headers = {"WWW-Authenticate": exc.challenge}
        return JSONResponse(
            status_code=status_code,
            content=body.model_dump(exclude_none=True),
            headers=headers,
        )

    async def handle_http_error(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        body = ErrorResponse(error=str(exc.detail), code=HTTPStatus(exc.status_code).name)
        return JSONResponse(
            status_code=exc.status_code,
            content=body.model_dump(exclude_none=True),
            headers=exc.headers,
        )

    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        body = ValidationErrorResponse(detail=jsonable_encoder(exc.errors()))
        return JSONResponse(status_code=400, content=body.model_dump())

    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        body = ErrorResponse(error="Internal server error")
        if not settings.is_production:
            body.detail = str(exc)
        return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))

    app.add_exception_handler(MentorError, handle_app_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
