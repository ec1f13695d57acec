"""Application-level exception taxonomy and FastAPI handlers."""

from __future__ import annotations

import logging
from contextvars import Token
from http import HTTPStatus
from typing import Mapping

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from .core.context import REQUEST_ID_HEADER, bind_request_id, reset_request_id
from .schemas.system import ErrorResponse

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"


class ApplicationError(Exception):
    """Base class for domain-specific errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.headers = dict(headers) if headers else None


class AuthenticationError(ApplicationError):
    """Missing or invalid bearer credential."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid token"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class PermissionDeniedError(ApplicationError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Access denied"


class NotFoundError(ApplicationError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class ValidationError(ApplicationError):
    """Request values that fail a business rule."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"


class ConflictError(ApplicationError):
    """A uniqueness rule would be violated. Reported as 400 like other client errors."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Resource already exists"


class ServerError(ApplicationError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = SERVER_ERROR_MESSAGE


def _bind_request_context(request: Request) -> Token[str] | None:
    request_id = getattr(request.state, "request_id", None)
    if not request_id:
        return None
    return bind_request_id(request_id)


def _reset_request_context(token: Token[str] | None) -> None:
    if token is not None:
        reset_request_id(token)


def _error_response(
    request: Request,
    *,
    status_code: int,
    message: str,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    payload = ErrorResponse(message=message)
    response = JSONResponse(status_code=status_code, content=payload.model_dump())
    if headers:
        response.headers.update(headers)
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
    return response


def _http_exception_message(status_code: int, detail: object) -> str:
    if isinstance(detail, str) and detail:
        return detail
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the provided FastAPI app."""

    @app.exception_handler(ApplicationError)
    async def _handle_application_error(
        request: Request,
        exc: ApplicationError,
    ) -> JSONResponse:
        token = _bind_request_context(request)
        try:
            log = logger.error if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR else logger.warning
            log(
                "Application error encountered",
                extra={
                    "error": type(exc).__name__,
                    "status_code": exc.status_code,
                    "path": str(request.url.path),
                },
            )
            return _error_response(
                request,
                status_code=exc.status_code,
                message=exc.message,
                headers=exc.headers,
            )
        finally:
            _reset_request_context(token)

    @app.exception_handler(RequestValidationError)
    async def _handle_request_validation_error(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        token = _bind_request_context(request)
        try:
            logger.warning(
                "Request validation failed",
                extra={"errors": exc.errors(), "path": str(request.url.path)},
            )
            return _error_response(
                request,
                status_code=status.HTTP_400_BAD_REQUEST,
                message="Invalid request payload",
            )
        finally:
            _reset_request_context(token)

    @app.exception_handler(StarletteHTTPException)
    async def _handle_http_exception(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        token = _bind_request_context(request)
        try:
            log = logger.error if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR else logger.warning
            log(
                "HTTP exception raised",
                extra={"status_code": exc.status_code, "path": str(request.url.path)},
            )
            return _error_response(
                request,
                status_code=exc.status_code,
                message=_http_exception_message(exc.status_code, exc.detail),
                headers=exc.headers or None,
            )
        finally:
            _reset_request_context(token)

    @app.exception_handler(Exception)
    async def _handle_unhandled_exception(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        token = _bind_request_context(request)
        try:
            logger.error(
                "Unhandled application error.",
                exc_info=exc,
                extra={"path": str(request.url.path)},
            )
            return _error_response(
                request,
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                message=SERVER_ERROR_MESSAGE,
            )
        finally:
            _reset_request_context(token)


__all__ = [
    "ApplicationError",
    "AuthenticationError",
    "ConflictError",
    "NotFoundError",
    "PermissionDeniedError",
    "ServerError",
    "ValidationError",
    "register_exception_handlers",
]
