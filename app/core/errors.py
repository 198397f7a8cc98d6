# app/core/errors.py
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base for every failure the API reports to clients.

    Each subclass fixes the HTTP status it maps to and a default message;
    the message can be a string or a list of structured validation errors.
    """

    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    message = "Invalid request"


class ConflictError(AppError):
    status_code = 400
    message = "Email already exists"


class AuthenticationError(AppError):
    status_code = 401
    message = "Invalid credentials"


class Unauthenticated(AuthenticationError):
    message = "Access denied"


class InvalidToken(AuthenticationError):
    message = "Invalid token"


class Forbidden(AppError):
    status_code = 403
    message = "Forbidden"


class NotFound(AppError):
    status_code = 404
    message = "Not found"


class InternalError(AppError):
    pass


def error_response(status_code: int, message) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return error_response(400, jsonable_encoder(exc.errors()))


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, exc.detail)


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(InternalError.status_code, InternalError.message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(SQLAlchemyError, unexpected_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)


__all__ = [
    "AppError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "Unauthenticated",
    "InvalidToken",
    "Forbidden",
    "NotFound",
    "InternalError",
    "register_exception_handlers",
]
