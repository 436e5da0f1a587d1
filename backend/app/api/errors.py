"""Translate domain errors into HTTP responses."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.errors import (
    AccountNotFound,
    AdminAlreadyExists,
    AdminCannotBeDeleted,
    AdminNotFound,
    AppError,
    EmailInUse,
    InternalError,
    InvalidCredentials,
    InvalidPhoneNumber,
    PasswordTooLong,
    PersistenceError,
    PhoneNumberInUse,
    SigningError,
    TokenError,
    UserNotFound,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[AppError], int] = {
    AccountNotFound: status.HTTP_401_UNAUTHORIZED,
    InvalidCredentials: status.HTTP_401_UNAUTHORIZED,
    TokenError: status.HTTP_401_UNAUTHORIZED,
    AdminNotFound: status.HTTP_404_NOT_FOUND,
    UserNotFound: status.HTTP_404_NOT_FOUND,
    AdminAlreadyExists: status.HTTP_409_CONFLICT,
    PhoneNumberInUse: status.HTTP_409_CONFLICT,
    EmailInUse: status.HTTP_409_CONFLICT,
    AdminCannotBeDeleted: status.HTTP_403_FORBIDDEN,
    InvalidPhoneNumber: status.HTTP_400_BAD_REQUEST,
    PasswordTooLong: status.HTTP_400_BAD_REQUEST,
    PersistenceError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    SigningError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: AppError) -> int:
    """Most specific status registered for exc's class hierarchy."""
    for cls in type(exc).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
        status_code = status_for(exc)
        if status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc!r}", exc_info=exc)
            detail = InternalError.message
        else:
            detail = str(exc)
        return JSONResponse(status_code=status_code, content={"detail": detail})
