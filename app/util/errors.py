from http import HTTPStatus
import logging
from typing import Any, Optional, Union

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)


class CustomError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: Optional[int] = None, headers: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.headers = headers


class BadRequestError(CustomError):
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(CustomError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class NotFoundError(CustomError):
    status_code = status.HTTP_404_NOT_FOUND


class InternalServerError(CustomError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(status_code: int, message: Union[str, list[str]]) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "message": message,
        "error": HTTPStatus(status_code).phrase,
    }


def _validation_messages(exc: RequestValidationError) -> list[str]:
    messages = []
    for error in exc.errors():
        # drop the "body"/"query"/"path" prefix, keep the field path
        loc = [str(part) for part in error.get("loc", ())[1:]]
        field = ".".join(loc)
        msg = error.get("msg", "is invalid")
        messages.append(f"{field} {msg}" if field else msg)
    return messages


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(CustomError)
    async def custom_error_handler(request: Request, exc: CustomError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.status_code, exc.message),
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(status.HTTP_400_BAD_REQUEST, _validation_messages(exc)),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        message = exc.detail if isinstance(exc.detail, str) else HTTPStatus(exc.status_code).phrase
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.status_code, message),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"),
        )
