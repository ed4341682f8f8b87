"""
Exception handlers for the FastAPI application.

Every error leaves the API with the same JSON body:
``{"error": <reason phrase>, "message": <detail>, "code": <status>}``.
"""

import logging
from http import HTTPStatus
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from ..application.dto.error_dto import ErrorResponse

logger = logging.getLogger(__name__)


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def build_error_response(
    status_code: int,
    message: Any,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Render an ErrorResponse body with the given status"""
    status_code = int(status_code)
    body = ErrorResponse(
        error=_reason_phrase(status_code),
        message=message if isinstance(message, str) else str(message),
        code=status_code,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


async def http_exception_handler(request: Request, exception: StarletteHTTPException) -> JSONResponse:
    return build_error_response(exception.status_code, exception.detail, exception.headers)


async def validation_exception_handler(request: Request, exception: RequestValidationError) -> JSONResponse:
    """Malformed JSON or a body of the wrong shape is a client error (400)"""
    logger.debug(f"Rejected request to {request.url.path}: {exception.errors()}")
    return build_error_response(HTTPStatus.BAD_REQUEST, "Invalid request")


async def unhandled_exception_handler(request: Request, exception: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exception}",
        exc_info=exception,
    )
    return build_error_response(HTTPStatus.INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
