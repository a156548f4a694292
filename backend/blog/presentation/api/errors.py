"""Maps domain exceptions to the JSON error body every endpoint shares.

    {"error": true, "status": 404, "message": "Article with id '7' not found"}
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog.domain.exceptions import (
    EntityNotFoundError,
    FormValidationError,
    InvalidCredentialsError,
    MalformedParameterError,
    PageNotFoundError,
)

logger = logging.getLogger(__name__)

INVALID_DATA_MESSAGE = "Invalid data sent"


def error_response(status_code: int, message: str, **extra: Any) -> JSONResponse:
    body = {"error": True, "status": status_code, "message": message}
    body.update(extra)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def _not_found(request: Request, exc: Exception) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, str(exc))


async def _malformed_parameter(request: Request, exc: MalformedParameterError) -> JSONResponse:
    logger.debug("%s %s: %s", request.method, request.url.path, exc)
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def _form_invalid(request: Request, exc: FormValidationError) -> JSONResponse:
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.errors_list)
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        str(exc),
        errors={"errors_list": exc.errors_list, "error_by_field": exc.error_by_field},
        **exc.context,
    )


async def _invalid_credentials(request: Request, exc: InvalidCredentialsError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def _request_invalid(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("%s %s: %s", request.method, request.url.path, exc.errors())
    return error_response(status.HTTP_400_BAD_REQUEST, INVALID_DATA_MESSAGE)


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all domain → HTTP mappings to the application."""
    app.add_exception_handler(EntityNotFoundError, _not_found)
    app.add_exception_handler(PageNotFoundError, _not_found)
    app.add_exception_handler(MalformedParameterError, _malformed_parameter)
    app.add_exception_handler(FormValidationError, _form_invalid)
    app.add_exception_handler(InvalidCredentialsError, _invalid_credentials)
    app.add_exception_handler(RequestValidationError, _request_invalid)
    app.add_exception_handler(StarletteHTTPException, _http_error)
