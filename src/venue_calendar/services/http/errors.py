from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ...errors import InfrastructureError, NotFoundError, ValidationError
from .responses import error_response, internal_error_response

logger = logging.getLogger(__name__)


async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return error_response(400, "bad_request", "Bad request", str(exc))


async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return error_response(400, "bad_request", "Bad request", "Request body is not well-formed. It must be JSON.")


async def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(404, "not_found", "Not Found", str(exc))


async def _infrastructure_error(request: Request, exc: InfrastructureError) -> JSONResponse:
    logger.error("Store failure during %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return internal_error_response()


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = "not_found" if exc.status_code == 404 else "http_error"
    return error_response(exc.status_code, code, str(exc.detail), str(exc.detail))


def register_error_handlers(app: FastAPI) -> None:
    """Map each error kind to its response code and error envelope."""

    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(NotFoundError, _not_found)
    app.add_exception_handler(InfrastructureError, _infrastructure_error)
    app.add_exception_handler(StarletteHTTPException, _http_error)
