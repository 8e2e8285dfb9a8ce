from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable

from fastapi import Request
from starlette.responses import Response

from .responses import MEDIA_TYPE, error_response, internal_error_response

logger = logging.getLogger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]

_BODY_METHODS = {"POST", "PATCH", "PUT"}


async def log_requests(request: Request, call_next: CallNext) -> Response:
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info('[%s] "%s" %d %.1fms', request.method, str(request.url), response.status_code, elapsed_ms)
    return response


async def recover_errors(request: Request, call_next: CallNext) -> Response:
    try:
        return await call_next(request)
    except Exception:  # noqa: BLE001
        logger.exception("Unhandled error during %s %s", request.method, request.url.path)
        return internal_error_response()


async def enforce_media_type(request: Request, call_next: CallNext) -> Response:
    if request.method == "OPTIONS" or request.url.path == "/health":
        return await call_next(request)
    if MEDIA_TYPE not in request.headers.get("accept", ""):
        return error_response(
            406,
            "not_acceptable",
            "Not Acceptable",
            f"Accept header must be set to '{MEDIA_TYPE}'.",
        )
    if request.method in _BODY_METHODS and not request.headers.get("content-type", "").startswith(MEDIA_TYPE):
        return error_response(
            415,
            "unsupported_media_type",
            "Unsupported Media Type",
            f"Content-Type header must be set to: '{MEDIA_TYPE}'.",
        )
    return await call_next(request)
