from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse

MEDIA_TYPE = "application/vnd.api+json"


def success_response(data: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse({"data": data}, status_code=status_code, media_type=MEDIA_TYPE)


def message_response(message: str, status_code: int = 202) -> JSONResponse:
    return success_response({"message": message}, status_code=status_code)


def error_response(status_code: int, code: str, title: str, detail: str) -> JSONResponse:
    payload = {"errors": [{"id": code, "status": status_code, "title": title, "detail": detail}]}
    return JSONResponse(payload, status_code=status_code, media_type=MEDIA_TYPE)


def internal_error_response() -> JSONResponse:
    return error_response(500, "internal_server_error", "Internal Server Error", "Something went wrong.")
