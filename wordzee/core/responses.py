"""JSON envelope shared by every endpoint: {"success": ..., "data"|"message": ...}."""
from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse


def ok_response(data: Any, status_code: int = 200, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse({"success": True, "data": data}, status_code=status_code, headers=headers)


def words_response(words: list[str], headers: dict[str, str] | None = None) -> JSONResponse:
    return ok_response({"words": words, "total": len(words)}, headers=headers)


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"success": False, "message": message}, status_code=status_code)
