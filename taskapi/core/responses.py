"""
JSON envelope shared by every endpoint.

Every response, success or failure, has the same shape:
``{"success": bool, "payload": any, "msg": str, "errors": [str]}``.
"""

from __future__ import annotations

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field


class Envelope(BaseModel):
    success: bool
    payload: Any = None
    msg: str
    errors: list[str] = Field(default_factory=list)


def envelope_response(
    status_code: int,
    success: bool,
    payload: Any,
    msg: str,
    errors: list[str] | None = None,
) -> JSONResponse:
    body = Envelope(success=success, payload=payload, msg=msg, errors=list(errors or []))
    return JSONResponse(jsonable_encoder(body), status_code=status_code)


def ok(payload: Any, msg: str, status_code: int = 200) -> JSONResponse:
    return envelope_response(status_code, True, payload, msg)


def fail(status_code: int, msg: str, errors: list[str]) -> JSONResponse:
    return envelope_response(status_code, False, None, msg, errors)
