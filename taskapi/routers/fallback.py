from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from taskapi.core.responses import fail

TASKS_PREFIX = "/tasks"

router = APIRouter(tags=["fallback"])


def endpoint_not_found() -> JSONResponse:
    return fail(404, "Endpoint not found", ["The requested endpoint does not exist"])


def resource_not_found() -> JSONResponse:
    return fail(404, "Not Found", ["The requested resource was not found"])


def not_found_for(path: str) -> JSONResponse:
    if path.startswith(TASKS_PREFIX):
        return endpoint_not_found()
    return resource_not_found()


@router.api_route(
    "/{full_path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
def catch_all(full_path: str, request: Request):
    return not_found_for(request.url.path)
