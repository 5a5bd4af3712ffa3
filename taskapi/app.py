from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from taskapi.core.config import Settings, get_settings
from taskapi.core.responses import fail
from taskapi.repositories import StorageError, TaskRepository, build_repository
from taskapi.routers import fallback as fallback_router
from taskapi.routers import tasks as tasks_router
from taskapi.routers.fallback import not_found_for
from taskapi.services.task_service import TaskError, TaskService

logger = logging.getLogger(__name__)


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log one line per request and set baseline response headers."""

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response


async def _task_error_handler(request: Request, exc: TaskError):
    return fail(exc.status_code, exc.msg, exc.errors)


async def _storage_error_handler(request: Request, exc: StorageError):
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return fail(500, "Internal server error", ["Storage backend failure"])


async def _http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in (404, 405):
        return not_found_for(request.url.path)
    return fail(exc.status_code, str(exc.detail), [str(exc.detail)])


async def _unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return fail(500, "Internal server error", ["Unexpected error"])


def create_app(repository: TaskRepository | None = None, settings: Settings | None = None) -> FastAPI:
    """
    Build the application around an explicitly owned store.

    Without a repository the backend comes from settings (TASKS_BACKEND).
    Compatible with ``uvicorn --factory taskapi.app:create_app``.
    """
    settings = settings or get_settings()
    if repository is None:
        repository = build_repository(settings)

    app = FastAPI(title="Task API")
    app.state.settings = settings
    app.state.task_service = TaskService(repository)

    app.add_middleware(RequestLogMiddleware)
    app.add_exception_handler(TaskError, _task_error_handler)
    app.add_exception_handler(StorageError, _storage_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(Exception, _unexpected_error_handler)

    app.include_router(tasks_router.router)
    # must stay last: answers every unmatched path
    app.include_router(fallback_router.router)

    logger.info("Task API ready (backend=%s, env=%s)", type(repository).__name__, settings.app_env)
    return app
