from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool

from taskapi.core.responses import ok
from taskapi.domain.tasks import is_numeric_segment
from taskapi.routers.fallback import endpoint_not_found
from taskapi.services.task_service import TaskService

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _get_task_service(request: Request) -> TaskService:
    svc = getattr(getattr(request.app, "state", None), "task_service", None)
    if not svc:
        raise RuntimeError("TaskService not configured")
    return svc


def _dump(task) -> dict:
    return task.model_dump()


@router.get("")
async def list_tasks(request: Request):
    svc = _get_task_service(request)
    tasks = await run_in_threadpool(svc.list_tasks)
    return ok([_dump(task) for task in tasks], "Tasks retrieved successfully")


@router.post("")
async def create_task(request: Request):
    svc = _get_task_service(request)
    body = await request.body()
    task = await run_in_threadpool(svc.create_task, body)
    return ok(_dump(task), "Task created successfully", status_code=201)


@router.get("/{task_id}")
async def get_task(task_id: str, request: Request):
    # Non-numeric segments are not task URLs at all.
    if not is_numeric_segment(task_id):
        return endpoint_not_found()
    svc = _get_task_service(request)
    task = await run_in_threadpool(svc.get_task, task_id)
    return ok(_dump(task), "Task retrieved successfully")


@router.put("/{task_id}")
async def update_task(task_id: str, request: Request):
    if not is_numeric_segment(task_id):
        return endpoint_not_found()
    svc = _get_task_service(request)
    body = await request.body()
    task = await run_in_threadpool(svc.update_task, task_id, body)
    return ok(_dump(task), "Task updated successfully")


@router.delete("/{task_id}")
async def delete_task(task_id: str, request: Request):
    if not is_numeric_segment(task_id):
        return endpoint_not_found()
    svc = _get_task_service(request)
    await run_in_threadpool(svc.delete_task, task_id)
    return ok(None, "Task deleted successfully")
