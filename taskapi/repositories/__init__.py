"""
Persistence adapters.

Every backend (memory, JSON file, SQL) implements the TaskRepository contract
so the service and routers never know where tasks live.
"""

from __future__ import annotations

from typing import Protocol

from taskapi.core.config import Settings, get_settings
from taskapi.domain.tasks import NewTask, Task, TaskChanges


class StorageError(Exception):
    """Raised when a backend cannot read or write its data."""


class TaskRepository(Protocol):
    def list_tasks(self) -> list[Task]: ...

    def get_task(self, task_id: int) -> Task | None: ...

    def create_task(self, new_task: NewTask) -> Task: ...

    def update_task(self, task_id: int, changes: TaskChanges) -> Task | None: ...

    def delete_task(self, task_id: int) -> bool: ...


def build_repository(settings: Settings | None = None) -> TaskRepository:
    """Instantiate the backend selected by TASKS_BACKEND."""
    settings = settings or get_settings()
    if settings.tasks_backend == "json":
        from taskapi.repositories.json_storage import JsonTaskRepository

        return JsonTaskRepository(settings.tasks_data_file)
    if settings.tasks_backend == "sql":
        from taskapi.repositories.sql_repository import SQLTaskRepository

        return SQLTaskRepository(settings.database_url)
    from taskapi.repositories.memory_repository import InMemoryTaskRepository

    return InMemoryTaskRepository()


__all__ = ["StorageError", "TaskRepository", "build_repository"]
