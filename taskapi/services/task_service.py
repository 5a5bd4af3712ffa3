"""Task CRUD use cases (validation, lookups, mutations)."""

from __future__ import annotations

import json
import logging
from typing import Any

from taskapi.domain.tasks import (
    Task,
    parse_task_id,
    validate_new_task,
    validate_task_changes,
)
from taskapi.repositories import TaskRepository

logger = logging.getLogger(__name__)


class TaskError(Exception):
    """Base exception for the task workflow; carries its envelope fields."""

    status_code = 400
    msg = "Bad request"

    def __init__(self, errors: list[str] | None = None) -> None:
        self.errors = list(errors or [])
        super().__init__("; ".join(self.errors) or self.msg)


class InvalidTaskIdError(TaskError):
    """Raised when a numeric path segment is not a usable task id."""

    msg = "Invalid Task ID"

    def __init__(self) -> None:
        super().__init__(["Task ID is invalid"])


class InvalidRequestBodyError(TaskError):
    """Raised when the body is not a JSON object."""

    msg = "Invalid request body"

    def __init__(self) -> None:
        super().__init__(["Failed to parse JSON"])


class TaskValidationError(TaskError):
    msg = "Validation errors"


class TaskNotFoundError(TaskError):
    status_code = 404
    msg = "Task not found"

    def __init__(self) -> None:
        super().__init__(["No task found with the given ID"])


def parse_body(raw: bytes | str | None) -> dict:
    """Decode a request body into a dict or raise InvalidRequestBodyError."""
    try:
        data: Any = json.loads(raw or b"")
    except (ValueError, RecursionError):
        raise InvalidRequestBodyError()
    if not isinstance(data, dict):
        raise InvalidRequestBodyError()
    return data


class TaskService:
    def __init__(self, repository: TaskRepository) -> None:
        self.repository = repository

    def resolve_id(self, raw_id: str) -> int:
        task_id = parse_task_id(raw_id)
        if task_id is None:
            raise InvalidTaskIdError()
        return task_id

    def list_tasks(self) -> list[Task]:
        return self.repository.list_tasks()

    def get_task(self, raw_id: str) -> Task:
        task = self.repository.get_task(self.resolve_id(raw_id))
        if task is None:
            raise TaskNotFoundError()
        return task

    def create_task(self, body: bytes | str | None) -> Task:
        new_task, errors = validate_new_task(parse_body(body))
        if errors:
            raise TaskValidationError(errors)
        task = self.repository.create_task(new_task)
        logger.info("Created task %s", task.id)
        return task

    def update_task(self, raw_id: str, body: bytes | str | None) -> Task:
        task_id = self.resolve_id(raw_id)
        changes, errors = validate_task_changes(parse_body(body))
        if errors:
            raise TaskValidationError(errors)
        task = self.repository.update_task(task_id, changes)
        if task is None:
            raise TaskNotFoundError()
        logger.info("Updated task %s (%s)", task_id, ", ".join(sorted(changes.as_dict())) or "no changes")
        return task

    def delete_task(self, raw_id: str) -> None:
        task_id = self.resolve_id(raw_id)
        if not self.repository.delete_task(task_id):
            raise TaskNotFoundError()
        logger.info("Deleted task %s", task_id)
