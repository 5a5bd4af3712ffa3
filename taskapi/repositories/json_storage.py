"""
JSON file persistence adapter.

The file holds a pretty-printed array of tasks. It is read once into a cache;
each mutation rewrites the whole file under the writer lock, through a temp
file so readers never see a half-written array.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from pydantic import ValidationError

from taskapi.domain.tasks import NewTask, Task, TaskChanges
from taskapi.repositories import StorageError

logger = logging.getLogger(__name__)


def load(path: Path) -> list[Task]:
    """Read tasks from disk; a missing file is an empty list."""
    if not path.exists():
        return []
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as exc:
        raise StorageError(f"Cannot read {path}: {exc}") from exc
    if not isinstance(raw, list):
        raise StorageError(f"{path} must contain a JSON array")
    try:
        return [Task.model_validate(item) for item in raw]
    except ValidationError as exc:
        raise StorageError(f"Invalid task record in {path}: {exc}") from exc


def save(path: Path, tasks: list[Task]) -> None:
    data = json.dumps([task.model_dump() for task in tasks], ensure_ascii=False, indent=2)
    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(data)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise StorageError(f"Cannot write {path}: {exc}") from exc


class JsonTaskRepository:
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        self._cache: list[Task] | None = None

    def _tasks(self) -> list[Task]:
        if self._cache is None:
            self._cache = load(self.path)
            logger.debug("Loaded %d task(s) from %s", len(self._cache), self.path)
        return self._cache

    def _flush(self, tasks: list[Task]) -> None:
        save(self.path, tasks)
        self._cache = tasks

    def list_tasks(self) -> list[Task]:
        with self._lock:
            return [task.model_copy() for task in self._tasks()]

    def get_task(self, task_id: int) -> Task | None:
        with self._lock:
            for task in self._tasks():
                if task.id == task_id:
                    return task.model_copy()
            return None

    def create_task(self, new_task: NewTask) -> Task:
        with self._lock:
            tasks = list(self._tasks())
            next_id = max((task.id for task in tasks), default=0) + 1
            task = Task(
                id=next_id,
                title=new_task.title,
                description=new_task.description,
                completed=new_task.completed,
            )
            tasks.append(task)
            self._flush(tasks)
            return task.model_copy()

    def update_task(self, task_id: int, changes: TaskChanges) -> Task | None:
        with self._lock:
            tasks = list(self._tasks())
            for idx, task in enumerate(tasks):
                if task.id == task_id:
                    tasks[idx] = task.model_copy(update=changes.as_dict())
                    self._flush(tasks)
                    return tasks[idx].model_copy()
            return None

    def delete_task(self, task_id: int) -> bool:
        with self._lock:
            tasks = self._tasks()
            remaining = [task for task in tasks if task.id != task_id]
            if len(remaining) == len(tasks):
                return False
            self._flush(remaining)
            return True
