"""Process-lifetime task store."""

from __future__ import annotations

import threading

from taskapi.domain.tasks import NewTask, Task, TaskChanges


class InMemoryTaskRepository:
    """Ordered list of tasks; ids come from a counter and are never reused."""

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def _index_of(self, task_id: int) -> int:
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                return idx
        return -1

    def list_tasks(self) -> list[Task]:
        with self._lock:
            return [task.model_copy() for task in self._tasks]

    def get_task(self, task_id: int) -> Task | None:
        with self._lock:
            idx = self._index_of(task_id)
            return self._tasks[idx].model_copy() if idx != -1 else None

    def create_task(self, new_task: NewTask) -> Task:
        with self._lock:
            task = Task(
                id=self._next_id,
                title=new_task.title,
                description=new_task.description,
                completed=new_task.completed,
            )
            self._next_id += 1
            self._tasks.append(task)
            return task.model_copy()

    def update_task(self, task_id: int, changes: TaskChanges) -> Task | None:
        with self._lock:
            idx = self._index_of(task_id)
            if idx == -1:
                return None
            self._tasks[idx] = self._tasks[idx].model_copy(update=changes.as_dict())
            return self._tasks[idx].model_copy()

    def delete_task(self, task_id: int) -> bool:
        with self._lock:
            idx = self._index_of(task_id)
            if idx == -1:
                return False
            del self._tasks[idx]
            return True
