"""Task data access backed by SQLAlchemy."""
from __future__ import annotations

import threading

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from taskapi.db.models import TaskRecord
from taskapi.db.session import create_schema, get_session
from taskapi.domain.tasks import NewTask, Task, TaskChanges
from taskapi.repositories import StorageError


def _entity_to_task(entity: TaskRecord) -> Task:
    return Task(
        id=entity.id,
        title=entity.title,
        description=entity.description,
        completed=bool(entity.completed),
    )


class SQLTaskRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    def __init__(self, database_url: str | None = None, *, ensure_schema: bool = True) -> None:
        self.database_url = database_url or None
        self._lock = threading.Lock()
        if ensure_schema:
            try:
                create_schema(self.database_url)
            except SQLAlchemyError as exc:
                raise StorageError(f"Cannot create schema: {exc}") from exc

    def list_tasks(self) -> list[Task]:
        try:
            with get_session(self.database_url) as session:
                rows = session.execute(select(TaskRecord).order_by(TaskRecord.id)).scalars().all()
                return [_entity_to_task(row) for row in rows]
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

    def get_task(self, task_id: int) -> Task | None:
        try:
            with get_session(self.database_url) as session:
                entity = session.get(TaskRecord, task_id)
                return _entity_to_task(entity) if entity else None
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

    def create_task(self, new_task: NewTask) -> Task:
        entity = TaskRecord(
            title=new_task.title,
            description=new_task.description,
            completed=new_task.completed,
        )
        try:
            with self._lock, get_session(self.database_url) as session:
                session.add(entity)
                session.commit()
                session.refresh(entity)
                return _entity_to_task(entity)
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

    def update_task(self, task_id: int, changes: TaskChanges) -> Task | None:
        try:
            with self._lock, get_session(self.database_url) as session:
                entity = session.get(TaskRecord, task_id)
                if not entity:
                    return None
                values = changes.as_dict()
                if values:
                    for key, value in values.items():
                        setattr(entity, key, value)
                    session.commit()
                    session.refresh(entity)
                return _entity_to_task(entity)
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

    def delete_task(self, task_id: int) -> bool:
        try:
            with self._lock, get_session(self.database_url) as session:
                result = session.execute(delete(TaskRecord).where(TaskRecord.id == task_id))
                session.commit()
                return result.rowcount > 0
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

    def import_task(self, task: Task) -> None:
        """Insert or overwrite a task keeping its id (used by migrations)."""
        try:
            with self._lock, get_session(self.database_url) as session:
                session.merge(
                    TaskRecord(
                        id=task.id,
                        title=task.title,
                        description=task.description,
                        completed=task.completed,
                    )
                )
                session.commit()
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc
