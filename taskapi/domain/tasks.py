"""Task entity, id parsing and field validation."""
from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from pydantic import BaseModel

# Decimal literal with optional sign, fraction and exponent ("1", "1.0", "1e2").
NUMERIC_SEGMENT = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*")
MAX_TASK_ID = 2**63 - 1

TITLE_REQUIRED = "Title is required and must be a string"
DESCRIPTION_REQUIRED = "Description is required and must be a string"
COMPLETED_BOOLEAN = "Completed must be a boolean"
TITLE_STRING = "Title must be a string"
TITLE_EMPTY = "Title must not be empty"
DESCRIPTION_STRING = "Description must be a string"
DESCRIPTION_EMPTY = "Description must not be empty"


class Task(BaseModel):
    id: int
    title: str
    description: str
    completed: bool


@dataclass(frozen=True)
class NewTask:
    title: str
    description: str
    completed: bool


@dataclass(frozen=True)
class TaskChanges:
    """Partial update; None means the field was not supplied."""

    title: Optional[str] = None
    description: Optional[str] = None
    completed: Optional[bool] = None

    def as_dict(self) -> dict:
        values = {"title": self.title, "description": self.description, "completed": self.completed}
        return {key: value for key, value in values.items() if value is not None}

    def is_empty(self) -> bool:
        return not self.as_dict()


def is_numeric_segment(value: str | None) -> bool:
    """Return True when the path segment reads as a number."""
    if not value:
        return False
    return bool(NUMERIC_SEGMENT.fullmatch(value))


def parse_task_id(value: str | None) -> int | None:
    """
    Convert a numeric path segment into a task id.

    Returns None when the segment is not a positive integer ("1.5", "0", "-3").
    "1.0" and "1e2" are integral and accepted.
    """
    if not is_numeric_segment(value):
        return None
    try:
        number = Decimal(value.strip())
    except InvalidOperation:
        return None
    if number != number.to_integral_value() or number < 1 or number > MAX_TASK_ID:
        return None
    return int(number)


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def validate_new_task(data: Mapping[str, Any]) -> tuple[NewTask | None, list[str]]:
    """Validate a create body. Returns (task, []) or (None, errors)."""
    title = data.get("title")
    description = data.get("description")
    completed = data.get("completed")

    errors: list[str] = []
    if not _is_non_empty_string(title):
        errors.append(TITLE_REQUIRED)
    if not _is_non_empty_string(description):
        errors.append(DESCRIPTION_REQUIRED)
    if not isinstance(completed, bool):
        errors.append(COMPLETED_BOOLEAN)
    if errors:
        return None, errors
    return NewTask(title=title, description=description, completed=completed), []


def validate_task_changes(data: Mapping[str, Any]) -> tuple[TaskChanges | None, list[str]]:
    """Validate an update body; only keys present with a non-null value count."""
    title = data.get("title")
    description = data.get("description")
    completed = data.get("completed")

    errors: list[str] = []
    if title is not None:
        if not isinstance(title, str):
            errors.append(TITLE_STRING)
        elif title == "":
            errors.append(TITLE_EMPTY)
    if description is not None:
        if not isinstance(description, str):
            errors.append(DESCRIPTION_STRING)
        elif description == "":
            errors.append(DESCRIPTION_EMPTY)
    if completed is not None and not isinstance(completed, bool):
        errors.append(COMPLETED_BOOLEAN)
    if errors:
        return None, errors
    return TaskChanges(title=title, description=description, completed=completed), []
