from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import pytest

# Make the taskapi package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from taskapi.repositories.memory_repository import InMemoryTaskRepository  # noqa: E402
from taskapi.services.task_service import (  # noqa: E402
    InvalidRequestBodyError,
    InvalidTaskIdError,
    TaskNotFoundError,
    TaskService,
    TaskValidationError,
    parse_body,
)


@pytest.fixture()
def svc():
    return TaskService(InMemoryTaskRepository())


def _body(**fields) -> bytes:
    return json.dumps(fields).encode()


@pytest.mark.parametrize("raw", [b"", b"{oops", b"[1, 2]", b"null", b"\xff\xfe", pytest.param(b"[" * 100000, id="deeply-nested")])
def test_parse_body_rejects_non_objects(raw):
    with pytest.raises(InvalidRequestBodyError) as exc:
        parse_body(raw)
    assert exc.value.errors == ["Failed to parse JSON"]
    assert exc.value.status_code == 400


def test_create_then_get(svc):
    task = svc.create_task(_body(title="A", description="B", completed=False))
    assert task.id == 1
    assert svc.get_task("1") == task


def test_create_validation_error_lists_fields(svc):
    with pytest.raises(TaskValidationError) as exc:
        svc.create_task(_body(title="A", description="B", completed="yes"))
    assert exc.value.msg == "Validation errors"
    assert exc.value.errors == ["Completed must be a boolean"]
    assert svc.list_tasks() == []


def test_get_malformed_id(svc):
    with pytest.raises(InvalidTaskIdError) as exc:
        svc.get_task("1.5")
    assert exc.value.errors == ["Task ID is invalid"]


def test_get_missing(svc):
    with pytest.raises(TaskNotFoundError) as exc:
        svc.get_task("999999")
    assert exc.value.status_code == 404
    assert exc.value.errors == ["No task found with the given ID"]


def test_update_validates_before_lookup(svc):
    with pytest.raises(TaskValidationError):
        svc.update_task("999", _body(completed="yes"))
    with pytest.raises(TaskNotFoundError):
        svc.update_task("999", _body(completed=True))


def test_update_keeps_omitted_fields(svc):
    svc.create_task(_body(title="A", description="B", completed=True))
    task = svc.update_task("1", _body(description="C", completed=False))
    assert task.model_dump() == {"id": 1, "title": "A", "description": "C", "completed": False}


def test_update_with_no_fields_returns_task_unchanged(svc):
    created = svc.create_task(_body(title="A", description="B", completed=False))
    assert svc.update_task("1", _body()) == created


def test_delete_twice(svc):
    svc.create_task(_body(title="A", description="B", completed=False))
    svc.delete_task("1")
    with pytest.raises(TaskNotFoundError):
        svc.delete_task("1")


def test_mutations_are_logged(svc, caplog):
    caplog.set_level(logging.INFO, logger="taskapi.services.task_service")
    svc.create_task(_body(title="A", description="B", completed=False))
    svc.update_task("1", _body(completed=True))
    svc.delete_task("1")
    messages = [r.getMessage() for r in caplog.records]
    assert "Created task 1" in messages
    assert "Updated task 1 (completed)" in messages
    assert "Deleted task 1" in messages
