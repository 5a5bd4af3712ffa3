from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the taskapi package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from taskapi.domain.tasks import (  # noqa: E402
    TaskChanges,
    is_numeric_segment,
    parse_task_id,
    validate_new_task,
    validate_task_changes,
)


@pytest.mark.parametrize("segment", ["1", "42", " 7 ", "1.5", "-3", "1e2", ".5"])
def test_numeric_segments(segment):
    assert is_numeric_segment(segment) is True


@pytest.mark.parametrize("segment", ["", "abc", "1a", "0x10", "Infinity", "1/2"])
def test_non_numeric_segments(segment):
    assert is_numeric_segment(segment) is False


def test_parse_task_id_accepts_positive_integers():
    assert parse_task_id("1") == 1
    assert parse_task_id("1.0") == 1
    assert parse_task_id("1e2") == 100
    assert parse_task_id("999999") == 999999


@pytest.mark.parametrize("segment", ["1.5", "0", "-3", "abc", "1e400"])
def test_parse_task_id_rejects_malformed(segment):
    assert parse_task_id(segment) is None


def test_validate_new_task_ok():
    task, errors = validate_new_task({"title": "A", "description": "B", "completed": False})
    assert errors == []
    assert task.title == "A"
    assert task.completed is False


def test_validate_new_task_collects_every_error():
    task, errors = validate_new_task({"title": "", "description": 3, "completed": "no"})
    assert task is None
    assert errors == [
        "Title is required and must be a string",
        "Description is required and must be a string",
        "Completed must be a boolean",
    ]


def test_validate_new_task_missing_completed():
    _, errors = validate_new_task({"title": "A", "description": "B"})
    assert errors == ["Completed must be a boolean"]


def test_validate_task_changes_keeps_explicit_false():
    changes, errors = validate_task_changes({"completed": False})
    assert errors == []
    assert changes.as_dict() == {"completed": False}


def test_validate_task_changes_null_means_absent():
    changes, errors = validate_task_changes({"title": None, "description": "new"})
    assert errors == []
    assert changes == TaskChanges(description="new")


def test_validate_task_changes_rejects_bad_types_and_empty_strings():
    changes, errors = validate_task_changes({"title": 5, "description": "", "completed": 1})
    assert changes is None
    assert errors == [
        "Title must be a string",
        "Description must not be empty",
        "Completed must be a boolean",
    ]


def test_empty_changes():
    changes, errors = validate_task_changes({"unknown": "ignored"})
    assert errors == []
    assert changes.is_empty()
