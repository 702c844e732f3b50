from datetime import date, datetime

import pytest
from pydantic import ValidationError

from quicktask.records import build_task_record
from quicktask.schemas import Priority, TaskDraft, TaskRecord, TaskStatus
from quicktask.validation import (
    TaskValidationError,
    ensure_valid_draft,
    sanitize_input,
    validate_task_input,
)

TODAY = date(2026, 10, 14)


def test_valid_input_has_no_errors():
    assert validate_task_input("Buy milk", "2%", "low", datetime(2026, 10, 14, 23, 59), TODAY) == []


def test_missing_title():
    assert validate_task_input("  ") == ["Task title is required"]
    assert validate_task_input(None) == ["Task title is required"]


def test_length_limits():
    errors = validate_task_input("t" * 201, description="d" * 1001)
    assert errors == [
        "Task title must be less than 200 characters",
        "Task description must be less than 1000 characters",
    ]


def test_unknown_priority():
    assert validate_task_input("Buy milk", priority="extreme") == ["Invalid priority level"]


def test_past_due_date_only_checked_against_a_day():
    yesterday = datetime(2026, 10, 13, 23, 59)
    assert validate_task_input("Buy milk", due_date=yesterday) == []
    assert validate_task_input("Buy milk", due_date=yesterday, today=TODAY) == ["Due date cannot be in the past"]


def test_ensure_valid_draft_raises_with_all_messages():
    draft = TaskDraft(title="x" * 300, description="y" * 2000)
    with pytest.raises(TaskValidationError) as info:
        ensure_valid_draft(draft)
    assert len(info.value.errors) == 2
    assert "Task title" in str(info.value)


def test_ensure_valid_draft_passes_through():
    draft = TaskDraft(title="Buy milk", priority=Priority.high)
    assert ensure_valid_draft(draft, today=TODAY) is draft


def test_sanitize_input():
    assert sanitize_input("  <b>hi</b>  ") == "bhi/b"
    assert sanitize_input(None) == ""
    assert len(sanitize_input("z" * 5000)) == 1000


def test_build_task_record_merges_owner_and_status():
    draft = TaskDraft(title="Fix bug", emoji="🔥", priority=Priority.high, is_important=True)
    record = build_task_record(draft, user_id="u1", project_id="p1")
    assert record.status == TaskStatus.todo.value
    assert record.priority == "high"
    assert record.user_id == "u1"
    assert record.project_id == "p1"
    assert record.emoji == "🔥"
    assert record.description is None


def test_record_fields_carry_the_limits():
    with pytest.raises(ValidationError):
        TaskRecord(title="t" * 201, user_id="u", project_id="p")
    with pytest.raises(ValidationError):
        TaskRecord(title="ok", description="d" * 1001, user_id="u", project_id="p")
    with pytest.raises(ValidationError):
        TaskRecord(title="ok", priority="extreme", user_id="u", project_id="p")


def test_blank_draft_title_is_rejected_on_submit():
    draft = TaskDraft(title="   ")
    with pytest.raises(TaskValidationError) as info:
        ensure_valid_draft(draft)
    assert info.value.errors == ["Task title is required"]
