from __future__ import annotations

import re
from datetime import date, datetime

from pydantic import ValidationError

from .config import settings
from .schemas import TaskDraft, TaskFields

_ANGLE_RE = re.compile(r"[<>]")


class TaskValidationError(ValueError):
    """Raised when a parsed task cannot be submitted; carries every message."""

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def _message(error: dict) -> str:
    field = error["loc"][0]
    if error["type"] == "string_too_long":
        return f"Task {field} must be less than {error['ctx']['max_length']} characters"
    if field == "title":
        return "Task title is required"
    if field == "priority":
        return "Invalid priority level"
    return f"Invalid task {field}"


def validate_task_input(
    title: str | None,
    description: str | None = None,
    priority: str | None = None,
    due_date: datetime | None = None,
    today: date | None = None,
) -> list[str]:
    """Check user-facing task fields against TaskFields; returns readable messages."""
    fields = {"title": title, "description": description, "due_date": due_date}
    if priority is not None:
        fields["priority"] = priority

    errors: list[str] = []
    try:
        TaskFields.model_validate(fields)
    except ValidationError as exc:
        errors.extend(_message(e) for e in exc.errors())

    # due dates are whole days, so "today" is still acceptable
    if due_date is not None and today is not None and due_date.date() < today:
        errors.append("Due date cannot be in the past")

    return errors


def ensure_valid_draft(draft: TaskDraft, today: date | None = None) -> TaskDraft:
    errors = validate_task_input(
        draft.title,
        description=draft.description,
        priority=draft.priority,
        due_date=draft.due_date,
        today=today,
    )
    if errors:
        raise TaskValidationError(errors)
    return draft


def sanitize_input(text: str | None) -> str:
    """Trim, drop angle brackets and cap the length of raw user input."""
    return _ANGLE_RE.sub("", (text or "").strip())[: settings.max_input_length]
