import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .config import settings


class Priority(str, enum.Enum):
    low = "low"
    medium = "medium"
    high = "high"


class TaskStatus(str, enum.Enum):
    todo = "todo"
    in_progress = "in_progress"
    done = "done"
    canceled = "canceled"


class TaskDraft(BaseModel):
    """Structured result of parsing one line of free text."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1)
    description: str | None = None
    emoji: str | None = None
    priority: Priority = Priority.medium
    is_important: bool = False
    due_date: datetime | None = None


class ParseIn(BaseModel):
    text: str
    # Overrides the clock; lets a client preview as of a fixed moment.
    reference: datetime | None = None


class TaskSubmitIn(ParseIn):
    user_id: str = Field(..., min_length=1)
    project_id: str = Field(..., min_length=1)


class TaskFields(BaseModel):
    # Serialize enums as their values (e.g., "todo")
    model_config = ConfigDict(use_enum_values=True, str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=settings.max_title_length)
    description: str | None = Field(None, max_length=settings.max_description_length)
    emoji: str | None = None
    priority: Priority = Priority.medium
    is_important: bool = False
    due_date: datetime | None = None


class TaskRecord(TaskFields):
    user_id: str
    project_id: str
    status: TaskStatus = TaskStatus.todo
