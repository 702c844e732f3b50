from .schemas import TaskDraft, TaskRecord, TaskStatus


def build_task_record(draft: TaskDraft, user_id: str, project_id: str) -> TaskRecord:
    """Merge a parsed draft with its owner and project as a new "todo" task."""
    return TaskRecord(
        title=draft.title,
        description=draft.description,
        emoji=draft.emoji,
        user_id=user_id,
        project_id=project_id,
        status=TaskStatus.todo,
        priority=draft.priority,
        is_important=draft.is_important,
        due_date=draft.due_date,
    )
