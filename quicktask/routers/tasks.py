import logging

from fastapi import APIRouter, HTTPException

from ..nlp.parser import parse_task
from ..records import build_task_record
from ..schemas import TaskRecord, TaskSubmitIn
from ..utils import clock
from ..validation import ensure_valid_draft, sanitize_input

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=TaskRecord)
def submit_task(payload: TaskSubmitIn):
    text = sanitize_input(payload.text)
    if not text:
        raise HTTPException(400, "Task text is required")

    reference = payload.reference or clock.now()
    draft = ensure_valid_draft(parse_task(text, reference), today=reference.date())
    record = build_task_record(draft, user_id=payload.user_id, project_id=payload.project_id)
    logger.info(
        "Prepared task | project=%s priority=%s important=%s due=%s | text=%s",
        record.project_id,
        record.priority,
        record.is_important,
        record.due_date,
        text,
    )
    return record
