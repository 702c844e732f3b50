from fastapi import APIRouter

from ..nlp.parser import parse_task
from ..schemas import ParseIn, TaskDraft

router = APIRouter()


@router.post("", response_model=TaskDraft)
def preview(payload: ParseIn):
    """Live preview: parse without validating or building a record."""
    return parse_task(payload.text, payload.reference)
