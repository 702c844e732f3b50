from __future__ import annotations

import logging
import re
from datetime import date, datetime, time, timedelta

import dateparser

from ..config import settings
from ..schemas import Priority, TaskDraft
from ..utils import clock
from ..utils.emoji import first_pictograph, strip_pictographs
from ..utils.text import collapse_spaces
from . import rules

logger = logging.getLogger(__name__)

_DATE_FIELDS_RE = re.compile(r"\d+")

DATE_SETTINGS = {
    "DATE_ORDER": "MDY",
    "PREFER_DATES_FROM": "future",
    "RETURN_AS_TIMEZONE_AWARE": False,
    "REQUIRE_PARTS": ["day", "month"],
}


def _as_datetime(reference: datetime | date | None) -> datetime:
    if reference is None:
        return clock.now()
    if isinstance(reference, datetime):
        return reference
    return datetime.combine(reference, time())


def _detect_priority(original: str, lowered: str) -> Priority:
    runs = rules.BANG_RUN_PAT.findall(original)
    if runs:
        return rules.BANG_PRIORITY[max(len(r) for r in runs)]
    for level, words in rules.PRIORITY_KEYWORDS:
        if any(w in lowered for w in words):
            return level
    return Priority.medium


def _detect_importance(lowered: str, priority: Priority) -> bool:
    return priority is Priority.high or any(m in lowered for m in rules.IMPORTANCE_MARKERS)


def _parse_literal_date(phrase: str, ref: datetime) -> date | None:
    date_settings = {**DATE_SETTINGS, "RELATIVE_BASE": ref.replace(tzinfo=None)}
    try:
        parsed = dateparser.parse(phrase, languages=["en"], settings=date_settings)
    except (ValueError, OverflowError):
        parsed = None
    # dateparser retries day-first on its own; only month-first is accepted
    month, day = (int(n) for n in _DATE_FIELDS_RE.findall(phrase)[:2])
    if parsed is None or (parsed.month, parsed.day) != (month, day):
        logger.debug("Ignoring unparseable due date %r", phrase)
        return None
    return parsed.date()


def _resolve_day(phrase: str, ref: datetime) -> date | None:
    today = ref.date()
    if phrase in rules.RELATIVE_DAYS:
        return today + timedelta(days=rules.RELATIVE_DAYS[phrase])
    if phrase in rules.WEEK_ENDS:
        sunday_offset = ref.isoweekday() % 7
        return today + timedelta(days=rules.WEEK_ENDS[phrase] - sunday_offset)
    if phrase in rules.WEEKDAYS:
        return today + timedelta(days=(rules.WEEKDAYS[phrase] - today.weekday()) % 7)
    return _parse_literal_date(phrase, ref)


def _extract_due(lowered: str, ref: datetime) -> datetime | None:
    """
    First date phrase (in pattern order) resolved to that day at 23:59.
    Only the first pattern that matches is considered; a bad literal date
    means no due date rather than trying the next pattern.
    """
    for pattern in rules.DUE_DATE_PATTERNS:
        m = pattern.search(lowered)
        if not m:
            continue
        day = _resolve_day(m.group(1), ref)
        if day is None:
            return None
        hour, minute = rules.END_OF_DAY
        return datetime.combine(day, time(hour, minute), tzinfo=ref.tzinfo)
    return None


def _split_description(clean: str) -> tuple[str, str | None]:
    for sep in rules.DESCRIPTION_SEPARATORS:
        if sep in clean:
            head, tail = clean.split(sep, 1)
            return head.strip(), tail.strip() or None
    return clean, None


def _clean_title(candidate: str) -> str:
    work = rules.STOP_PHRASE_PAT.sub("", candidate)
    for symbol in rules.TITLE_STOP_SYMBOLS:
        work = work.replace(symbol, "")
    work = rules.DATE_PHRASE_PAT.sub("", work)
    work = rules.BARE_DATE_PAT.sub("", work)
    work = rules.BANG_RUN_PAT.sub("", work)
    return collapse_spaces(work).strip(" ,;:-")


def parse_task(text: str | None, reference: datetime | date | None = None) -> TaskDraft:
    """
    Turn one line of free text into a TaskDraft. Never raises.
    - emoji: first emoji cluster (all of them are stripped from the text)
    - priority: longest "!" run (!, !!, !!!), otherwise keywords
    - importance: keywords/star, or high priority
    - due: "due/by/before/until <date>", today, tomorrow, this/next week
    - title/description split on " - ", " : ", " because ", ...
    `reference` stands in for "now"; the clock is read when it is omitted.
    """
    original = text or ""
    lowered = original.lower()
    ref = _as_datetime(reference)

    emoji = first_pictograph(original)
    clean = strip_pictographs(original).strip()

    priority = _detect_priority(original, lowered)
    is_important = _detect_importance(lowered, priority)
    due_date = _extract_due(lowered, ref)

    candidate, description = _split_description(clean)
    title = _clean_title(candidate) or settings.default_title

    draft = TaskDraft(
        title=title,
        description=description,
        emoji=emoji,
        priority=priority,
        is_important=is_important,
        due_date=due_date,
    )
    logger.debug("Parsed %r -> %s", original, draft)
    return draft
