"""Static phrase tables for the quick-task parser.

Everything the parser recognizes lives here as data, so the rules can be
listed, tested and extended without touching the parsing code.
"""

from __future__ import annotations

import re

from ..schemas import Priority

# Pictographic code-point ranges (inclusive) treated as task emoji.
PICTOGRAPH_RANGES: tuple[tuple[int, int], ...] = (
    (0x1F600, 0x1F64F),  # emoticons
    (0x1F300, 0x1F5FF),  # misc symbols & pictographs
    (0x1F680, 0x1F6FF),  # transport & map
    (0x1F1E0, 0x1F1FF),  # regional indicators (flags)
    (0x2600, 0x26FF),  # misc symbols
    (0x2700, 0x27BF),  # dingbats
)
REGIONAL_INDICATORS = (0x1F1E6, 0x1F1FF)
VARIATION_SELECTOR = "\ufe0f"
ZERO_WIDTH_JOINER = "\u200d"
SKIN_TONES = (0x1F3FB, 0x1F3FF)

# Runs of one to three "!" not glued to a following word.
BANG_RUN_PAT = re.compile(r"!{1,3}(?!\w)")

# Longest "!" run -> priority. Runs are capped at three by BANG_RUN_PAT.
BANG_PRIORITY: dict[int, Priority] = {
    1: Priority.low,
    2: Priority.medium,
    3: Priority.high,
}

# Keyword tier, checked in order; first tier with a hit wins.
PRIORITY_KEYWORDS: tuple[tuple[Priority, tuple[str, ...]], ...] = (
    (Priority.high, ("urgent", "asap", "high priority", "important", "critical")),
    (Priority.low, ("low priority", "when i have time", "someday", "maybe", "later")),
)

IMPORTANCE_MARKERS: tuple[str, ...] = ("important", "critical", "must do", "priority", "⭐", "star")

TITLE_STOP_SYMBOLS: tuple[str, ...] = ("⭐",)

# Words stripped from titles (whole-word, case-insensitive), longest first.
TITLE_STOP_PHRASES: tuple[str, ...] = tuple(
    sorted(
        {phrase for _, words in PRIORITY_KEYWORDS for phrase in words}
        | {m for m in IMPORTANCE_MARKERS if m not in TITLE_STOP_SYMBOLS},
        key=lambda p: (-len(p), p),
    )
)

DATE_TRIGGERS = r"(?:due|by|before|until)"
WEEKDAYS: dict[str, int] = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}
RELATIVE_DAYS: dict[str, int] = {"today": 0, "tomorrow": 1}
# Days to add on top of the sunday-based weekday offset (sunday == 0).
WEEK_ENDS: dict[str, int] = {"this week": 7, "next week": 14}

# Tried in order against the lowercased input; group 1 is the date phrase.
DUE_DATE_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(rf"\b{DATE_TRIGGERS}\s+(\d{{1,2}}/\d{{1,2}}/\d{{4}})(?![\d/-])"),
    re.compile(rf"\b{DATE_TRIGGERS}\s+(\d{{1,2}}-\d{{1,2}}-\d{{4}})(?![\d/-])"),
    re.compile(rf"\b{DATE_TRIGGERS}\s+(today|tomorrow|{'|'.join(WEEKDAYS)})\b"),
    re.compile(rf"\b{DATE_TRIGGERS}\s+(\d{{1,2}}/\d{{1,2}})(?![\d/-])"),
    re.compile(r"\b(today|tomorrow)\b"),
    re.compile(r"\b(this week|next week)\b"),
)

# Title cleanup patterns.
DATE_PHRASE_PAT = re.compile(rf"\b{DATE_TRIGGERS}\s+(?:this week|next week|[\w/-]+)", re.IGNORECASE)
BARE_DATE_PAT = re.compile(r"\b(?:today|tomorrow|this week|next week)\b", re.IGNORECASE)
STOP_PHRASE_PAT = re.compile(
    r"\b(?:" + "|".join(re.escape(p) for p in TITLE_STOP_PHRASES) + r")\b",
    re.IGNORECASE,
)

# Checked in order; the first one present in the text splits it.
DESCRIPTION_SEPARATORS: tuple[str, ...] = (" - ", " : ", " because ", " to ", " for ", " about ")

END_OF_DAY = (23, 59)
