import re

_SPACE_RE = re.compile(r"\s+")


def collapse_spaces(text: str) -> str:
    return _SPACE_RE.sub(" ", text).strip()
