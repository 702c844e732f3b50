from __future__ import annotations

from collections.abc import Iterator

from ..nlp.rules import (
    PICTOGRAPH_RANGES,
    REGIONAL_INDICATORS,
    SKIN_TONES,
    VARIATION_SELECTOR,
    ZERO_WIDTH_JOINER,
)


def is_pictograph(ch: str) -> bool:
    cp = ord(ch)
    return any(lo <= cp <= hi for lo, hi in PICTOGRAPH_RANGES)


def _in(ch: str, bounds: tuple[int, int]) -> bool:
    return bounds[0] <= ord(ch) <= bounds[1]


def _cluster_end(text: str, start: int) -> int:
    """End index of the emoji cluster whose base character sits at `start`."""
    end = start + 1
    if _in(text[start], REGIONAL_INDICATORS) and end < len(text) and _in(text[end], REGIONAL_INDICATORS):
        return end + 1
    while True:
        if end < len(text) and text[end] == VARIATION_SELECTOR:
            end += 1
        if end < len(text) and _in(text[end], SKIN_TONES):
            end += 1
        # a joiner glues the next character into the same cluster
        if end + 1 < len(text) and text[end] == ZERO_WIDTH_JOINER:
            end += 2
            continue
        return end


def _clusters(text: str) -> Iterator[tuple[int, int]]:
    i = 0
    while i < len(text):
        if is_pictograph(text[i]):
            end = _cluster_end(text, i)
            yield i, end
            i = end
        else:
            i += 1


def first_pictograph(text: str) -> str | None:
    """
    First emoji in text, or None.
    The whole cluster comes back: a flag pair, a base with its variation
    selector or skin tone, or a joiner sequence such as 👨‍💻.
    """
    for start, end in _clusters(text):
        return text[start:end]
    return None


def strip_pictographs(text: str) -> str:
    out: list[str] = []
    pos = 0
    for start, end in _clusters(text):
        out.append(text[pos:start])
        pos = end
    out.append(text[pos:])
    return "".join(out)
