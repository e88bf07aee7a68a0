"""Pure text splicing: apply planned removals to a source string."""

from __future__ import annotations

from typing import Iterable

from stylesweep.rewrite.planner import Removal

_OPENERS = "{("


def _neighbour(text: str, pos: int, step: int) -> int:
    """Index of the nearest non-whitespace character from *pos* in direction *step*."""
    while 0 <= pos < len(text) and text[pos].isspace():
        pos += step
    return pos


def _tidy_separator(text: str, pos: int) -> str:
    """Drop a comma at *pos* that duplicates or leads a separator.

    Covers ``,,`` and ``{,`` left behind at a splice point; a no-op when
    the removal already took the right comma.
    """
    right = _neighbour(text, pos, 1)
    if right >= len(text) or text[right] != ",":
        return text
    left = _neighbour(text, pos - 1, -1)
    if left < 0 or text[left] not in "," + _OPENERS:
        return text
    return text[:right] + text[right + 1 :]


def apply_removals(text: str, removals: Iterable[Removal]) -> str:
    """Return *text* with every removal range cut out.

    Ranges are applied from the highest offset down so earlier offsets stay
    valid; *text* itself is never modified.
    """
    result = text
    for removal in sorted(removals, key=lambda r: r.start, reverse=True):
        result = result[: removal.start] + result[removal.end :]
        result = _tidy_separator(result, removal.start)
    return result
