"""Removal planning: which character ranges to cut for a set of style names.

Every targeted property is located again by name in a fresh tree. Runs of
adjacent targeted properties are removed together with exactly one of the
commas around them, so no separator is left dangling:

* a run followed by a comma loses that comma (the comma before it, if any,
  now separates the surrounding kept properties);
* a run at the end of a literal without a trailing comma loses the comma
  before it;
* a literal whose properties are all removed is emptied to ``{}``.

When a run occupies its lines alone, the whole lines go with it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from stylesweep.analysis.declarations import DeclarationBlock, find_declaration_blocks
from stylesweep.analysis.segments import Segment
from stylesweep.parser.tree import SourceTree
from stylesweep.rewrite.errors import TargetNotFoundError


@dataclass(frozen=True, order=True)
class Removal:
    """A half-open character range ``[start, end)`` to delete."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


def _whole_lines(text: str, start: int, end: int) -> Removal:
    """Widen ``[start, end)`` over blank line remainders.

    Trailing spaces after *end* are always taken. The indentation before
    *start* and the line break after *end* are taken only when both sides of
    the line are otherwise blank.
    """
    line_start = text.rfind("\n", 0, start) + 1
    j = end
    while j < len(text) and text[j] in " \t":
        j += 1
    if text[line_start:start].strip() == "" and (j == len(text) or text[j] in "\r\n"):
        if text.startswith("\r\n", j):
            j += 2
        elif j < len(text):
            j += 1
        return Removal(line_start, j)
    return Removal(start, j)


def _runs(indexes: list[int]) -> list[tuple[int, int]]:
    """Group sorted indexes into inclusive ``(first, last)`` runs."""
    runs: list[tuple[int, int]] = []
    for i in indexes:
        if runs and runs[-1][1] == i - 1:
            runs[-1] = (runs[-1][0], i)
        else:
            runs.append((i, i))
    return runs


def _emptied(text: str, block: DeclarationBlock) -> bool:
    """True when nothing but whitespace would remain inside the literal."""
    literal = block.literal
    pos = literal.start + 1
    for segment in block.segments:
        if not segment.is_empty:
            if text[pos : segment.start].strip():
                return False
            pos = segment.end
        if segment.comma is not None:
            if text[pos : segment.comma.start].strip():
                return False
            pos = segment.comma.end
    return not text[pos : literal.end - 1].strip()


def _block_removals(text: str, block: DeclarationBlock, targeted: list[int]) -> list[Removal]:
    segments: tuple[Segment, ...] = block.segments
    present = [i for i, s in enumerate(segments) if not s.is_empty]
    if targeted == present and _emptied(text, block):
        return [Removal(block.literal.start + 1, block.literal.end - 1)]

    removals: list[Removal] = []
    for first, last in _runs(targeted):
        head, tail = segments[first], segments[last]
        if tail.comma is not None:
            removals.append(_whole_lines(text, head.start, tail.comma.end))
            continue
        previous = segments[first - 1].comma if first > 0 else None
        if previous is not None:
            removals.append(Removal(previous.start, tail.end))
        else:
            removals.append(_whole_lines(text, head.start, tail.end))
    return removals


def merge_removals(removals: Iterable[Removal]) -> list[Removal]:
    """Sort removals and merge the overlapping ones."""
    merged: list[Removal] = []
    for removal in sorted(removals):
        if merged and removal.start < merged[-1].end:
            last = merged[-1]
            merged[-1] = Removal(last.start, max(last.end, removal.end))
        else:
            merged.append(removal)
    return merged


def plan_removals(
    tree: SourceTree,
    names: Iterable[str],
    holder: str = "StyleSheet",
    method: str = "create",
) -> list[Removal]:
    """Return the ranges that delete every property named in *names*.

    Raises :class:`TargetNotFoundError` when a name is not declared in any
    block of *tree*.
    """
    wanted = set(names)
    found: set[str] = set()
    removals: list[Removal] = []
    for block in find_declaration_blocks(tree, holder, method):
        targeted: list[int] = []
        for i, segment in enumerate(block.segments):
            name = segment.property_name
            if name is not None and name in wanted:
                targeted.append(i)
                found.add(name)
        if targeted:
            removals.extend(_block_removals(tree.text, block, targeted))
    missing = sorted(wanted - found)
    if missing:
        raise TargetNotFoundError(missing)
    return merge_removals(removals)
