"""Structural tree model: Node, LineIndex and SourceTree."""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Iterator

# Group kinds carry children; every other kind is a leaf named after its
# grammar terminal (NAME, STRING, COMMA, ...).
SOURCE = "source"
PAREN = "paren"
BRACKET = "bracket"
BRACE = "brace"
SUBSTITUTION = "substitution"

GROUP_KINDS = frozenset({SOURCE, PAREN, BRACKET, BRACE, SUBSTITUTION})

NAME = "NAME"
STRING = "STRING"
TEMPLATE = "TEMPLATE"
NUMBER = "NUMBER"
SPREAD = "SPREAD"
DOT = "DOT"
QDOT = "QDOT"
COMMA = "COMMA"
COLON = "COLON"
SEMI = "SEMI"
OP = "OP"
REGEX = "REGEX"
JSXNAME = "JSXNAME"
ATTRSTRING = "ATTRSTRING"
JSXTEXT = "JSXTEXT"

MEMBER_DOTS = frozenset({DOT, QDOT})


@dataclass(frozen=True)
class Node:
    """A token leaf or a delimited group.

    ``start``/``end`` are absolute character offsets into the source text
    (``end`` exclusive). For groups they include the delimiters themselves.
    """

    kind: str
    start: int
    end: int
    text: str = ""
    children: tuple[Node, ...] = ()

    @property
    def is_group(self) -> bool:
        return self.kind in GROUP_KINDS

    def is_name(self, value: str | None = None) -> bool:
        return self.kind == NAME and (value is None or self.text == value)

    def is_op(self, value: str) -> bool:
        return self.kind == OP and self.text == value

    def walk(self) -> Iterator[Node]:
        """Yield this node and all descendants in document order."""
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def shifted(self, delta: int) -> Node:
        """Return a copy of this subtree with every offset moved by *delta*."""
        if not delta:
            return self
        return Node(
            kind=self.kind,
            start=self.start + delta,
            end=self.end + delta,
            text=self.text,
            children=tuple(child.shifted(delta) for child in self.children),
        )


class LineIndex:
    """Maps character offsets to 1-indexed line and column numbers."""

    def __init__(self, text: str) -> None:
        self._starts = [0] + [m.end() for m in re.finditer("\n", text)]

    def __len__(self) -> int:
        return len(self._starts)

    def line_of(self, offset: int) -> int:
        return bisect_right(self._starts, offset)

    def position(self, offset: int) -> tuple[int, int]:
        line = self.line_of(offset)
        return line, offset - self._starts[line - 1] + 1

    def line_start(self, line: int) -> int:
        return self._starts[line - 1]


@dataclass(frozen=True)
class SourceTree:
    """A parsed file: the root group, its text and an offset-to-line index."""

    path: str
    text: str
    root: Node
    lines: LineIndex = field(compare=False, repr=False)

    def walk(self) -> Iterator[Node]:
        return self.root.walk()

    def groups(self) -> Iterator[Node]:
        """Yield every group node (including the root) in document order."""
        return (node for node in self.root.walk() if node.is_group)

    def line_of(self, offset: int) -> int:
        return self.lines.line_of(offset)

    def slice(self, node: Node) -> str:
        return self.text[node.start : node.end]
