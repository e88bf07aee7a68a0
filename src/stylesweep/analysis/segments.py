"""Comma-separated segments of a delimited group.

Object literals and argument lists are both flat token groups; splitting
them on their top-level commas yields one segment per property or
argument. Nested commas live inside child groups and are never seen here.
"""

from __future__ import annotations

from dataclasses import dataclass

from stylesweep.parser.tree import COLON, COMMA, MEMBER_DOTS, NAME, Node


@dataclass(frozen=True)
class Segment:
    """The nodes of one list element and the comma that follows it, if any."""

    nodes: tuple[Node, ...]
    comma: Node | None = None

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    @property
    def start(self) -> int:
        return self.nodes[0].start

    @property
    def end(self) -> int:
        return self.nodes[-1].end

    @property
    def property_name(self) -> str | None:
        """Key of a ``name: value`` property assignment, else None.

        Computed keys, string keys, shorthand properties, spreads and
        methods are not property assignments with an identifier key.
        """
        nodes = self.nodes
        if len(nodes) >= 3 and nodes[0].kind == NAME and nodes[1].kind == COLON:
            return nodes[0].text
        return None


def split_segments(group: Node) -> list[Segment]:
    """Split the children of *group* on its top-level commas.

    A trailing comma does not produce an empty final segment.
    """
    segments: list[Segment] = []
    current: list[Node] = []
    for child in group.children:
        if child.kind == COMMA:
            segments.append(Segment(nodes=tuple(current), comma=child))
            current = []
        else:
            current.append(child)
    if current:
        segments.append(Segment(nodes=tuple(current)))
    return segments


def is_bare_identifier(items: tuple[Node, ...], index: int, names: frozenset[str] | set[str]) -> bool:
    """True when ``items[index]`` is one of *names* used as a plain identifier.

    An identifier that follows ``.`` or ``?.`` is a member name of some
    other expression (``this.styles``), not a reference to the variable.
    """
    node = items[index]
    if node.kind != NAME or node.text not in names:
        return False
    return index == 0 or items[index - 1].kind not in MEMBER_DOTS
