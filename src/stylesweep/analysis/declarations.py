"""Declaration extraction: locate ``StyleSheet.create({...})`` blocks.

A declaration block is a call of the shape ``HOLDER.METHOD({...})`` (type
arguments allowed) with a single object-literal argument. Every direct
``name: value`` property of that literal is one declared style.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from stylesweep.analysis.segments import Segment, is_bare_identifier, split_segments
from stylesweep.model.declaration import StyleDeclaration
from stylesweep.parser.tree import BRACE, MEMBER_DOTS, NAME, OP, PAREN, Node, SourceTree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeclarationBlock:
    """The object literal of one declaration call, split into properties."""

    literal: Node
    segments: tuple[Segment, ...]

    def properties(self) -> list[tuple[str, Segment]]:
        """Return ``(name, segment)`` for each identifier-keyed property."""
        found: list[tuple[str, Segment]] = []
        for segment in self.segments:
            name = segment.property_name
            if name is not None:
                found.append((name, segment))
        return found


def _skip_type_arguments(items: tuple[Node, ...], index: int) -> int:
    """Return the index after a ``<...>`` type-argument list starting at *index*.

    Returns *index* unchanged when no type arguments start there.
    """
    node = items[index] if index < len(items) else None
    if node is None or node.kind != OP or not node.text.startswith("<"):
        return index
    depth = 0
    for j in range(index, len(items)):
        if items[j].kind != OP:
            continue
        text = items[j].text.replace("=>", "")
        depth += text.count("<") - text.count(">")
        if depth <= 0:
            return j + 1
    return index


def _single_object_argument(call_args: Node) -> Node | None:
    args = [s for s in split_segments(call_args) if not s.is_empty]
    if len(args) != 1 or len(args[0].nodes) != 1:
        return None
    node = args[0].nodes[0]
    return node if node.kind == BRACE else None


def find_declaration_blocks(
    tree: SourceTree, holder: str = "StyleSheet", method: str = "create"
) -> list[DeclarationBlock]:
    """Find every declaration block in *tree*, in document order."""
    holders = frozenset({holder})
    blocks: list[DeclarationBlock] = []
    for group in tree.groups():
        items = group.children
        for i in range(len(items) - 3):
            if not is_bare_identifier(items, i, holders):
                continue
            if items[i + 1].kind not in MEMBER_DOTS or items[i + 2].kind != NAME:
                continue
            if items[i + 2].text != method:
                continue
            j = _skip_type_arguments(items, i + 3)
            if j >= len(items) or items[j].kind != PAREN:
                continue
            literal = _single_object_argument(items[j])
            if literal is None:
                logger.debug(
                    "%s: %s.%s call at line %d has no object literal argument",
                    tree.path,
                    holder,
                    method,
                    tree.line_of(items[i].start),
                )
                continue
            blocks.append(
                DeclarationBlock(literal=literal, segments=tuple(split_segments(literal)))
            )
    blocks.sort(key=lambda b: b.literal.start)
    return blocks


def extract_declarations(
    tree: SourceTree, holder: str = "StyleSheet", method: str = "create"
) -> list[StyleDeclaration]:
    """Return the declared styles of every block in *tree*.

    Within one block a repeated key keeps the slot of its first occurrence
    and the line span of its last one.
    """
    declarations: list[StyleDeclaration] = []
    for block in find_declaration_blocks(tree, holder, method):
        by_name: dict[str, StyleDeclaration] = {}
        for name, segment in block.properties():
            by_name[name] = StyleDeclaration(
                name=name,
                start_line=tree.line_of(segment.start),
                end_line=tree.line_of(segment.end),
            )
        declarations.extend(by_name.values())
    return declarations
