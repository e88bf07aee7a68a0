"""Usage extraction: which style names a file references.

Two passes over the same tree:

1. Alias discovery -- ``const s = styles`` makes ``s`` an alias.
2. Reference collection -- ``H.name``, ``H?.name``, ``H["name"]`` and
   ``...H.name`` where ``H`` is the canonical identifier or an alias.

Resolution is purely syntactic: computed members, destructuring, function
parameters and aliases of aliases are not followed.
"""

from __future__ import annotations

import re

from stylesweep.analysis.segments import is_bare_identifier
from stylesweep.model.declaration import ReferenceKind, StyleReference
from stylesweep.parser.tree import (
    BRACKET,
    COLON,
    COMMA,
    MEMBER_DOTS,
    NAME,
    OP,
    PAREN,
    QDOT,
    SEMI,
    SPREAD,
    STRING,
    TEMPLATE,
    Node,
    SourceTree,
)

DECLARATION_KEYWORDS = frozenset({"const", "let", "var"})

# Tokens that continue an expression onto the next line (no ASI before them).
_CONTINUATION_KINDS = MEMBER_DOTS | {PAREN, BRACKET, TEMPLATE, OP}

_ESCAPE_RE = re.compile(r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])")
_SIMPLE_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "v": "\v", "0": "\0"}


def string_value(literal: str) -> str:
    """Return the value of a quoted string literal token."""
    body = literal[1:-1]

    def _replace(match: re.Match[str]) -> str:
        esc = match.group(1)
        if esc.startswith("u{"):
            return chr(int(esc[2:-1], 16))
        if esc[0] in "ux" and len(esc) > 1:
            return chr(int(esc[1:], 16))
        if esc in ("\n", "\r\n", "\r"):
            return ""  # line continuation
        return _SIMPLE_ESCAPES.get(esc, esc)

    return _ESCAPE_RE.sub(_replace, body)


# ---------------------------------------------------------------------------
# Pass 1: aliases
# ---------------------------------------------------------------------------


def _ends_initializer(items: tuple[Node, ...], index: int, tree: SourceTree) -> bool:
    """True when the identifier at *index* is a complete initializer."""
    if index + 1 >= len(items):
        return True
    nxt = items[index + 1]
    if nxt.kind in (SEMI, COMMA):
        return True
    if nxt.kind in _CONTINUATION_KINDS:
        return False
    return tree.line_of(nxt.start) > tree.line_of(items[index].end)


def _in_declaration_list(items: tuple[Node, ...], index: int) -> bool:
    """True when the statement containing *index* starts with const/let/var."""
    j = index
    while j > 0 and items[j - 1].kind != SEMI:
        j -= 1
    return items[j].kind == NAME and items[j].text in DECLARATION_KEYWORDS


def _declared_name(items: tuple[Node, ...], eq: int) -> str | None:
    """Name bound by the ``=`` at *eq* if it belongs to a variable declaration."""
    k = eq - 1
    if k >= 0 and items[k].kind != NAME:
        # `name: Type = value` -- walk back over the type annotation.
        m = k
        while m >= 0 and items[m].kind not in (COLON, SEMI, COMMA) and not items[m].is_op("="):
            m -= 1
        if m < 1 or items[m].kind != COLON:
            return None
        k = m - 1
    elif k >= 2 and items[k - 1].kind == COLON:
        # `name: Type = value` with a single-identifier type
        k -= 2
    if k < 1 or items[k].kind != NAME:
        return None
    prev = items[k - 1]
    if prev.kind == NAME and prev.text in DECLARATION_KEYWORDS:
        return items[k].text
    if prev.kind == COMMA and _in_declaration_list(items, k):
        return items[k].text
    return None


def collect_aliases(tree: SourceTree, identifier: str = "styles") -> frozenset[str]:
    """Find variables initialized directly from *identifier*."""
    aliases: set[str] = set()
    canonical = frozenset({identifier})
    for group in tree.groups():
        items = group.children
        for i in range(1, len(items) - 1):
            if not items[i].is_op("="):
                continue
            if not is_bare_identifier(items, i + 1, canonical):
                continue
            if not _ends_initializer(items, i + 1, tree):
                continue
            name = _declared_name(items, i)
            if name is not None and name != identifier:
                aliases.add(name)
    return frozenset(aliases)


# ---------------------------------------------------------------------------
# Pass 2: references
# ---------------------------------------------------------------------------


def _element_name(bracket: Node) -> str | None:
    if bracket.kind != BRACKET or len(bracket.children) != 1:
        return None
    literal = bracket.children[0]
    if literal.kind != STRING:
        return None
    return string_value(literal.text)


def _reference_at(
    items: tuple[Node, ...], i: int, tree: SourceTree
) -> StyleReference | None:
    receiver = items[i]
    if i + 1 >= len(items):
        return None
    access = items[i + 1]
    line = tree.line_of(receiver.start)
    spread = i > 0 and items[i - 1].kind == SPREAD

    if access.kind in MEMBER_DOTS and i + 2 < len(items):
        member = items[i + 2]
        if member.kind == NAME:
            kind = ReferenceKind.SPREAD if spread else ReferenceKind.PROPERTY
            return StyleReference(name=member.text, kind=kind, receiver=receiver.text, line=line)
        if access.kind == QDOT:
            name = _element_name(member)
            if name is not None:
                return StyleReference(name=name, kind=ReferenceKind.ELEMENT, receiver=receiver.text, line=line)
        return None

    name = _element_name(access)
    if name is not None:
        return StyleReference(name=name, kind=ReferenceKind.ELEMENT, receiver=receiver.text, line=line)
    return None


def collect_references(
    tree: SourceTree, identifier: str = "styles", aliases: frozenset[str] = frozenset()
) -> list[StyleReference]:
    """Return every recognized style reference, in document order."""
    receivers = frozenset({identifier}) | aliases
    found: list[tuple[int, StyleReference]] = []
    for group in tree.groups():
        items = group.children
        for i in range(len(items)):
            if not is_bare_identifier(items, i, receivers):
                continue
            ref = _reference_at(items, i, tree)
            if ref is not None:
                found.append((items[i].start, ref))
    found.sort(key=lambda pair: pair[0])
    return [ref for _, ref in found]


def extract_used_names(tree: SourceTree, identifier: str = "styles") -> list[str]:
    """Return the distinct style names referenced in *tree*, first use first."""
    aliases = collect_aliases(tree, identifier)
    seen: dict[str, None] = {}
    for ref in collect_references(tree, identifier, aliases):
        seen.setdefault(ref.name, None)
    return list(seen)
