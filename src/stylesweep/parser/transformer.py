"""Lark Transformer that converts a source parse tree into Node objects."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Iterator

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from stylesweep.parser.errors import ParseError
from stylesweep.parser.lexer import ScriptLexer, SourceLexer, substitution_spans
from stylesweep.parser.tree import (
    BRACE,
    BRACKET,
    PAREN,
    SOURCE,
    SUBSTITUTION,
    TEMPLATE,
    LineIndex,
    Node,
    SourceTree,
)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Plain TypeScript has no JSX; `<T>value` there is a type assertion.
SCRIPT_SUFFIXES = frozenset({".ts", ".mts", ".cts"})


@lru_cache(maxsize=2)
def _lark(jsx: bool) -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        lexer=SourceLexer if jsx else ScriptLexer,
        start="start",
    )


class SourceTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into immutable Node objects."""

    def __init__(self, length: int, jsx: bool = True) -> None:
        super().__init__(visit_tokens=True)
        self._length = length
        self._jsx = jsx

    def __default_token__(self, token: Token) -> Node:
        start = token.start_pos or 0
        end = token.end_pos or start
        text = str(token)
        children: tuple[Node, ...] = ()
        if token.type == TEMPLATE:
            children = tuple(_parse_substitutions(text, start, self._jsx))
        return Node(kind=token.type, start=start, end=end, text=text, children=children)

    # ---- groups ----

    @staticmethod
    def _group(kind: str, items: list[Node]) -> Node:
        opening, *inner, closing = items
        return Node(kind=kind, start=opening.start, end=closing.end, children=tuple(inner))

    def paren(self, items: list[Node]) -> Node:
        return self._group(PAREN, items)

    def bracket(self, items: list[Node]) -> Node:
        return self._group(BRACKET, items)

    def brace(self, items: list[Node]) -> Node:
        return self._group(BRACE, items)

    def start(self, items: list[Node]) -> Node:
        return Node(kind=SOURCE, start=0, end=self._length, children=tuple(items))


def _parse_nodes(source: str, jsx: bool = True) -> Node:
    try:
        tree = _lark(jsx).parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        if line is not None and line < 0:
            line = column = None
        message = str(e).strip().splitlines()[0] if str(e).strip() else type(e).__name__
        raise ParseError(message, line=line, column=column) from e
    try:
        return SourceTransformer(len(source), jsx).transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, ParseError):
            raise e.orig_exc from None
        raise


def _parse_substitutions(raw: str, offset: int, jsx: bool) -> Iterator[Node]:
    """Parse the ``${...}`` expressions of a template literal token."""
    for start, end in substitution_spans(raw):
        inner = _parse_nodes(raw[start:end], jsx).shifted(offset + start)
        yield Node(
            kind=SUBSTITUTION,
            start=inner.start,
            end=inner.end,
            children=inner.children,
        )


def parse_source(source: str, path: str = "<source>") -> SourceTree:
    """Parse JavaScript/TypeScript/JSX text into a SourceTree.

    JSX is recognised in every file except plain TypeScript (``.ts``).
    Raises :class:`ParseError` (mentioning *path*) when the text cannot be
    tokenized or its delimiters are unbalanced.
    """
    jsx = Path(path).suffix.lower() not in SCRIPT_SUFFIXES
    try:
        root = _parse_nodes(source, jsx)
    except ParseError as e:
        raise ParseError(f"{path}{e.location}: {e}", line=e.line, column=e.column) from e
    return SourceTree(path=path, text=source, root=root, lines=LineIndex(source))
