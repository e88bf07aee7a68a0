"""Context-sensitive lexer for JavaScript / TypeScript / JSX sources.

Token shapes come from ``grammar.lark``; this module decides which shape
applies where. Two characters are ambiguous in JavaScript:

* ``/`` starts a regular expression literal where an operand is expected
  (``x.replace(/\\(/g, "")``) and is division after one (``a / b``).
* ``<`` opens a JSX element where an operand is expected
  (``return <View />``) and is a comparison or type argument after one
  (``create<Styles>(``).

Inside a JSX element the lexer switches modes: attributes are lexed as
tag names, attribute strings and ``{...}`` expressions, and children up
to the next ``<`` or ``{`` become a single JSXTEXT token, so quotes,
slashes and parentheses in plain text carry no meaning.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

from lark import Token
from lark.common import LexerConf
from lark.lexer import Lexer

from stylesweep.parser.tree import LineIndex

CODE = "code"
TAG = "tag"
CHILDREN = "children"

# After these words an expression starts, not an operator.
EXPRESSION_KEYWORDS = frozenset(
    {
        "return", "typeof", "instanceof", "in", "of", "new", "delete", "void",
        "throw", "case", "do", "else", "yield", "await",
    }
)

# Tried in order at every position of code mode.
CODE_TERMINALS = (
    "SPREAD", "QDOT", "LPAR", "RPAR", "LSQB", "RSQB", "DOT", "COMMA", "COLON",
    "SEMI", "STRING", "NUMBER", "NAME", "OP", "OTHER",
)

# `<T,>` and `<T extends U>` are type parameters, not elements.
JSX_START = re.compile(r"<\s*(?:>|[^\W\d][\w$.:-]*\s*(?:/?>|\{|(?!extends\b)[^\W\d]))")
CLOSING_TAG_START = re.compile(r"<\s*/")
SELF_CLOSING_END = re.compile(r"/\s*>")


def _skip_quoted(text: str, pos: int) -> int:
    """Return the offset just past the string literal starting at *pos*."""
    quote = text[pos]
    i = pos + 1
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote or ch == "\n":
            return i + 1
        i += 1
    return len(text)


def _substitution_end(text: str, pos: int) -> int | None:
    """Return the offset of the ``}`` closing a ``${`` whose body starts at *pos*."""
    depth = 0
    i = pos
    while i < len(text):
        ch = text[i]
        if ch in "'\"":
            i = _skip_quoted(text, i)
            continue
        if ch == "`":
            end = template_end(text, i)
            if end is None:
                return None
            i = end
            continue
        if text.startswith("//", i):
            i = text.find("\n", i)
            if i < 0:
                return None
            continue
        if text.startswith("/*", i):
            i = text.find("*/", i + 2)
            if i < 0:
                return None
            i += 2
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            if not depth:
                return i
            depth -= 1
        i += 1
    return None


def template_end(text: str, pos: int) -> int | None:
    """Return the offset just past the template literal starting at *pos*.

    Substitutions may contain strings, comments and nested templates.
    Returns None for an unterminated template.
    """
    i = pos + 1
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "`":
            return i + 1
        if ch == "$" and text.startswith("{", i + 1):
            end = _substitution_end(text, i + 2)
            if end is None:
                return None
            i = end + 1
            continue
        i += 1
    return None


def substitution_spans(raw: str) -> Iterator[tuple[int, int]]:
    """Yield (start, end) of the expression inside each ``${...}`` of a template.

    Offsets are relative to *raw*, which includes the backticks.
    """
    i = 1
    while i < len(raw) - 1:
        ch = raw[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "$" and raw.startswith("{", i + 1):
            end = _substitution_end(raw, i + 2)
            if end is None:
                return
            yield i + 2, end
            i = end + 1
            continue
        i += 1


@dataclass
class _Frame:
    mode: str
    depth: int = 0
    closing: bool = False


class _Scan:
    """One pass over a source text; yields lark tokens."""

    def __init__(self, text: str, patterns: dict[str, re.Pattern[str]], jsx: bool) -> None:
        self.text = text
        self.patterns = patterns
        self.jsx = jsx
        self.lines = LineIndex(text)
        self.pos = 0
        self.stack = [_Frame(CODE)]
        # True right after a complete operand (name, literal, `)`, element).
        self.operand = False

    def tokens(self) -> Iterator[Token]:
        while self.pos < len(self.text):
            frame = self.stack[-1]
            if frame.mode == TAG:
                token = self._tag(frame)
            elif frame.mode == CHILDREN:
                token = self._children()
            else:
                token = self._code(frame)
            if token is not None:
                yield token

    def _emit(self, kind: str, end: int) -> Token:
        start = self.pos
        line, column = self.lines.position(start)
        end_line, end_column = self.lines.position(end)
        self.pos = end
        return Token(kind, self.text[start:end], start, line, column, end_line, end_column, end)

    def _match(self, name: str) -> int | None:
        m = self.patterns[name].match(self.text, self.pos)
        if m is None or m.end() == self.pos:
            return None
        return m.end()

    def _skip_blank(self) -> bool:
        end = self._match("WS") or self._match("COMMENT")
        if end is None:
            return False
        self.pos = end
        return True

    def _after_element(self) -> None:
        if self.stack[-1].mode == CODE:
            self.operand = True

    # ---- modes ----

    def _code(self, frame: _Frame) -> Token | None:
        if self._skip_blank():
            return None
        ch = self.text[self.pos]
        if ch == "/" and not self.operand:
            end = self._match("REGEX")
            if end is not None:
                self.operand = True
                return self._emit("REGEX", end)
        if ch == "<" and self.jsx and not self.operand and JSX_START.match(self.text, self.pos):
            self.stack.append(_Frame(TAG))
            return self._emit("OP", self.pos + 1)
        if ch == "`":
            end = template_end(self.text, self.pos)
            if end is not None:
                self.operand = True
                return self._emit("TEMPLATE", end)
        if ch == "{":
            frame.depth += 1
            self.operand = False
            return self._emit("LBRACE", self.pos + 1)
        if ch == "}":
            if not frame.depth and len(self.stack) > 1:
                self.stack.pop()
            frame.depth = max(frame.depth - 1, 0)
            self.operand = False
            return self._emit("RBRACE", self.pos + 1)
        for name in CODE_TERMINALS:
            end = self._match(name)
            if end is not None:
                token = self._emit(name, end)
                self.operand = _ends_operand(token)
                return token
        return self._emit("OTHER", self.pos + 1)

    def _tag(self, frame: _Frame) -> Token | None:
        if self._skip_blank():
            return None
        ch = self.text[self.pos]
        if ch == ">":
            self.stack.pop()
            if not frame.closing:
                self.stack.append(_Frame(CHILDREN))
            elif len(self.stack) > 1 and self.stack[-1].mode == CHILDREN:
                self.stack.pop()
                self._after_element()
            return self._emit("OP", self.pos + 1)
        if ch == "/":
            m = SELF_CLOSING_END.match(self.text, self.pos)
            if m:
                self.stack.pop()
                self._after_element()
                return self._emit("OP", m.end())
        if ch == "{":
            self.stack.append(_Frame(CODE))
            self.operand = False
            return self._emit("LBRACE", self.pos + 1)
        if ch == "=":
            return self._emit("OP", self.pos + 1)
        for name in ("ATTRSTRING", "JSXNAME"):
            end = self._match(name)
            if end is not None:
                return self._emit(name, end)
        return self._emit("OTHER", self.pos + 1)

    def _children(self) -> Token | None:
        ch = self.text[self.pos]
        if ch == "{":
            self.stack.append(_Frame(CODE))
            self.operand = False
            return self._emit("LBRACE", self.pos + 1)
        if ch == "<":
            m = CLOSING_TAG_START.match(self.text, self.pos)
            self.stack.append(_Frame(TAG, closing=m is not None))
            return self._emit("OP", m.end() if m else self.pos + 1)
        end = self._match("JSXTEXT")
        if end is None:
            return self._emit("OTHER", self.pos + 1)
        if self.text[self.pos : end].isspace():
            self.pos = end
            return None
        return self._emit("JSXTEXT", end)


def _ends_operand(token: Token) -> bool:
    if token.type == "NAME":
        return str(token) not in EXPRESSION_KEYWORDS
    if token.type in ("NUMBER", "STRING", "RPAR", "RSQB"):
        return True
    if token.type == "OP":
        return str(token) in ("++", "--")
    return False


class SourceLexer(Lexer):
    """Lark lexer for ``.js``, ``.jsx`` and ``.tsx`` files."""

    jsx = True

    def __init__(self, lexer_conf: LexerConf) -> None:
        self.patterns = {
            t.name: re.compile(t.pattern.to_regexp()) for t in lexer_conf.terminals
        }

    def lex(self, data: str) -> Iterator[Token]:  # type: ignore[override]
        return _Scan(data, self.patterns, self.jsx).tokens()


class ScriptLexer(SourceLexer):
    """Lark lexer for plain TypeScript, where ``<T>expr`` is a type assertion."""

    jsx = False
