"""JavaScript/TypeScript/JSX structural parser."""

from stylesweep.parser.errors import ParseError
from stylesweep.parser.transformer import parse_source
from stylesweep.parser.tree import LineIndex, Node, SourceTree

__all__ = ["ParseError", "parse_source", "LineIndex", "Node", "SourceTree"]
