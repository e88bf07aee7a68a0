"""Per-file parse cache shared by extraction and rewriting."""

from __future__ import annotations

import logging

from stylesweep.parser import SourceTree, parse_source

logger = logging.getLogger(__name__)


class TreeCache:
    """Parsed trees keyed by file path.

    An entry is only reused while the text it was parsed from is identical
    to the text being asked about, so a file edited on disk is reparsed
    even if nobody called :meth:`invalidate`. Failed parses are not cached.
    """

    def __init__(self) -> None:
        self._trees: dict[str, SourceTree] = {}
        self.hits = 0
        self.misses = 0

    def get(self, path: str, text: str) -> SourceTree:
        """Return the tree for *path*, parsing *text* if needed.

        Raises :class:`~stylesweep.parser.ParseError` on unparsable text.
        """
        tree = self._trees.get(path)
        if tree is not None and tree.text == text:
            self.hits += 1
            logger.debug("cache hit: %s", path)
            return tree
        self.misses += 1
        logger.debug("cache miss: %s", path)
        tree = parse_source(text, path)
        self._trees[path] = tree
        return tree

    def invalidate(self, path: str) -> None:
        self._trees.pop(path, None)

    def clear(self) -> None:
        self._trees.clear()

    def __contains__(self, path: object) -> bool:
        return path in self._trees

    def __len__(self) -> int:
        return len(self._trees)
