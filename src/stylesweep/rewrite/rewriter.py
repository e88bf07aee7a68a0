"""Rewriter: remove declarations from source text and persist the result."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterable

from stylesweep.parser import ParseError, SourceTree, parse_source
from stylesweep.rewrite.errors import RewriteError
from stylesweep.rewrite.planner import plan_removals
from stylesweep.rewrite.splice import apply_removals

logger = logging.getLogger(__name__)


def remove_declarations(
    tree: SourceTree,
    names: Iterable[str],
    holder: str = "StyleSheet",
    method: str = "create",
) -> str:
    """Return the text of *tree* without the declarations named in *names*.

    An empty *names* returns the text unchanged. Raises
    :class:`~stylesweep.rewrite.errors.TargetNotFoundError` for names that
    are not declared and :class:`RewriteError` if the result no longer
    parses.
    """
    wanted = list(dict.fromkeys(names))
    if not wanted:
        return tree.text
    removals = plan_removals(tree, wanted, holder, method)
    new_text = apply_removals(tree.text, removals)
    try:
        parse_source(new_text, tree.path)
    except ParseError as e:
        raise RewriteError(f"Rewritten source does not parse: {e}") from e
    logger.debug(
        "%s: %d removal(s), %d character(s) dropped",
        tree.path,
        len(removals),
        len(tree.text) - len(new_text),
    )
    return new_text


def write_atomic(path: str | Path, text: str, encoding: str = "utf-8") -> None:
    """Replace the contents of *path* with *text* in one step.

    The text goes to a temporary file in the same directory which is then
    moved over *path*; on failure *path* is left as it was.
    """
    target = Path(path)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as fh:
            fh.write(text)
        shutil.copymode(target, tmp_name)
        os.replace(tmp_name, target)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise
