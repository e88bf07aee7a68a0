"""Candidate file discovery for a scan."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)


def list_files(
    root: str | Path,
    extensions: tuple[str, ...],
    should_ignore: Callable[[str], bool],
) -> list[str]:
    """Recursively list files under *root* with one of *extensions*.

    The ignore predicate is applied to every entry before it is read or
    descended into. Unreadable directories are logged and skipped. The
    result is sorted.
    """
    found: list[str] = []

    def _walk(directory: str) -> None:
        try:
            entries = sorted(os.scandir(directory), key=lambda e: e.name)
        except OSError as e:
            logger.warning("Cannot read directory %s: %s", directory, e)
            return
        for entry in entries:
            full = os.path.join(directory, entry.name)
            if should_ignore(full):
                continue
            try:
                is_dir = entry.is_dir()
            except OSError:
                continue
            if is_dir:
                _walk(full)
            elif os.path.splitext(entry.name)[1] in extensions:
                found.append(full)

    _walk(str(root))
    return sorted(found)


def collect_files(
    target: str | Path,
    extensions: tuple[str, ...],
    should_ignore: Callable[[str], bool],
) -> list[str]:
    """Files to scan for *target*, which may be a file or a directory.

    A single file is returned as-is when its extension is supported; a
    missing target yields nothing.
    """
    path = Path(target)
    if path.is_dir():
        return list_files(path, extensions, should_ignore)
    if path.is_file() and path.suffix in extensions:
        return [str(path)]
    return []
