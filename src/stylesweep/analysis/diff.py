"""Diff engine: declared minus used, in declaration order."""

from __future__ import annotations

from typing import Iterable

from stylesweep.model.declaration import StyleDeclaration


def unused_declarations(
    declared: Iterable[StyleDeclaration], used: Iterable[str]
) -> list[StyleDeclaration]:
    """Return the declarations whose name is not in *used*, order preserved."""
    used_names = frozenset(used)
    return [d for d in declared if d.name not in used_names]
