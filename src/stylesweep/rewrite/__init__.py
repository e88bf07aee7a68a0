"""Removal of unused declarations from source files."""

from stylesweep.rewrite.errors import RewriteError, TargetNotFoundError
from stylesweep.rewrite.planner import Removal, merge_removals, plan_removals
from stylesweep.rewrite.rewriter import remove_declarations, write_atomic
from stylesweep.rewrite.splice import apply_removals

__all__ = [
    "RewriteError",
    "TargetNotFoundError",
    "Removal",
    "merge_removals",
    "plan_removals",
    "apply_removals",
    "remove_declarations",
    "write_atomic",
]
