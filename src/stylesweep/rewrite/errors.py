"""Rewrite error types."""

from __future__ import annotations


class RewriteError(Exception):
    """Raised when unused declarations cannot be removed from a source."""


class TargetNotFoundError(RewriteError):
    """Raised when a requested declaration is no longer present."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Declaration(s) not found: {', '.join(missing)}")
