"""Diagnostic model: per-file problems reported by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about one file.

    Attributes:
        rule: Identifier for the check that produced this diagnostic
            (``read``, ``parse``, ``rewrite-target``, ``write`` ...).
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        path: The file involved.
    """

    rule: str
    severity: Severity
    message: str
    path: str

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        return f"{self.severity.value} [{self.rule}] {self.path}: {self.message}"
