"""Scan result models: ScanResult, ScanReport and RewriteOutcome."""

from __future__ import annotations

from dataclasses import dataclass, field

from stylesweep.model.declaration import StyleDeclaration
from stylesweep.model.diagnostic import Diagnostic


@dataclass(frozen=True)
class ScanResult:
    """Declared, used and unused styles of one file.

    ``unused`` is the subsequence of ``defined`` whose names are absent
    from ``used``.
    """

    file: str
    defined: tuple[StyleDeclaration, ...] = ()
    used: tuple[str, ...] = ()
    unused: tuple[StyleDeclaration, ...] = ()

    @property
    def has_styles(self) -> bool:
        return bool(self.defined)

    @property
    def has_unused(self) -> bool:
        return bool(self.unused)

    @property
    def unused_names(self) -> list[str]:
        return [d.name for d in self.unused]


@dataclass(frozen=True)
class RewriteOutcome:
    """Result of removing unused styles from one file."""

    file: str
    removed: tuple[str, ...]
    success: bool


@dataclass
class ScanReport:
    """Aggregate over a batch of files.

    Only files with at least one declared style are kept in ``results``;
    ``files_scanned`` counts every file that was read and analysed.
    """

    results: list[ScanResult] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    files_scanned: int = 0

    @property
    def total_defined(self) -> int:
        return sum(len(r.defined) for r in self.results)

    @property
    def total_used(self) -> int:
        return sum(len(r.used) for r in self.results)

    @property
    def total_unused(self) -> int:
        return sum(len(r.unused) for r in self.results)

    @property
    def files_with_unused(self) -> list[ScanResult]:
        return [r for r in self.results if r.has_unused]

    @property
    def usage_rate(self) -> float:
        if not self.total_defined:
            return 0.0
        return self.total_used / self.total_defined * 100

    @property
    def has_unused(self) -> bool:
        return any(r.has_unused for r in self.results)
