"""Scan orchestrator: parse, extract, diff and (on request) rewrite files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable

from stylesweep.analysis import extract_declarations, extract_used_names, unused_declarations
from stylesweep.config import ScanConfig
from stylesweep.model import (
    Diagnostic,
    RewriteOutcome,
    ScanReport,
    ScanResult,
    Severity,
    StyleDeclaration,
)
from stylesweep.parser import ParseError, SourceTree
from stylesweep.rewrite import RewriteError, TargetNotFoundError, remove_declarations, write_atomic
from stylesweep.scanner.cache import TreeCache
from stylesweep.scanner.files import collect_files, list_files

logger = logging.getLogger(__name__)


class StyleScanner:
    """Finds unused styles file by file and removes them when asked.

    Per-file problems never raise: they become :class:`Diagnostic` entries
    in :attr:`diagnostics` and the operation degrades (``None``, an empty
    result, or ``False``).
    """

    def __init__(
        self,
        config: ScanConfig | None = None,
        cache: TreeCache | None = None,
        should_ignore: Callable[[str], bool] | None = None,
    ) -> None:
        self.config = config or ScanConfig()
        self.cache = cache if cache is not None else TreeCache()
        self._should_ignore = should_ignore or self.config.should_ignore
        self.diagnostics: list[Diagnostic] = []

    # ---- diagnostics ----

    def _report(self, rule: str, path: str, message: str, severity: Severity = Severity.WARNING) -> None:
        self.diagnostics.append(Diagnostic(rule=rule, severity=severity, message=message, path=path))
        if severity is Severity.ERROR:
            logger.error("%s: %s", path, message)
        else:
            logger.warning("%s: %s", path, message)

    # ---- file access ----

    def should_ignore(self, path: str | Path) -> bool:
        return self._should_ignore(str(path))

    def read(self, path: str) -> str | None:
        """Return the text of *path*, or None when it cannot be read."""
        try:
            with open(path, encoding=self.config.encoding, newline="") as fh:
                return fh.read()
        except (OSError, UnicodeDecodeError, LookupError) as e:
            self._report("read", path, f"Cannot read file: {e}")
            return None

    def parse(self, path: str, text: str) -> SourceTree | None:
        """Return the (cached) tree for *path*, or None when it does not parse."""
        try:
            return self.cache.get(path, text)
        except ParseError as e:
            self._report("parse", path, f"Cannot parse file: {e}")
        except RecursionError:
            self._report("parse", path, "Cannot parse file: nesting too deep", Severity.ERROR)
        except Exception as e:
            logger.exception("Unexpected failure parsing %s", path)
            self._report("parse", path, f"Cannot parse file: {e}", Severity.ERROR)
        return None

    def list_files(self, root: str | Path) -> list[str]:
        """All supported, non-ignored files under the directory *root*."""
        return list_files(root, self.config.extensions, self.should_ignore)

    def collect_files(self, target: str | Path) -> list[str]:
        """Files to scan for *target* (a file or a directory)."""
        return collect_files(target, self.config.extensions, self.should_ignore)

    # ---- analysis ----

    def analyze(self, path: str, text: str) -> ScanResult:
        """Analyse already-read *text*; unparsable text yields an empty result."""
        tree = self.parse(path, text)
        if tree is None:
            return ScanResult(file=path)
        try:
            defined = extract_declarations(tree, self.config.holder, self.config.method)
            used = extract_used_names(tree, self.config.identifier)
        except Exception as e:
            logger.exception("Unexpected failure analysing %s", path)
            self._report("analysis", path, f"Analysis failed: {e}", Severity.ERROR)
            return ScanResult(file=path)
        return ScanResult(
            file=path,
            defined=tuple(defined),
            used=tuple(used),
            unused=tuple(unused_declarations(defined, used)),
        )

    def scan_one(self, path: str | Path) -> ScanResult | None:
        """Scan one file.

        Returns None when the path is ignored or unreadable, otherwise a
        ScanResult (possibly with nothing defined).
        """
        path = str(path)
        if self.should_ignore(path):
            logger.debug("ignored: %s", path)
            return None
        text = self.read(path)
        if text is None:
            return None
        return self.analyze(path, text)

    def scan_paths(self, paths: Iterable[str | Path]) -> ScanReport:
        """Scan a batch of files; only files that declare styles are kept."""
        report = ScanReport()
        first_diagnostic = len(self.diagnostics)
        for path in paths:
            result = self.scan_one(path)
            if result is None:
                continue
            report.files_scanned += 1
            if result.has_styles:
                report.results.append(result)
        report.diagnostics = self.diagnostics[first_diagnostic:]
        return report

    def scan(self, target: str | Path) -> ScanReport:
        """Scan a file or every supported file under a directory."""
        return self.scan_paths(self.collect_files(target))

    # ---- rewriting ----

    def rewrite(self, path: str | Path, targets: Iterable[StyleDeclaration | str]) -> bool:
        """Remove the *targets* declarations from *path* in place.

        Declarations are located again by name in the current file text.
        Returns False, leaving the file untouched, when the file cannot be
        read or parsed, a target is no longer declared, the result would not
        parse, or the write fails. An empty *targets* is a successful no-op.
        """
        path = str(path)
        names = [t if isinstance(t, str) else t.name for t in targets]
        if not names:
            return True
        text = self.read(path)
        if text is None:
            return False
        tree = self.parse(path, text)
        if tree is None:
            return False
        try:
            new_text = remove_declarations(tree, names, self.config.holder, self.config.method)
        except TargetNotFoundError as e:
            self._report("rewrite-target", path, str(e))
            return False
        except RewriteError as e:
            self._report("rewrite", path, str(e))
            return False
        except Exception as e:
            logger.exception("Unexpected failure rewriting %s", path)
            self._report("rewrite", path, f"Rewrite failed: {e}", Severity.ERROR)
            return False
        try:
            write_atomic(path, new_text, self.config.encoding)
        except (OSError, UnicodeEncodeError) as e:
            self._report("write", path, f"Cannot write file: {e}", Severity.ERROR)
            return False
        self.cache.invalidate(path)
        logger.info("%s: removed %d unused style(s)", path, len(names))
        return True

    def clean(self, results: Iterable[ScanResult]) -> list[RewriteOutcome]:
        """Remove the unused styles of every result; failures do not stop the batch."""
        outcomes: list[RewriteOutcome] = []
        for result in results:
            if not result.has_unused:
                continue
            names = tuple(result.unused_names)
            success = self.rewrite(result.file, result.unused)
            outcomes.append(RewriteOutcome(file=result.file, removed=names, success=success))
        return outcomes
