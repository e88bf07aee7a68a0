"""Interactive scan loop: choose a target, review unused styles, confirm deletions."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import click

from stylesweep.interviewer import Interviewer
from stylesweep.model import Option, Question, QuestionType, RewriteOutcome, ScanResult
from stylesweep.report import format_counts, format_outcomes, format_report
from stylesweep.scanner import StyleScanner


SCAN_ALL = Option(key="1", label="Scan all files at once")
SCAN_ONE_BY_ONE = Option(key="2", label="Scan files one by one")


class InteractiveSession:
    """Drives one interactive scan through an :class:`Interviewer`.

    Nothing is deleted without a YES answer to a confirmation question.
    """

    def __init__(
        self,
        scanner: StyleScanner,
        interviewer: Interviewer,
        echo: Callable[[str], None] = click.echo,
    ) -> None:
        self.scanner = scanner
        self.interviewer = interviewer
        self.echo = echo
        self.outcomes: list[RewriteOutcome] = []

    def _confirm(self, text: str, file: str = "") -> bool:
        answer = self.interviewer.ask(Question(text=text, type=QuestionType.YES_NO, file=file))
        return answer.is_yes

    def _warn_diagnostics(self, start: int) -> None:
        for diag in self.scanner.diagnostics[start:]:
            self.echo(f"   Warning: {diag}")

    def run(self, target: str | None = None) -> list[RewriteOutcome]:
        """Run the session; returns the outcome of every attempted deletion."""
        if not target:
            answer = self.interviewer.ask(
                Question(
                    text="Enter the folder or file path to scan (e.g., src/ or App.tsx):",
                    type=QuestionType.FREEFORM,
                )
            )
            target = answer.text.strip()

        path = Path(target)
        if not target or not path.exists():
            self.echo(f"\nPath not found: {target}")
            return self.outcomes

        extensions = "/".join(self.scanner.config.extensions)
        if path.is_file() and not self.scanner.config.accepts(path):
            self.echo(f"\nFile type not supported. Only {extensions} files are supported.")
            return self.outcomes

        files = self.scanner.collect_files(path)
        if not files:
            self.echo(f"\nNo {extensions} files found in {target}")
            return self.outcomes

        self.echo(f"\nFound {len(files)} file(s)\n")

        if len(files) == 1:
            self._review_file(files[0])
            return self.outcomes

        answer = self.interviewer.ask(
            Question(
                text="Scan mode:",
                type=QuestionType.MULTIPLE_CHOICE,
                options=(SCAN_ALL, SCAN_ONE_BY_ONE),
            )
        )
        if answer.value == SCAN_ALL.key:
            self._scan_all(files)
        elif answer.value == SCAN_ONE_BY_ONE.key:
            self._scan_one_by_one(files)
        else:
            self.echo("\nInvalid choice. Exiting.")
        return self.outcomes

    # ---- modes ----

    def _review_file(self, file: str) -> None:
        self.echo(f"\nScanning {file}...\n")
        self._review(self._scan(file), file)

    def _scan(self, file: str) -> ScanResult | None:
        start = len(self.scanner.diagnostics)
        result = self.scanner.scan_one(file)
        self._warn_diagnostics(start)
        return result

    def _review(self, result: ScanResult | None, file: str) -> None:
        if result is None or not result.has_styles:
            self.echo("   No styles found in this file.\n")
            return
        if not result.has_unused:
            self.echo("   No unused styles! This file is clean.\n")
            return

        self.echo(f"   {format_counts(result)}\n")
        for style in result.unused:
            self.echo(f"   - {style}")

        if not self._confirm("Delete unused styles from this file?", file=file):
            self.echo("   Skipped\n")
            return
        self._delete(result)

    def _delete(self, result: ScanResult) -> None:
        start = len(self.scanner.diagnostics)
        success = self.scanner.rewrite(result.file, result.unused)
        outcome = RewriteOutcome(file=result.file, removed=tuple(result.unused_names), success=success)
        self.outcomes.append(outcome)
        self.echo(format_outcomes([outcome]))
        self._warn_diagnostics(start)

    def _scan_all(self, files: list[str]) -> None:
        self.echo("\nScanning all files...\n")
        report = self.scanner.scan_paths(files)
        for diag in report.diagnostics:
            self.echo(f"Warning: {diag}")
        self.echo(format_report(report))

        if not report.has_unused:
            return
        if not self._confirm("Do you want to delete all unused styles?"):
            self.echo("\nCleanup cancelled.")
            return

        self.echo("\nDeleting unused styles...\n")
        for result in report.files_with_unused:
            self._delete(result)
        self.echo("\nCleanup complete!")

    def _scan_one_by_one(self, files: list[str]) -> None:
        self.echo("\nScanning files one by one...\n")
        for index, file in enumerate(files, start=1):
            self.echo(f"\n[{index}/{len(files)}] {file}\n")
            self._review(self._scan(file), file)
        self.echo("\nScan complete!")
