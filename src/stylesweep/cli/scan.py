"""CLI command: stylesweep scan -- report (and optionally remove) unused styles."""

from __future__ import annotations

import sys

import click

from stylesweep.config import ScanConfig
from stylesweep.interviewer import AutoApproveInterviewer, ConsoleInterviewer
from stylesweep.model import Question, QuestionType
from stylesweep.report import format_outcomes, format_report
from stylesweep.scanner import StyleScanner


@click.command()
@click.argument("target", type=click.Path(exists=True))
@click.option("--fix", is_flag=True, help="Delete the unused styles after reporting")
@click.option("-y", "--yes", is_flag=True, help="Do not ask before deleting")
@click.pass_obj
def scan(config: ScanConfig, target: str, fix: bool, yes: bool) -> None:
    """Scan a file or folder and report unused styles.

    Exits with code 1 when unused styles remain, 0 otherwise.
    """
    scanner = StyleScanner(config)
    files = scanner.collect_files(target)
    click.echo(f"\nScanning {len(files)} file(s) in {target}...")

    report = scanner.scan_paths(files)
    for diag in report.diagnostics:
        click.echo(f"Warning: {diag}", err=True)
    click.echo(format_report(report))

    if not report.has_unused:
        sys.exit(0)
    if not fix:
        sys.exit(1)

    interviewer = AutoApproveInterviewer() if yes else ConsoleInterviewer()
    answer = interviewer.ask(
        Question(text="Do you want to delete all unused styles?", type=QuestionType.YES_NO)
    )
    if not answer.is_yes:
        click.echo("Cleanup cancelled.")
        sys.exit(1)

    start = len(scanner.diagnostics)
    outcomes = scanner.clean(report.files_with_unused)
    click.echo(format_outcomes(outcomes))
    for diag in scanner.diagnostics[start:]:
        click.echo(f"Warning: {diag}", err=True)

    failed = [o for o in outcomes if not o.success]
    click.echo()
    click.echo(
        f"Cleaned {len(outcomes) - len(failed)} file(s), {len(failed)} failure(s)"
    )
    sys.exit(1 if failed else 0)
