"""CLI command: stylesweep watch -- re-scan files as they change."""

from __future__ import annotations

import click

from stylesweep.config import ScanConfig
from stylesweep.model import ScanReport
from stylesweep.report import format_report
from stylesweep.scanner import StyleScanner
from stylesweep.watch import PollingWatcher


def _print_report(report: ScanReport) -> None:
    for diag in report.diagnostics:
        click.echo(f"Warning: {diag}", err=True)
    if report.results:
        click.echo(format_report(report))


@click.command()
@click.argument("target", type=click.Path(exists=True))
@click.option("--interval", type=float, default=None, help="Seconds between polls")
@click.option("--settle", type=float, default=None, help="Seconds to wait after a change")
@click.pass_obj
def watch(config: ScanConfig, target: str, interval: float | None, settle: float | None) -> None:
    """Watch a file or folder and report unused styles on every change."""
    watcher = PollingWatcher(
        StyleScanner(config),
        target,
        on_change=_print_report,
        settle_delay=settle,
        poll_interval=interval,
    )
    _print_report(watcher.start())
    click.echo(f"Watching {target} (Ctrl+C to stop)...")
    try:
        watcher.run()
    except KeyboardInterrupt:
        click.echo("\nStopped watching.")
