"""CLI command: stylesweep interactive -- guided scan with confirmations."""

from __future__ import annotations

import click

from stylesweep.config import ScanConfig
from stylesweep.interviewer import ConsoleInterviewer, RecordingInterviewer
from stylesweep.scanner import StyleScanner
from stylesweep.session import InteractiveSession


@click.command()
@click.argument("target", required=False)
@click.pass_obj
def interactive(config: ScanConfig, target: str | None) -> None:
    """Scan interactively, asking before any deletion.

    Prompts for TARGET when it is not given.
    """
    click.echo("\nstylesweep - Interactive Mode\n")
    click.echo("=" * 60)
    interviewer = RecordingInterviewer(ConsoleInterviewer())
    session = InteractiveSession(StyleScanner(config), interviewer)
    session.run(target)

    _summary("Approved for cleanup", interviewer.confirmed_files())
    _summary("Left unchanged", interviewer.declined_files())


def _summary(title: str, files: list[str]) -> None:
    if not files:
        return
    click.echo(f"\n{title} ({len(files)} file(s)):")
    for file in files:
        click.echo(f"   {file}")
