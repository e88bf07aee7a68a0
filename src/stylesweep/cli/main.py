"""stylesweep CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
import sys

import click

from stylesweep import __version__
from stylesweep.config import ConfigError, ScanConfig, find_config, load_config


def _load_config(config_path: str | None) -> ScanConfig:
    path = config_path or find_config(".")
    if path is None:
        return ScanConfig()
    return load_config(path)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="stylesweep")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON config file (default: nearest .stylesweep.json)",
)
@click.option("--ext", "extensions", multiple=True, help="File extension to scan (repeatable)")
@click.option("--ignore", "ignore_patterns", multiple=True, help="Regex of paths to skip (repeatable)")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    config_path: str | None,
    extensions: tuple[str, ...],
    ignore_patterns: tuple[str, ...],
) -> None:
    """stylesweep - find and remove unused StyleSheet.create() styles.

    Recognizes styles.name, styles["name"], aliases (const s = styles)
    and spreads ({...styles.name}). Without a subcommand, starts
    interactive mode.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = _load_config(config_path)
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(2)
    if extensions:
        config = config.replace(
            extensions=tuple(e if e.startswith(".") else f".{e}" for e in extensions)
        )
    if ignore_patterns:
        config = config.replace(ignore_patterns=config.ignore_patterns + ignore_patterns)
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        ctx.invoke(interactive)


# Import and register subcommands
from stylesweep.cli.interactive import interactive  # noqa: E402
from stylesweep.cli.scan import scan  # noqa: E402
from stylesweep.cli.watch import watch  # noqa: E402

cli.add_command(scan)
cli.add_command(interactive)
cli.add_command(watch)
