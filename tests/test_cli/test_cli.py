"""Tests for the stylesweep command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from stylesweep import __version__
from stylesweep.cli import cli
from stylesweep.config import CONFIG_FILENAME


@pytest.fixture()
def runner(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    monkeypatch.chdir(tmp_path)
    return CliRunner()


# ---------------------------------------------------------------------------
# Group options
# ---------------------------------------------------------------------------


class TestGroup:
    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("scan", "interactive", "watch"):
            assert name in result.output

    def test_bad_config_exits_2(self, runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text('{"colour": "red"}')
        result = runner.invoke(cli, ["scan", str(tmp_path)])
        assert result.exit_code == 2
        assert "Config error" in result.output

    def test_config_is_discovered(self, runner: CliRunner, write_source, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text(json.dumps({"identifier": "css"}))
        write_source("a.tsx", "const css = StyleSheet.create({ a: {}, b: {} });\nf(css.a, css.b);")
        result = runner.invoke(cli, ["scan", "a.tsx"])
        assert result.exit_code == 0, result.output

    def test_explicit_config(self, runner: CliRunner, write_source, tmp_path: Path) -> None:
        config = tmp_path / "custom.json"
        config.write_text(json.dumps({"holder": "Sheet"}))
        write_source("a.tsx", "const styles = Sheet.create({ a: {} });")
        result = runner.invoke(cli, ["--config", str(config), "scan", "a.tsx"])
        assert result.exit_code == 1
        assert "- a (line 1)" in result.output

    def test_ext_option(self, runner: CliRunner, write_source) -> None:
        write_source("a.tsx", "StyleSheet.create({ a: {} });")
        write_source("b.mjs", "StyleSheet.create({ b: {} });")
        result = runner.invoke(cli, ["--ext", "mjs", "scan", "."])
        assert "b.mjs" in result.output
        assert "a.tsx" not in result.output

    def test_ignore_option(self, runner: CliRunner, write_source) -> None:
        write_source("generated/a.tsx", "StyleSheet.create({ a: {} });")
        result = runner.invoke(cli, ["--ignore", "generated", "scan", "."])
        assert result.exit_code == 0
        assert "Scanning 0 file(s)" in result.output


# ---------------------------------------------------------------------------
# scan
# ---------------------------------------------------------------------------


class TestScanCommand:
    def test_report_and_exit_code(self, runner: CliRunner, copy_fixture) -> None:
        copy_fixture("basic_component.tsx")
        copy_fixture("example.tsx")
        result = runner.invoke(cli, ["scan", "."])
        assert result.exit_code == 1
        assert "Scanning 2 file(s)" in result.output
        assert "Unused Style Report" in result.output
        assert "- unusedStyle (line 17)" in result.output
        assert "Total Styles Defined: 5" in result.output
        assert "Usage Rate: 80.00%" in result.output

    def test_clean_tree_exits_0(self, runner: CliRunner, copy_fixture) -> None:
        copy_fixture("example.tsx")
        result = runner.invoke(cli, ["scan", "example.tsx"])
        assert result.exit_code == 0
        assert "No unused styles found." in result.output

    def test_missing_target(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["scan", "nope"])
        assert result.exit_code == 2

    def test_parse_warning(self, runner: CliRunner, copy_fixture) -> None:
        copy_fixture("broken.tsx")
        result = runner.invoke(cli, ["scan", "."])
        assert result.exit_code == 0
        assert "Warning:" in result.output
        assert "[parse]" in result.output

    def test_fix_with_yes(self, runner: CliRunner, copy_fixture) -> None:
        path = copy_fixture("basic_component.tsx")
        result = runner.invoke(cli, ["scan", ".", "--fix", "--yes"])
        assert result.exit_code == 0, result.output
        assert "Removed 1 unused style(s)" in result.output
        assert "Cleaned 1 file(s), 0 failure(s)" in result.output
        assert "unusedStyle" not in path.read_text()

    def test_fix_confirmed_on_prompt(self, runner: CliRunner, copy_fixture) -> None:
        path = copy_fixture("no_usage.tsx")
        result = runner.invoke(cli, ["scan", ".", "--fix"], input="y\n")
        assert result.exit_code == 0, result.output
        assert "StyleSheet.create({});" in path.read_text()

    def test_fix_declined(self, runner: CliRunner, copy_fixture) -> None:
        path = copy_fixture("basic_component.tsx")
        before = path.read_text()
        result = runner.invoke(cli, ["scan", ".", "--fix"], input="n\n")
        assert result.exit_code == 1
        assert "Cleanup cancelled." in result.output
        assert path.read_text() == before

    def test_fix_failure_exits_1(
        self, runner: CliRunner, copy_fixture, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        copy_fixture("basic_component.tsx")

        def fail(*args, **kwargs) -> None:
            raise OSError("read-only file system")

        monkeypatch.setattr("stylesweep.scanner.scanner.write_atomic", fail)
        result = runner.invoke(cli, ["scan", ".", "--fix", "--yes"])
        assert result.exit_code == 1
        assert "Failed to clean" in result.output
        assert "Cleaned 0 file(s), 1 failure(s)" in result.output


# ---------------------------------------------------------------------------
# interactive
# ---------------------------------------------------------------------------


class TestInteractiveCommand:
    def test_default_command_is_interactive(self, runner: CliRunner, copy_fixture) -> None:
        path = copy_fixture("basic_component.tsx")
        result = runner.invoke(cli, [], input="basic_component.tsx\ny\n")
        assert result.exit_code == 0, result.output
        assert "Interactive Mode" in result.output
        assert "Approved for cleanup (1 file(s)):" in result.output
        assert "Left unchanged" not in result.output
        assert "unusedStyle" not in path.read_text()

    def test_target_argument(self, runner: CliRunner, copy_fixture) -> None:
        path = copy_fixture("basic_component.tsx")
        before = path.read_text()
        result = runner.invoke(cli, ["interactive", "basic_component.tsx"], input="n\n")
        assert result.exit_code == 0
        assert "Skipped" in result.output
        assert "Left unchanged (1 file(s)):" in result.output
        assert "Approved for cleanup" not in result.output
        assert path.read_text() == before

    def test_end_of_input(self, runner: CliRunner, copy_fixture) -> None:
        path = copy_fixture("basic_component.tsx")
        before = path.read_text()
        result = runner.invoke(cli, ["interactive", "basic_component.tsx"], input="")
        assert result.exit_code == 0
        assert path.read_text() == before


# ---------------------------------------------------------------------------
# watch
# ---------------------------------------------------------------------------


class TestWatchCommand:
    def test_initial_report_and_interrupt(
        self, runner: CliRunner, copy_fixture, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        copy_fixture("basic_component.tsx")

        def interrupt(self, max_polls=None) -> None:
            raise KeyboardInterrupt

        monkeypatch.setattr("stylesweep.cli.watch.PollingWatcher.run", interrupt)
        result = runner.invoke(cli, ["watch", "."])
        assert result.exit_code == 0
        assert "unusedStyle" in result.output
        assert "Watching . (Ctrl+C to stop)..." in result.output
        assert "Stopped watching." in result.output
