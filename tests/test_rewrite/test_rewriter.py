"""Tests for remove_declarations and write_atomic."""

import os
import stat
from pathlib import Path

import pytest

from stylesweep.analysis import extract_declarations
from stylesweep.parser import parse_source
from stylesweep.rewrite import (
    RewriteError,
    TargetNotFoundError,
    remove_declarations,
    write_atomic,
)

FIXTURES = Path(__file__).parent.parent / "fixtures"


class TestRemoveDeclarations:
    def test_empty_names_returns_text(self) -> None:
        text = (FIXTURES / "basic_component.tsx").read_text()
        tree = parse_source(text)
        assert remove_declarations(tree, []) is text

    def test_result_keeps_used_declarations(self) -> None:
        text = (FIXTURES / "basic_component.tsx").read_text()
        new_text = remove_declarations(parse_source(text), ["unusedStyle"])
        names = [d.name for d in extract_declarations(parse_source(new_text))]
        assert names == ["container", "title"]

    def test_repeated_names_are_collapsed(self) -> None:
        source = "StyleSheet.create({ a: 1, b: 2 });"
        assert remove_declarations(parse_source(source), ["a", "a"]) == "StyleSheet.create({ b: 2 });"

    def test_alias_fixture(self) -> None:
        text = (FIXTURES / "alias.tsx").read_text()
        new_text = remove_declarations(parse_source(text), ["a", "c"])
        assert "const styles = StyleSheet.create({ b: {} });" in new_text

    def test_missing_target(self) -> None:
        with pytest.raises(TargetNotFoundError):
            remove_declarations(parse_source("StyleSheet.create({ a: 1 });"), ["b"])

    def test_unparseable_result_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            "stylesweep.rewrite.rewriter.apply_removals",
            lambda text, removals: text + "{",
        )
        with pytest.raises(RewriteError, match="does not parse"):
            remove_declarations(parse_source("StyleSheet.create({ a: 1 });"), ["a"])

    def test_custom_holder(self) -> None:
        source = "Styles.make({ a: 1, b: 2 });"
        tree = parse_source(source)
        assert remove_declarations(tree, ["a"], holder="Styles", method="make") == "Styles.make({ b: 2 });"


class TestWriteAtomic:
    def test_replaces_contents(self, tmp_path: Path) -> None:
        target = tmp_path / "a.tsx"
        target.write_text("old")
        write_atomic(target, "new")
        assert target.read_text() == "new"

    def test_line_endings_are_written_verbatim(self, tmp_path: Path) -> None:
        target = tmp_path / "a.tsx"
        target.write_bytes(b"x\r\n")
        write_atomic(target, "a\r\nb\r\n")
        assert target.read_bytes() == b"a\r\nb\r\n"

    def test_encoding(self, tmp_path: Path) -> None:
        target = tmp_path / "a.tsx"
        target.write_text("")
        write_atomic(target, "größe", encoding="latin-1")
        assert target.read_bytes() == "größe".encode("latin-1")

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
    def test_mode_is_preserved(self, tmp_path: Path) -> None:
        target = tmp_path / "a.tsx"
        target.write_text("old")
        target.chmod(0o640)
        write_atomic(target, "new")
        assert stat.S_IMODE(target.stat().st_mode) == 0o640

    def test_no_temporary_file_is_left(self, tmp_path: Path) -> None:
        target = tmp_path / "a.tsx"
        target.write_text("old")
        write_atomic(target, "new")
        assert [p.name for p in tmp_path.iterdir()] == ["a.tsx"]

    def test_failure_leaves_original(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        target = tmp_path / "a.tsx"
        target.write_text("old")

        def fail(src: str, dst: str) -> None:
            raise OSError("disk full")

        monkeypatch.setattr("stylesweep.rewrite.rewriter.os.replace", fail)
        with pytest.raises(OSError, match="disk full"):
            write_atomic(target, "new")
        assert target.read_text() == "old"
        assert [p.name for p in tmp_path.iterdir()] == ["a.tsx"]

    def test_unencodable_text_leaves_original(self, tmp_path: Path) -> None:
        target = tmp_path / "a.tsx"
        target.write_text("old")
        with pytest.raises(UnicodeEncodeError):
            write_atomic(target, "☃", encoding="ascii")
        assert target.read_text() == "old"
        assert [p.name for p in tmp_path.iterdir()] == ["a.tsx"]
