"""Shared fixtures for the stylesweep test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


def fixture_text(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


@pytest.fixture()
def write_source(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write *text* to ``tmp_path / name`` byte-for-byte and return the path."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write


@pytest.fixture()
def copy_fixture(write_source: Callable[[str, str], Path]) -> Callable[[str], Path]:
    """Copy a file from tests/fixtures into tmp_path."""

    def _copy(name: str) -> Path:
        return write_source(name, fixture_text(name))

    return _copy
