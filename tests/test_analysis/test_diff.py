"""Tests for the declared-minus-used diff."""

from stylesweep.analysis import unused_declarations
from stylesweep.model import StyleDeclaration


def _decls(*names: str) -> list[StyleDeclaration]:
    return [StyleDeclaration(name, i + 1, i + 1) for i, name in enumerate(names)]


class TestUnusedDeclarations:
    def test_basic(self) -> None:
        unused = unused_declarations(_decls("container", "title", "unusedStyle"), ["container", "title"])
        assert [d.name for d in unused] == ["unusedStyle"]

    def test_declaration_order_is_kept(self) -> None:
        unused = unused_declarations(_decls("c", "a", "b"), [])
        assert [d.name for d in unused] == ["c", "a", "b"]

    def test_everything_used(self) -> None:
        assert unused_declarations(_decls("a", "b"), ["b", "a"]) == []

    def test_nothing_declared(self) -> None:
        assert unused_declarations([], ["a"]) == []

    def test_used_names_not_declared_are_ignored(self) -> None:
        unused = unused_declarations(_decls("a"), ["ghost"])
        assert [d.name for d in unused] == ["a"]

    def test_used_may_be_any_iterable(self) -> None:
        unused = unused_declarations(_decls("a", "b"), (n for n in ["a"]))
        assert [d.name for d in unused] == ["b"]

    def test_result_is_a_subsequence(self) -> None:
        declared = _decls("a", "b", "c", "d")
        unused = unused_declarations(declared, ["b", "d"])
        assert unused == [declared[0], declared[2]]
