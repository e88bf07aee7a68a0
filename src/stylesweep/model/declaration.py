"""Declaration model: StyleDeclaration and StyleReference dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class StyleDeclaration:
    """One named entry of a ``StyleSheet.create({...})`` block.

    Lines are 1-indexed and inclusive, taken from the property's exact
    source extent.
    """

    name: str
    start_line: int
    end_line: int

    @property
    def span(self) -> tuple[int, int]:
        return (self.start_line, self.end_line)

    def __str__(self) -> str:
        if self.start_line == self.end_line:
            return f"{self.name} (line {self.start_line})"
        return f"{self.name} (lines {self.start_line}-{self.end_line})"


class ReferenceKind(Enum):
    """Syntactic idiom through which a style name was referenced."""

    PROPERTY = "property"  # styles.name
    ELEMENT = "element"  # styles["name"]
    SPREAD = "spread"  # {...styles.name}


@dataclass(frozen=True)
class StyleReference:
    """A single recognized reference to a style name."""

    name: str
    kind: ReferenceKind
    receiver: str
    line: int
