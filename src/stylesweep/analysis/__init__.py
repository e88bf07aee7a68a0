"""Style usage analysis: declarations, references and the unused diff."""

from stylesweep.analysis.declarations import (
    DeclarationBlock,
    extract_declarations,
    find_declaration_blocks,
)
from stylesweep.analysis.diff import unused_declarations
from stylesweep.analysis.usages import (
    collect_aliases,
    collect_references,
    extract_used_names,
)

__all__ = [
    "DeclarationBlock",
    "extract_declarations",
    "find_declaration_blocks",
    "unused_declarations",
    "collect_aliases",
    "collect_references",
    "extract_used_names",
]
