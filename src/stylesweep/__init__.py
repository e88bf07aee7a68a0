"""stylesweep: find and remove unused StyleSheet.create() styles."""

from __future__ import annotations

__version__ = "0.3.0"

from stylesweep.config import ScanConfig  # noqa: E402
from stylesweep.model import ScanReport, ScanResult, StyleDeclaration  # noqa: E402
from stylesweep.scanner import StyleScanner, TreeCache  # noqa: E402

__all__ = [
    "__version__",
    "ScanConfig",
    "ScanReport",
    "ScanResult",
    "StyleDeclaration",
    "StyleScanner",
    "TreeCache",
]
