"""Scan orchestration: file discovery, tree cache and the scanner."""

from stylesweep.scanner.cache import TreeCache
from stylesweep.scanner.files import collect_files, list_files
from stylesweep.scanner.scanner import StyleScanner

__all__ = ["StyleScanner", "TreeCache", "collect_files", "list_files"]
