"""Data models shared by the scanner, the rewriter and the CLI."""

from stylesweep.model.declaration import ReferenceKind, StyleDeclaration, StyleReference
from stylesweep.model.diagnostic import Diagnostic, Severity
from stylesweep.model.question import Answer, AnswerValue, Option, Question, QuestionType
from stylesweep.model.result import RewriteOutcome, ScanReport, ScanResult

__all__ = [
    "StyleDeclaration",
    "StyleReference",
    "ReferenceKind",
    "Diagnostic",
    "Severity",
    "Question",
    "QuestionType",
    "Answer",
    "AnswerValue",
    "Option",
    "ScanResult",
    "ScanReport",
    "RewriteOutcome",
]
