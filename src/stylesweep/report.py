"""Human-readable report formatting."""

from __future__ import annotations

from stylesweep.model import RewriteOutcome, ScanReport, ScanResult

RULE = "=" * 60


def format_counts(result: ScanResult) -> str:
    return (
        f"Total Defined: {len(result.defined)} | Used: {len(result.used)}"
        f" | Unused: {len(result.unused)}"
    )


def format_result(result: ScanResult, indent: str = "   ") -> str:
    """Format one file's unused styles; empty string when there are none."""
    if not result.has_unused:
        return ""
    lines = [f"File: {result.file}", f"{indent}{format_counts(result)}", ""]
    lines.extend(f"{indent}- {style}" for style in result.unused)
    return "\n".join(lines) + "\n"


def format_summary(report: ScanReport) -> str:
    files = len(report.files_with_unused)
    return "\n".join(
        [
            "Summary:",
            f"   Total Styles Defined: {report.total_defined}",
            f"   Total Styles Used: {report.total_used}",
            f"   Total Styles Unused: {report.total_unused}",
            f"   Usage Rate: {report.usage_rate:.2f}%",
            f"   {report.total_unused} unused found across {files} file(s)",
        ]
    )


def format_report(report: ScanReport) -> str:
    """Format a whole batch: one block per file with unused styles, then totals."""
    parts = ["", "Unused Style Report", RULE, ""]
    for result in report.files_with_unused:
        parts.append(format_result(result))
    if not report.has_unused:
        parts.append("No unused styles found.\n")
    parts.append(RULE)
    parts.append(format_summary(report))
    return "\n".join(parts) + "\n"


def format_outcomes(outcomes: list[RewriteOutcome]) -> str:
    lines = []
    for outcome in outcomes:
        if outcome.success:
            lines.append(f"Removed {len(outcome.removed)} unused style(s) from {outcome.file}")
        else:
            lines.append(f"Failed to clean {outcome.file}")
    return "\n".join(lines)
