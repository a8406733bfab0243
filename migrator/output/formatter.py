"""Output formatting for migration results."""

import json
from typing import Literal

from ..migration.models import BatchResult, CaseOutcome, CaseStatus


def format_batch_result(
    result: BatchResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a batch result for output.

    Args:
        result: The batch result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_json(result)
    return _format_text(result)


def _format_text(result: BatchResult) -> str:
    """Format result as human-readable text."""
    lines: list[str] = []

    lines.append("MIGRATED:")
    if result.migrated:
        for outcome in result.migrated:
            lines.append(f"  {_format_outcome_text(outcome)}")
            for warning in outcome.warnings:
                lines.append(f"      ⚠ {warning}")
    else:
        lines.append("  (none)")

    lines.append("")

    lines.append("FAILED:")
    if result.failed or result.directory_failures:
        for failure in result.directory_failures:
            lines.append(f"  ✘ {failure.directory}: {failure.error}")
        for outcome in result.failed:
            lines.append(f"  {_format_outcome_text(outcome)}")
    else:
        lines.append("  (none)")

    # Summary
    lines.append("")
    failed_count = len(result.failed) + len(result.directory_failures)
    if failed_count:
        lines.append(f"Migrated {len(result.migrated)} test(s), {failed_count} failure(s)")
    else:
        lines.append(f"Migrated {len(result.migrated)} test(s)")

    return "\n".join(lines)


def _format_outcome_text(outcome: CaseOutcome) -> str:
    """Format a single outcome as text."""
    if outcome.status == CaseStatus.MIGRATED:
        return f"✔ {outcome.test_name} ({outcome.spec_file.name}) -> {outcome.output_dir}"
    return f"✘ {outcome.spec_file.name}: {outcome.error}"


def _format_json(result: BatchResult) -> str:
    """Format result as JSON."""
    data = {
        "migrated_count": len(result.migrated),
        "failed_count": len(result.failed) + len(result.directory_failures),
        "cases": [
            {
                "spec_file": str(outcome.spec_file),
                "test_name": outcome.test_name,
                "status": outcome.status.value,
                "output_dir": str(outcome.output_dir) if outcome.output_dir else None,
                "warnings": outcome.warnings,
                "error": outcome.error,
            }
            for outcome in result.outcomes
        ],
        "directory_failures": [
            {"directory": str(failure.directory), "error": failure.error}
            for failure in result.directory_failures
        ],
    }
    return json.dumps(data, indent=2)
