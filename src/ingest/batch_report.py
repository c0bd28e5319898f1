"""Human-readable batch report rendering."""

from __future__ import annotations

from core.types import BatchReport


def render_batch_report(report: BatchReport) -> tuple[str, ...]:
    """Render report summary lines for operators.

    Args:
        report: Completed batch report.

    Returns:
        Success count line, followed by failed raw names when present.
    """
    lines = [f"Successfully processed {report.succeeded_count} files"]
    if report.failed_count:
        lines.append("These files were not processed:")
        lines.extend(report.failed_names)
    return tuple(lines)
