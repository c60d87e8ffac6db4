from __future__ import annotations

from ..models.processing_result import ProcessingResult

"""SUMMARY line rendering for batch runs.

Format:
SUMMARY sources={total}/{total} success={success} failed={failed}
records={records} columns={columns} elapsed_sec={elapsed}
"""


def _format_seconds(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # Format very small numbers to avoid scientific notation
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return str(round(value, 3))


def render_summary_line(total_sources: int, result: ProcessingResult) -> str:
    """Render a SUMMARY line from a ProcessingResult.

    Examples:
        >>> from datetime import datetime, timezone
        >>> start = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        >>> end = datetime(2024, 1, 1, 10, 0, 2, tzinfo=timezone.utc)
        >>> result = ProcessingResult(
        ...     success_sources=1, failed_sources=0, total_records=30,
        ...     total_columns=7, start_time=start, end_time=end, elapsed_seconds=2.0,
        ... )
        >>> render_summary_line(1, result)
        'SUMMARY sources=1/1 success=1 failed=0 records=30 columns=7 elapsed_sec=2'
    """
    return (
        f"SUMMARY sources={total_sources}/{total_sources} "
        f"success={result.success_sources} "
        f"failed={result.failed_sources} "
        f"records={result.total_records} "
        f"columns={result.total_columns} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
