from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

"""Processing result models for sheetchart batch runs.

A batch run prepares chart data for several sheet sources; these models carry
the per-source outcome and the aggregate used for the SUMMARY line.
"""

__all__ = [
    "ProcessingResult",
    "SourceStat",
]


@dataclass(frozen=True)
class SourceStat:
    """Per-source processing statistics."""
    source_name: str
    status: str  # success/failed
    records: int  # typed records produced (0 on failure)
    columns: int
    chart_kind: str | None  # None on failure
    elapsed_seconds: float
    error: str | None = None


@dataclass(frozen=True)
class ProcessingResult:
    """Aggregated results of a batch run."""
    success_sources: int
    failed_sources: int
    total_records: int
    total_columns: int
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    source_stats: list[SourceStat] | None = None

    @property
    def total_sources(self) -> int:
        return self.success_sources + self.failed_sources
