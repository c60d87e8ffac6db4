from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

from ..models.classification import ColumnClassification, ColumnType
from ..models.config_models import ClassifierSettings
from ..models.record import Record
from .values import is_blank, is_date_value, is_numeric_value

"""Column type classification service.

Each column is classified once from a prefix sample of the dataset (the first
``sample_size`` records). Sampling is a prefix, never random, so the same
dataset always classifies the same way.

Rule order (first match wins):
1. date ratio > date_threshold        -> date
2. numeric ratio > numeric_threshold  -> numeric
3. numeric or date ratio > mixed_threshold -> mixed
4. otherwise                          -> categorical

Date text is counted before numbers because a date such as ``2021-01-01``
also has a leading number.
"""

__all__ = [
    "ColumnStats",
    "analyze_column_types",
    "classify_column",
    "column_stats",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnStats:
    """Sample counts for one column."""
    header: str
    sample_count: int  # non-blank sampled values
    date_count: int
    numeric_count: int

    @property
    def date_ratio(self) -> float:
        return self.date_count / self.sample_count if self.sample_count else 0.0

    @property
    def numeric_ratio(self) -> float:
        return self.numeric_count / self.sample_count if self.sample_count else 0.0


def column_stats(header: str, values: Sequence[Any]) -> ColumnStats:
    """Count date-like and numeric-like values among the non-blank ``values``."""
    present = [v for v in values if not is_blank(v)]
    return ColumnStats(
        header=header,
        sample_count=len(present),
        date_count=sum(1 for v in present if is_date_value(v)),
        numeric_count=sum(1 for v in present if is_numeric_value(v)),
    )


def classify_column(stats: ColumnStats, settings: ClassifierSettings | None = None) -> ColumnType:
    """Apply the threshold rules to one column's sample counts."""
    settings = settings or ClassifierSettings()
    if stats.sample_count == 0:
        return ColumnType.MIXED
    if stats.date_ratio > settings.date_threshold:
        return ColumnType.DATE
    if stats.numeric_ratio > settings.numeric_threshold:
        return ColumnType.NUMERIC
    if stats.numeric_ratio > settings.mixed_threshold or stats.date_ratio > settings.mixed_threshold:
        return ColumnType.MIXED
    return ColumnType.CATEGORICAL


def analyze_column_types(
    records: Sequence[Record],
    settings: ClassifierSettings | None = None,
) -> ColumnClassification:
    """Classify every column of ``records`` from a prefix sample.

    Headers are taken from the first record. Records must already have blank
    rows removed (``ingest_grid`` does this).

    Args:
        records: Ingested records in sheet order
        settings: Sample size, thresholds and fan-out width

    Returns:
        ColumnClassification with each header in exactly one list
    """
    settings = settings or ClassifierSettings()
    if not records:
        return ColumnClassification()

    headers = records[0].headers
    sample = records[: min(settings.sample_size, len(records))]

    def _classify(header: str) -> ColumnType:
        stats = column_stats(header, [r.get(header) for r in sample])
        column_type = classify_column(stats, settings)
        logger.debug(
            f"column={header!r} sample={stats.sample_count} "
            f"date_ratio={stats.date_ratio:.2f} numeric_ratio={stats.numeric_ratio:.2f} "
            f"-> {column_type.value}"
        )
        return column_type

    if settings.max_workers > 1 and len(headers) > 1:
        # map() は入力順で結果を返す
        with ThreadPoolExecutor(max_workers=settings.max_workers) as pool:
            types = list(pool.map(_classify, headers))
    else:
        types = [_classify(h) for h in headers]

    return ColumnClassification.from_types(dict(zip(headers, types, strict=True)))
