from __future__ import annotations

import math
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from ..models.classification import ColumnClassification, ColumnType
from ..models.record import Record
from .values import format_display_date, is_blank, is_number, parse_date, parse_leading_float

"""Value coercion service: raw Records -> typed Records.

Coercion is total. A malformed cell degrades to a safe default instead of
raising, so one bad cell never aborts a dataset:

- numeric: number kept, text parsed by its leading number, otherwise 0.
  Non-finite numbers (NaN, +/-inf) also become 0.
- date: parseable text -> short display date (``1/15/2021``); anything else
  is left unchanged.
- categorical / mixed: text; None and "" become "", booleans "true"/"false".

Coercing an already coerced record returns an equal record.
"""

__all__ = [
    "coerce_records",
    "coerce_record",
    "coerce_value",
]


def _to_number(value: Any) -> int | float:
    if is_number(value):
        return value if math.isfinite(value) else 0
    if isinstance(value, str) and value != "":
        parsed = parse_leading_float(value)
        if parsed is None or not math.isfinite(parsed):
            return 0
        return parsed
    return 0


def _to_display_date(value: Any) -> Any:
    if isinstance(value, str) and value != "":
        parsed = parse_date(value)
        if parsed is not None:
            return format_display_date(parsed)
    return value


def _to_text(value: Any) -> str:
    if is_blank(value):
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        # JSON の true/false 表記
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        # 2.0 -> "2"
        return str(int(value))
    return str(value)


def coerce_value(value: Any, column_type: ColumnType | None) -> Any:
    """Coerce a single cell to the representation of its column type."""
    if column_type is ColumnType.NUMERIC:
        return _to_number(value)
    if column_type is ColumnType.DATE:
        return _to_display_date(value)
    return _to_text(value)


def coerce_record(record: Record, classification: ColumnClassification) -> Record:
    """Return a new Record with every value coerced per the classification.

    Headers missing from the classification are treated as categorical.
    """
    values = {key: coerce_value(value, classification.type_of(key)) for key, value in record.values.items()}
    return Record(row_number=record.row_number, values=values)


def coerce_records(
    records: Sequence[Record],
    classification: ColumnClassification,
    max_workers: int | None = None,
) -> list[Record]:
    """Coerce all records, preserving their order.

    ``max_workers`` > 1 fans the records out to a thread pool; the result
    order is still the input order.
    """
    if max_workers and max_workers > 1 and len(records) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            return list(pool.map(lambda r: coerce_record(r, classification), records))
    return [coerce_record(r, classification) for r in records]
