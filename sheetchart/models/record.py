from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

"""Record model for sheetchart.

A Record is one data row of a grid after ingestion (raw text values) or after
coercion (typed values). Key order follows the header order of the grid.
"""

__all__ = [
    "RawGrid",
    "Record",
]

# Header row followed by data rows, as returned by the sheet source
RawGrid = list[list[Any]]


@dataclass(frozen=True)
class Record:
    """Logical representation of a single data row keyed by header label.

    ``row_number`` is the 1-based position of the row among the grid's data
    rows, counted before blank rows are dropped, so it still points at the
    original sheet row after filtering.
    """
    row_number: int  # 1 = first row after the header
    values: dict[str, Any]  # header -> value (text | number | display date)

    def __getitem__(self, key: str) -> Any:
        return self.values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    @property
    def headers(self) -> list[str]:
        return list(self.values)
