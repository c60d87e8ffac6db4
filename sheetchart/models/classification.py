from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property

"""Column classification and chart kind models for sheetchart.

ColumnClassification is derived once per dataset from a sample of records and
then applied unchanged to every row of that dataset.
"""

__all__ = [
    "ChartKind",
    "ColumnClassification",
    "ColumnType",
]


class ColumnType(Enum):
    """Semantic type assigned to a column from a sample of its values.

    - NUMERIC: mostly numbers (or text with a leading number)
    - CATEGORICAL: mostly free text labels
    - DATE: mostly calendar dates
    - MIXED: no dominant type, or no non-blank sample values at all
    """
    NUMERIC = "numeric"
    CATEGORICAL = "categorical"
    DATE = "date"
    MIXED = "mixed"


class ChartKind(str, Enum):
    """Visualization family recommended for a classified dataset."""
    LINE = "line"
    PIE = "pie"
    BAR = "bar"
    SCATTER = "scatter"


@dataclass(frozen=True)
class ColumnClassification:
    """Four disjoint lists of header names, one per ColumnType.

    Every header of the classified dataset appears in exactly one list, and
    each list keeps the header order of the dataset.
    """
    numeric: tuple[str, ...] = ()
    categorical: tuple[str, ...] = ()
    date: tuple[str, ...] = ()
    mixed: tuple[str, ...] = ()
    headers: tuple[str, ...] = field(default=(), compare=False)

    @classmethod
    def from_types(cls, types: dict[str, ColumnType]) -> ColumnClassification:
        """Build a classification from an ordered header -> type mapping."""
        buckets: dict[ColumnType, list[str]] = {t: [] for t in ColumnType}
        for header, column_type in types.items():
            buckets[column_type].append(header)
        return cls(
            numeric=tuple(buckets[ColumnType.NUMERIC]),
            categorical=tuple(buckets[ColumnType.CATEGORICAL]),
            date=tuple(buckets[ColumnType.DATE]),
            mixed=tuple(buckets[ColumnType.MIXED]),
            headers=tuple(types),
        )

    @cached_property
    def _type_index(self) -> dict[str, ColumnType]:
        return {h: t for t in ColumnType for h in self.columns(t)}

    def type_of(self, header: str) -> ColumnType | None:
        """Return the ColumnType of a header, or None if it was not classified."""
        return self._type_index.get(header)

    def columns(self, column_type: ColumnType) -> tuple[str, ...]:
        return {
            ColumnType.NUMERIC: self.numeric,
            ColumnType.CATEGORICAL: self.categorical,
            ColumnType.DATE: self.date,
            ColumnType.MIXED: self.mixed,
        }[column_type]

    @property
    def is_empty(self) -> bool:
        return not (self.numeric or self.categorical or self.date or self.mixed)

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "numeric": list(self.numeric),
            "categorical": list(self.categorical),
            "date": list(self.date),
            "mixed": list(self.mixed),
        }
