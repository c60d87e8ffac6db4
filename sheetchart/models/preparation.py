from __future__ import annotations

from dataclasses import dataclass

from .classification import ChartKind, ColumnClassification
from .record import Record

"""ChartPreparation model: everything a chart renderer needs for one dataset."""

__all__ = [
    "ChartPreparation",
]


@dataclass(frozen=True)
class ChartPreparation:
    """Typed records plus the classification and advice derived from them."""
    records: list[Record]  # coerced, sheet order
    classification: ColumnClassification
    chart_kind: ChartKind
    colors: list[str]  # one per numeric series (at least one)
    number_format: str = "decimal"

    @property
    def headers(self) -> list[str]:
        return list(self.classification.headers)

    def series_colors(self) -> dict[str, str]:
        """Numeric column -> color, in column order."""
        return dict(zip(self.classification.numeric, self.colors, strict=False))
