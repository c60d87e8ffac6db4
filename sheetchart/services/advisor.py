from __future__ import annotations

from ..models.classification import ChartKind, ColumnClassification

"""Chart type advisor.

Picks a chart family from the shape of a classification. The rule order is
significant; the first matching rule wins.
"""

__all__ = [
    "pretty_series_name",
    "suggest_chart_type",
]

_SERIES_LABELS = {
    "credit": "Donation Received",
    "credits": "Donation Received",
    "debit": "Expenses",
    "debits": "Expenses",
}


def suggest_chart_type(classification: ColumnClassification) -> ChartKind:
    """Suggest the best chart kind for a classified dataset.

    1. date + numeric columns           -> line (time series)
    2. one categorical + one numeric    -> pie
    3. categories + several numerics    -> bar
    4. two or more numerics             -> scatter
    5. anything else                    -> bar
    """
    numeric = classification.numeric
    categorical = classification.categorical
    date = classification.date

    if date and numeric:
        return ChartKind.LINE
    if len(categorical) == 1 and len(numeric) == 1:
        return ChartKind.PIE
    if categorical and len(numeric) > 1:
        return ChartKind.BAR
    if len(numeric) >= 2:
        return ChartKind.SCATTER
    return ChartKind.BAR


def pretty_series_name(key: str) -> str:
    """Display label for a data series (ledger column names get friendly labels)."""
    return _SERIES_LABELS.get((key or "").strip().lower(), key)
