"""Domain models for sheetchart.

Records, column classification, chart kinds, settings and batch results used
throughout the package.
"""

from .classification import ChartKind, ColumnClassification, ColumnType
from .config_models import ChartSettings, ClassifierSettings
from .preparation import ChartPreparation
from .record import RawGrid, Record

__all__ = [
    # Data models
    "RawGrid",
    "Record",
    "ColumnType",
    "ColumnClassification",
    "ChartKind",
    "ChartPreparation",
    # Settings
    "ChartSettings",
    "ClassifierSettings",
]
