from __future__ import annotations

from dataclasses import dataclass, field

"""Settings dataclasses for sheetchart.

These are the typed, validated form of ``config/sheetchart.yml``; the loader
in ``sheetchart/config/loader.py`` builds them. Defaults reproduce the
behaviour of the classification and palette rules when no config is given.
"""

__all__ = [
    "ChartSettings",
    "ClassifierSettings",
    "DEFAULT_BASE_COLOR",
    "NUMBER_FORMAT_MODES",
]

DEFAULT_BASE_COLOR = "#8884d8"
NUMBER_FORMAT_MODES = ("currency", "percentage", "decimal", "integer")


@dataclass(frozen=True)
class ClassifierSettings:
    """Sampling and threshold parameters for column classification.

    Ratios are compared with a strict ``>``; the date rule is evaluated before
    the numeric rule, which is evaluated before the mixed rule.
    """
    sample_size: int = 20  # prefix sample, not random
    date_threshold: float = 0.7
    numeric_threshold: float = 0.7
    mixed_threshold: float = 0.3  # numeric or date ratio above this -> mixed
    max_workers: int = 1  # >1 fans columns out to a thread pool


@dataclass(frozen=True)
class ChartSettings:
    """Root settings object for a chart preparation run."""
    classifier: ClassifierSettings = field(default_factory=ClassifierSettings)
    base_color: str = DEFAULT_BASE_COLOR  # palette extension seed
    number_format: str = "decimal"  # default NumberFormatter mode for display
