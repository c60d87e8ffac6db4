from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from sheetchart.models.classification import ChartKind, ColumnClassification, ColumnType
from sheetchart.models.config_models import ChartSettings, ClassifierSettings
from sheetchart.models.preparation import ChartPreparation
from sheetchart.models.record import Record


def test_record_mapping_access():
    record = Record(row_number=2, values={"Date": "1/1/2021", "Sales": 10.0})
    assert record["Sales"] == 10.0
    assert record.get("Missing", "-") == "-"
    assert list(record) == ["Date", "Sales"]
    assert len(record) == 2
    assert record.headers == ["Date", "Sales"]


def test_record_is_frozen():
    record = Record(row_number=1, values={})
    with pytest.raises(FrozenInstanceError):
        record.row_number = 2


def test_classification_from_types_keeps_header_order():
    classification = ColumnClassification.from_types({
        "b": ColumnType.NUMERIC,
        "a": ColumnType.CATEGORICAL,
        "c": ColumnType.NUMERIC,
    })
    assert classification.numeric == ("b", "c")
    assert classification.categorical == ("a",)
    assert classification.headers == ("b", "a", "c")
    assert classification.type_of("c") is ColumnType.NUMERIC
    assert classification.type_of("zzz") is None
    assert classification.columns(ColumnType.DATE) == ()
    assert classification.to_dict() == {
        "numeric": ["b", "c"], "categorical": ["a"], "date": [], "mixed": [],
    }


def test_classification_equality_ignores_header_order_field():
    a = ColumnClassification.from_types({"x": ColumnType.NUMERIC})
    assert a == ColumnClassification(numeric=("x",))


def test_column_type_values():
    assert [t.value for t in ColumnType] == ["numeric", "categorical", "date", "mixed"]


def test_default_settings():
    settings = ChartSettings()
    assert settings.classifier == ClassifierSettings(
        sample_size=20, date_threshold=0.7, numeric_threshold=0.7, mixed_threshold=0.3, max_workers=1,
    )
    assert settings.base_color == "#8884d8"
    assert settings.number_format == "decimal"


def test_preparation_series_colors():
    prep = ChartPreparation(
        records=[],
        classification=ColumnClassification.from_types({
            "Region": ColumnType.CATEGORICAL, "Sales": ColumnType.NUMERIC, "Revenue": ColumnType.NUMERIC,
        }),
        chart_kind=ChartKind.BAR,
        colors=["#8884d8", "#82ca9d"],
    )
    assert prep.headers == ["Region", "Sales", "Revenue"]
    assert prep.series_colors() == {"Sales": "#8884d8", "Revenue": "#82ca9d"}
