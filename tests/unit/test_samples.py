from __future__ import annotations

from datetime import date

import pytest

from sheetchart.grid.reader import ingest_grid, read_csv_grid
from sheetchart.services.advisor import suggest_chart_type
from sheetchart.services.classifier import analyze_column_types
from sheetchart.services.samples import SampleKind, generate_sample_data, to_csv, to_grid

START = date(2024, 1, 1)


@pytest.mark.parametrize(
    "kind, rows, first_columns",
    [
        (SampleKind.SALES, 30, ["Date", "Product", "Region", "Sales"]),
        (SampleKind.ANALYTICS, 30, ["Date", "Source", "Device", "Sessions"]),
        (SampleKind.FINANCE, 12, ["Month", "Revenue", "Expenses", "Profit"]),
        (SampleKind.ECOMMERCE, 50, ["Product ID", "Category", "Brand", "Price"]),
        (SampleKind.SOCIAL, 30, ["Date", "Platform", "Content Type", "Followers"]),
    ],
)
def test_default_shapes(kind, rows, first_columns):
    data = generate_sample_data(kind, start=START)
    assert len(data) == rows
    assert list(data[0])[:4] == first_columns


def test_same_seed_same_data():
    assert generate_sample_data("sales", seed=7, start=START) == generate_sample_data("sales", seed=7, start=START)
    assert generate_sample_data("sales", seed=7, start=START) != generate_sample_data("sales", seed=8, start=START)


def test_dates_are_consecutive_from_start():
    data = generate_sample_data(SampleKind.SALES, rows=3, start=START)
    assert [r["Date"] for r in data] == ["2024-01-01", "2024-01-02", "2024-01-03"]


def test_rows_override_and_validation():
    assert generate_sample_data("finance", rows=24)[-1]["Month"] == "December"
    assert generate_sample_data("finance", rows=0) == []
    with pytest.raises(ValueError):
        generate_sample_data("finance", rows=-1)
    with pytest.raises(ValueError):
        generate_sample_data("weather")


def test_sales_sample_classifies_as_time_series():
    records = ingest_grid(to_grid(generate_sample_data("sales", start=START)))
    classification = analyze_column_types(records)
    assert classification.date == ("Date",)
    assert classification.categorical == ("Product", "Region")
    assert classification.numeric == ("Sales", "Revenue", "Units", "Profit Margin")
    assert suggest_chart_type(classification).value == "line"


def test_csv_round_trips_through_reader():
    data = generate_sample_data("ecommerce", rows=5)
    grid = read_csv_grid(to_csv(data))
    assert grid == to_grid(data)


def test_empty_rows_render_empty():
    assert to_csv([]) == ""
    assert to_grid([]) == []
