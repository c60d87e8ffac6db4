"""sheetchart: sheet grid -> chart-ready typed records.

Typical use::

    from sheetchart import prepare_from_response
    prep = prepare_from_response(api_response_body)
    prep.chart_kind, prep.records, prep.colors
"""

from .errors import FormattingError, InsufficientDataError, SheetChartError, UpstreamResponseError
from .grid.reader import ingest_grid
from .grid.response import validate_sheets_response
from .models import ChartKind, ChartPreparation, ChartSettings, ColumnClassification, ColumnType, Record
from .services.advisor import suggest_chart_type
from .services.classifier import analyze_column_types
from .services.coercion import coerce_record, coerce_records
from .services.formatting import format_number
from .services.palette import generate_color_palette
from .services.pipeline import prepare_chart, prepare_from_response

__all__ = [
    # Errors
    "SheetChartError",
    "InsufficientDataError",
    "UpstreamResponseError",
    "FormattingError",
    # Models
    "Record",
    "ColumnType",
    "ColumnClassification",
    "ChartKind",
    "ChartPreparation",
    "ChartSettings",
    # Pipeline stages
    "validate_sheets_response",
    "ingest_grid",
    "analyze_column_types",
    "coerce_record",
    "coerce_records",
    "suggest_chart_type",
    "generate_color_palette",
    "format_number",
    "prepare_chart",
    "prepare_from_response",
]
