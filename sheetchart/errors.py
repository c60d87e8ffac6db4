from __future__ import annotations

"""Exception hierarchy for sheetchart.

Structural problems with the input (no header row, malformed upstream
response) fail the whole operation with one of these. Cell-level noise never
raises; see ``services.coercion`` for the degrade-to-default rules.
"""

__all__ = [
    "SheetChartError",
    "InsufficientDataError",
    "UpstreamResponseError",
    "FormattingError",
]


class SheetChartError(Exception):
    """Base exception for sheetchart errors."""

    error_type = "SHEETCHART_ERROR"


class InsufficientDataError(SheetChartError):
    """Raised when a grid lacks a header row or any data row."""

    error_type = "INSUFFICIENT_DATA"


class UpstreamResponseError(SheetChartError):
    """Raised when a sheet source (API response body or CSV) is unusable."""

    error_type = "UPSTREAM_RESPONSE"


class FormattingError(SheetChartError):
    """Raised when a value cannot be rendered by the number formatter."""

    error_type = "FORMATTING"
