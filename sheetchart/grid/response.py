from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from ..errors import UpstreamResponseError
from ..models.record import RawGrid

"""Sheet source helpers: API response validation and sheet URL parsing.

The HTTP fetch itself happens outside this package. What arrives here is the
already-decoded JSON body of a ``spreadsheets.values.get`` call, which must be
shape-checked before it is treated as a RawGrid.
"""

__all__ = [
    "SHEETS_API_BASE_URL",
    "build_sheets_api_url",
    "extract_gid",
    "extract_sheet_id",
    "validate_sheets_response",
]

SHEETS_API_BASE_URL = "https://sheets.googleapis.com/v4/spreadsheets"

_SHEET_ID_PATTERNS = (
    re.compile(r"/spreadsheets/d/([a-zA-Z0-9_-]+)"),
    re.compile(r"/document/d/([a-zA-Z0-9_-]+)"),
    re.compile(r"spreadsheets/d/([a-zA-Z0-9_-]+)"),
)
_GID_PATTERN = re.compile(r"[?#]gid=(\d+)")


def validate_sheets_response(response: Mapping[str, Any] | None) -> RawGrid:
    """Validate a Sheets API response body and return its ``values`` grid.

    Raises:
        UpstreamResponseError: If any of the following occurs:
            - The response is absent (None or empty).
            - The response carries an ``error`` field.
            - The ``values`` field is missing.
            - ``values`` is not a non-empty list of rows.
    """
    if not response:
        raise UpstreamResponseError("No response received from Google Sheets API")
    if not isinstance(response, Mapping):
        raise UpstreamResponseError(
            f"Unexpected response type from Google Sheets API: {type(response).__name__}"
        )

    error = response.get("error")
    if error:
        message = error.get("message", "") if isinstance(error, Mapping) else str(error)
        raise UpstreamResponseError(f"Google Sheets API Error: {message}")

    values = response.get("values")
    if values is None:
        raise UpstreamResponseError("No data found in the sheet")
    if not isinstance(values, list) or len(values) == 0:
        raise UpstreamResponseError("Sheet contains no data")
    if not all(isinstance(row, list) for row in values):
        raise UpstreamResponseError("Sheet values must be a list of rows")
    return values


def extract_sheet_id(url: str) -> str | None:
    """Extract the spreadsheet id from the usual sheet/document URL forms."""
    for pattern in _SHEET_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None


def extract_gid(url: str) -> str | None:
    """Extract the tab id (``gid``) from a sheet URL query or fragment."""
    match = _GID_PATTERN.search(url)
    return match.group(1) if match else None


def build_sheets_api_url(sheet_id: str, api_key: str, range_: str = "A:Z") -> str:
    """Build the values endpoint URL returning unformatted cell values."""
    return (
        f"{SHEETS_API_BASE_URL}/{sheet_id}/values/{range_}"
        f"?key={api_key}&valueRenderOption=UNFORMATTED_VALUE"
    )
