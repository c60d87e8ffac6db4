from __future__ import annotations

import io
import logging
import warnings
from typing import Any

import pandas as pd

from ..errors import InsufficientDataError, UpstreamResponseError
from ..models.record import RawGrid, Record

"""Grid reader: raw header + rows grid -> ordered Records.

1行目をヘッダ行、2行目以降をデータ行として扱う。
全セル空 (""/None) のデータ行は分類・サンプリングより前にここで除外する。
"""

__all__ = [
    "ingest_grid",
    "is_blank_row",
    "read_csv_grid",
]

logger = logging.getLogger(__name__)


def _is_blank_cell(value: Any) -> bool:
    return value is None or value == ""


def is_blank_row(row: list[Any]) -> bool:
    """True when every cell of the row is an empty string or None."""
    return all(_is_blank_cell(cell) for cell in row)


def ingest_grid(grid: RawGrid | None) -> list[Record]:
    """Convert a raw grid into Records keyed by the header row.

    Steps:
    1. Validate at least 2 rows exist (header + one data row)
    2. Drop fully blank data rows
    3. Pair header[i] with row[i]; short rows are padded with ""

    Duplicate header labels collapse to one key, last value wins.

    Raises
    ------
    InsufficientDataError: grid is None or has fewer than 2 rows
    """
    if not grid or len(grid) < 2:
        raise InsufficientDataError("Sheet must have at least a header row and one data row")

    header_row, *data_rows = grid
    headers = [h if isinstance(h, str) else str(h) for h in header_row]

    records: list[Record] = []
    for index, row in enumerate(data_rows, start=1):
        row = list(row or [])
        if is_blank_row(row):
            continue
        values: dict[str, Any] = {}
        for i, header in enumerate(headers):
            value = row[i] if i < len(row) else None
            # 欠損セルは空文字 (0 / False はそのまま残す)
            values[header] = "" if value is None else value
        records.append(Record(row_number=index, values=values))

    dropped = len(data_rows) - len(records)
    if dropped:
        logger.debug(f"dropped {dropped} blank row(s) of {len(data_rows)}")
    return records


def read_csv_grid(text: str) -> RawGrid:
    """Parse CSV text (header + rows) into a RawGrid of stripped strings.

    Quoted fields, embedded commas and doubled quotes follow the usual CSV
    rules. Short rows are padded with "", cells beyond the header width are
    dropped (as ``ingest_grid`` does), and blank lines are kept as blank rows
    so that ``ingest_grid`` drops them.

    Raises
    ------
    UpstreamResponseError: text is empty or not parseable as CSV
    """
    if not text or not text.strip():
        raise UpstreamResponseError("Sheet contains no data")
    try:
        with warnings.catch_warnings():
            # 余分なセルは pandas が ParserWarning を出して切り捨てる
            warnings.simplefilter("ignore", pd.errors.ParserWarning)
            df = pd.read_csv(
                io.StringIO(text),
                header=None,
                index_col=False,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=False,
                engine="python",
                on_bad_lines=lambda line: line,
            )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise UpstreamResponseError(f"invalid csv: {e}") from e

    df = df.fillna("")
    grid: RawGrid = [[str(cell).strip() for cell in row] for row in df.itertuples(index=False)]
    if grid:
        # ヘッダのクォート除去
        grid[0] = [h.replace('"', "") for h in grid[0]]
    return grid
