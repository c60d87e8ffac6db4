from __future__ import annotations

import math
import re
import warnings
from datetime import date, datetime
from typing import Any

from dateutil import parser as dateparser

"""Cell value predicates and parsers shared by classification and coercion.

Sheet cells arrive as text (or as numbers when the source returns unformatted
values). These helpers answer "is this a number / a date" the same way for
both stages, so a column classified numeric is coerced with the same parse
that classified it.
"""

__all__ = [
    "format_display_date",
    "is_blank",
    "is_date_value",
    "is_number",
    "is_numeric_value",
    "is_plain_number",
    "parse_date",
    "parse_leading_float",
]

# 先頭一致の数値 ("12 kg" -> 12, "2021-01-01" -> 2021)
_DECIMAL = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_PLAIN_RADIX = re.compile(r"0[xX][0-9a-fA-F]+|0[bB][01]+|0[oO][0-7]+")
_HAS_DIGIT = re.compile(r"\d")
# 年・月の補完値だけが異なる 2 つの既定値 (日は両方 1 日固定)
_FILL_DEFAULTS = (datetime(2000, 1, 1), datetime(2004, 12, 1))


def is_blank(value: Any) -> bool:
    return value is None or value == ""


def is_number(value: Any) -> bool:
    """int/float values (bool excluded)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_leading_float(text: str) -> float | None:
    """Parse the longest numeric prefix of ``text``.

    Leading whitespace is skipped; anything after the numeric prefix is
    ignored. Returns None when the text does not start with a number.
    ``"Infinity"`` parses to ``inf``; callers decide what to do with it.
    """
    match = _DECIMAL.match(text.lstrip())
    if not match:
        return None
    token = match.group(0)
    if token.endswith("Infinity"):
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def is_plain_number(text: str) -> bool:
    """True when the whole (trimmed) text is a number literal.

    Used to keep numeric ids such as ``"20210101"`` or ``"42"`` out of the date
    count. Whitespace-only text counts as a number (it reads as zero).
    """
    stripped = text.strip()
    if stripped == "":
        return True
    return bool(_DECIMAL.fullmatch(stripped) or _PLAIN_RADIX.fullmatch(stripped))


def parse_date(text: str) -> datetime | None:
    """Parse text as a calendar date, or return None.

    Text without any digit is never a date, which keeps words such as
    ``"now"``, ``"today"`` or ``"May"`` out of date columns.

    The text itself must supply the year and the month. A missing day reads
    as the 1st (``"March 2021"`` -> 2021-03-01). Times (``"10:30"``), ordinals
    (``"1st"``) and bare number pairs (``"1 2"``) are rejected, so the result
    never depends on the current date.
    """
    if not _HAS_DIGIT.search(text):
        return None
    results = []
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        for default in _FILL_DEFAULTS:
            try:
                results.append(dateparser.parse(text, default=default))
            except (ValueError, TypeError, OverflowError):
                return None
    first, second = results
    if (first.year, first.month) != (second.year, second.month):
        return None
    return first


def is_date_value(value: Any) -> bool:
    """Date-count predicate: parseable date text that is not plain numeric text."""
    if isinstance(value, str):
        return not is_plain_number(value) and parse_date(value) is not None
    return isinstance(value, (date, datetime))


def is_numeric_value(value: Any) -> bool:
    """Numeric-count predicate: numbers, or text with a finite leading number."""
    if is_number(value):
        return True
    if isinstance(value, str):
        parsed = parse_leading_float(value)
        return parsed is not None and math.isfinite(parsed)
    return False


def format_display_date(value: date) -> str:
    """Short display date, month first (``1/15/2021``)."""
    return f"{value.month}/{value.day}/{value.year}"
