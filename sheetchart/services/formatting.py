from __future__ import annotations

import math
import numbers
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation

from ..errors import FormattingError
from ..models.config_models import NUMBER_FORMAT_MODES

"""Number formatting for chart labels and tooltips.

Output is en-US style and does not depend on the process locale:

- ``,`` thousands grouping, ``.`` decimal point, leading ``-`` for negatives
- rounding is half away from zero (``2.5`` -> ``3``, ``-2.5`` -> ``-3``)
- the value is rounded from its shortest decimal representation, so
  ``1.005`` renders as ``1.01``

Modes:
    currency    ``$1,234.50`` (always 2 fraction digits)
    percentage  value in percentage points, ``50`` -> ``50.0%``
    integer     ``1,235``
    decimal     0-2 fraction digits, trailing zeros trimmed (default)

NaN and infinities raise FormattingError.
"""

__all__ = [
    "format_number",
]

_TWO_PLACES = Decimal("0.01")
_ONE_PLACE = Decimal("0.1")
_NO_PLACES = Decimal("1")
# float の整数部は最大 309 桁
_CONTEXT = Context(prec=400)


def _to_decimal(value: float | int) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise FormattingError(f"cannot format non-numeric value: {value!r}")
    if isinstance(value, numbers.Integral):
        return Decimal(int(value))
    value = float(value)
    if not math.isfinite(value):
        raise FormattingError(f"cannot format non-finite value: {value!r}")
    return Decimal(repr(value))


def _group(amount: Decimal, places: Decimal) -> str:
    try:
        rounded = amount.quantize(places, rounding=ROUND_HALF_UP, context=_CONTEXT)
    except InvalidOperation as e:
        raise FormattingError(f"value out of range: {amount}") from e
    return f"{rounded:,f}"


def _trim_fraction(text: str) -> str:
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_number(value: float | int, mode: str = "decimal") -> str:
    """Render ``value`` as display text under one of the four modes.

    Raises:
        FormattingError: value is not a finite number, or mode is unknown
    """
    if mode not in NUMBER_FORMAT_MODES:
        raise FormattingError(f"unknown number format mode: {mode!r}")
    amount = _to_decimal(value)

    if mode == "currency":
        text = _group(amount.copy_abs(), _TWO_PLACES)
        sign = "-" if amount.is_signed() else ""
        return f"{sign}${text}"
    if mode == "percentage":
        return f"{_group(amount, _ONE_PLACE)}%"
    if mode == "integer":
        return _group(amount, _NO_PLACES)
    # decimal
    return _trim_fraction(_group(amount, _TWO_PLACES))
