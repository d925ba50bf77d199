"""
Ready-made rules for common field checks.

Each rule takes a nullable value and returns `None` when the value is accepted
or a fixed message when it is rejected. `non_nullable` is the rule the tree
builder appends to fields marked as required.

The numeric and emptiness checks follow loose host-language coercion rather
than Python truthiness: `None` and `""` count as the number 0, so
`must_be_number` accepts them and leaves absence to `non_nullable`.
"""

import math
import re
from collections.abc import Sized
from datetime import date, datetime
from decimal import Decimal
from typing import Any

REQUIRED_MESSAGE = "不能为空"
NUMBER_MESSAGE = "必须为数字"
SELECT_MESSAGE = "至少选择一项"

_DECIMAL_LITERAL = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)
_RADIX_LITERAL = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_RADIX_BASES = {"x": 16, "o": 8, "b": 2}

# Whitespace and line terminators trimmed from numeric input
_NUMERIC_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005"
    "\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_EPOCH_DATE = date(1970, 1, 1)
_EPOCH = datetime(1970, 1, 1)


def to_number(value: Any) -> float:
    """Coerce a field value to a number the way form inputs are coerced.

    Params:
        value: Any field value.

    Returns:
        The coerced number, `math.nan` when the value has no numeric reading.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float, Decimal)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.timestamp() * 1000
        return (value - _EPOCH).total_seconds() * 1000
    if isinstance(value, date):
        return float((value - _EPOCH_DATE).days * 86_400_000)
    if isinstance(value, str):
        return _parse_numeric_string(value)
    if isinstance(value, (list, tuple)):
        return _parse_numeric_string(_join(value))
    return math.nan


def _parse_numeric_string(text: str) -> float:
    text = text.strip(_NUMERIC_WHITESPACE)
    if not text:
        return 0.0
    if _RADIX_LITERAL.fullmatch(text):
        return float(int(text[2:], _RADIX_BASES[text[1].lower()]))
    if _DECIMAL_LITERAL.fullmatch(text):
        return float(text)
    return math.nan


def _join(values: list | tuple) -> str:
    return ",".join(_string_form(item) for item in values)


def _string_form(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return repr(value)
    if isinstance(value, (list, tuple)):
        return _join(value)
    return str(value)


def is_empty(value: Any) -> bool:
    """Check whether a value holds no selectable items.

    Containers are empty when they have no items. Any other non-container value
    (numbers, booleans, dates) has nothing to select and counts as empty.
    """
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    return True


def non_nullable(value: Any) -> str | None:
    """Reject `None` and the empty string."""
    if value is None or (isinstance(value, str) and value == ""):
        return REQUIRED_MESSAGE
    return None


def must_be_number(value: Any) -> str | None:
    """Reject values that do not coerce to a number."""
    if math.isnan(to_number(value)):
        return NUMBER_MESSAGE
    return None


def at_least_one(value: Any) -> str | None:
    """Reject an absent or empty selection."""
    if is_empty(value):
        return SELECT_MESSAGE
    return None
