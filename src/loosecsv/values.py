"""Conversion between raw field text and typed cell values."""

import math
import numbers
import re
from datetime import date, datetime, timezone
from decimal import Decimal

from loosecsv.quoting import QUOTE, unquote

FieldValue = str | float | bool | datetime | None

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INFINITY_RE = re.compile(r"[+-]?Infinity")
_RADIX_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def parse_number(text: str) -> float | None:
    """Parse a number, or return None if ``text`` is not one.

    Accepts decimal and exponent notation, ``Infinity`` with an optional
    sign, and unsigned ``0x``/``0o``/``0b`` integer literals. Surrounding
    whitespace is ignored.
    """
    text = text.strip()
    if _DECIMAL_RE.fullmatch(text):
        return float(text)
    if _INFINITY_RE.fullmatch(text):
        return -math.inf if text.startswith("-") else math.inf
    if _RADIX_RE.fullmatch(text):
        try:
            return float(int(text, 0))
        except OverflowError:
            return math.inf
    return None


def parse_boolean(text: str) -> bool | None:
    text = text.strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    return None


def parse_timestamp(text: str) -> datetime | None:
    """Parse an ISO 8601 date or date/time into an aware UTC datetime.

    Text that is a plain number is never a timestamp, even where ISO 8601
    has a compact form for it (``20240101``). Values without an offset are
    taken to be UTC. Values that fall outside the datetime range once moved
    to UTC are not timestamps.
    """
    text = text.strip()
    if not text or text[0] not in "0123456789" or parse_number(text) is not None:
        return None
    try:
        value = datetime.fromisoformat(text)
    except ValueError:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    try:
        return value.astimezone(timezone.utc)
    except OverflowError:
        return None


def coerce_value(text: str, row_no: int) -> FieldValue:
    """Convert raw field text to a typed value.

    The first matching rule wins:

    1. empty or whitespace: None
    2. quoted: the unquoted string, so quotes keep numbers etc. as text
    3. ISO 8601 date/time: datetime
    4. ``true``/``false`` in any case: bool
    5. number, including ``Infinity``: float
    6. anything else: the text as-is, with escaped quotes unescaped

    Parameters
    ----------
    text : str
        Raw field text as returned by split_fields().
    row_no : int
        1-based row number, used in error messages.

    Raises
    ------
    UnstructuredDataError
        If a quoted field is missing its closing quote.
    """
    trimmed = text.strip()
    if not trimmed:
        return None
    if trimmed.startswith(QUOTE):
        return unquote(text, row_no)

    timestamp = parse_timestamp(trimmed)
    if timestamp is not None:
        return timestamp
    boolean = parse_boolean(trimmed)
    if boolean is not None:
        return boolean
    number = parse_number(trimmed)
    if number is not None:
        return number
    return unquote(text, row_no)


def format_number(value: numbers.Real) -> str:
    """Render a number the way spreadsheets and JavaScript print it.

    Examples
    --------
    >>> format_number(123.0)
    '123'
    >>> format_number(-123.456)
    '-123.456'
    >>> format_number(float("inf"))
    'Infinity'
    """
    if isinstance(value, int):
        return str(value)
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < 1e21:
        # repr() holds the shortest digits that round-trip.
        return format(Decimal(repr(value)).to_integral_value(), "f")
    return repr(value)


def format_timestamp(value: date) -> str:
    """Render a date or datetime as UTC ISO 8601 with milliseconds.

    Naive datetimes are taken to be UTC. Dates render as midnight UTC. A
    datetime that can't be moved to UTC without leaving the datetime range
    renders at its own offset.

    Examples
    --------
    >>> format_timestamp(datetime(2021, 8, 1, 8, 23, tzinfo=timezone.utc))
    '2021-08-01T08:23:00.000Z'
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            try:
                value = value.astimezone(timezone.utc).replace(tzinfo=None)
            except OverflowError:
                return value.isoformat(timespec="milliseconds")
    else:
        value = datetime(value.year, value.month, value.day)
    return value.isoformat(timespec="milliseconds") + "Z"


def is_plain_scalar(value: object) -> bool:
    """Check whether ``value`` renders without ever needing quotes."""
    return value is None or isinstance(value, (bool, numbers.Real, date))


def format_scalar(value: object) -> str:
    """Render a cell value as unquoted text.

    None renders as an empty string and booleans as ``true``/``false``.
    Values of other types render with str().
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, numbers.Real):
        return format_number(value)
    if isinstance(value, date):
        return format_timestamp(value)
    return str(value)
