"""Parsing delimited text into a Table."""

import logging

from loosecsv.columns import generate_column_names
from loosecsv.dialect import SUFFICIENT_UNEQUAL_CHECK, detect_delimiter
from loosecsv.errors import (
    FieldCountMismatchError,
    NoDataError,
    TooManyFieldsError,
    UnstructuredDataError,
)
from loosecsv.quoting import count_fields, unquote
from loosecsv.splitting import as_text, split_fields, split_rows
from loosecsv.table import Table
from loosecsv.values import FieldValue, coerce_value

logger = logging.getLogger(__name__)

MAX_FIELD_COUNT = 256
MAX_FIELD_NAME_LENGTH = 255


def parse_header_row(row: str, delimiter: str) -> list[str]:
    """Parse the first row of the text as column names.

    Names are always strings. Whitespace around a name is dropped and one
    layer of quotes is removed.

    Raises
    ------
    UnstructuredDataError
        If a name opens a quote without closing it or is longer than
        MAX_FIELD_NAME_LENGTH.
    """
    column_names = []
    for field in split_fields(row, delimiter):
        name = unquote(field.strip(), row_no=1)
        if len(name) > MAX_FIELD_NAME_LENGTH:
            raise UnstructuredDataError(
                "Field name in first row is too long.", row_no=1
            )
        column_names.append(name)
    return column_names


def parse_row(row: str, delimiter: str, row_no: int) -> list[FieldValue]:
    return [coerce_value(field, row_no) for field in split_fields(row, delimiter)]


def parse_text(
    text: str,
    has_header: bool = True,
    *,
    confidence_rows: int = SUFFICIENT_UNEQUAL_CHECK,
) -> Table:
    """Parse delimited text into a Table.

    See parse() for details.
    """
    if not text.strip():
        raise NoDataError("No data found in CSV text.")

    rows = split_rows(text)
    delimiter = detect_delimiter(rows, confidence_rows)

    field_count = count_fields(rows[0], delimiter)
    if field_count > MAX_FIELD_COUNT:
        raise TooManyFieldsError(
            f"Too many fields found in first row "
            f"({field_count} > {MAX_FIELD_COUNT}).",
            field_count=field_count,
        )

    if has_header:
        column_names = parse_header_row(rows[0], delimiter)
        first_body_row_i = 1
    else:
        column_names = generate_column_names(field_count)
        first_body_row_i = 0

    body = []
    for row_i in range(first_body_row_i, len(rows)):
        row_no = row_i + 1
        values = parse_row(rows[row_i], delimiter, row_no)
        if len(values) != len(column_names):
            raise FieldCountMismatchError(
                f"Row #{row_no} has a different number of fields than the "
                f"first row ({len(values)} != {len(column_names)}).",
                row_no=row_no,
                expected=len(column_names),
                actual=len(values),
            )
        body.append(values)

    logger.debug(
        "Parsed %d rows x %d columns with %r delimiter.",
        len(body),
        len(column_names),
        delimiter.value,
    )
    return Table(column_names, body)


def parse_bytes(
    data: bytes,
    has_header: bool = True,
    *,
    confidence_rows: int = SUFFICIENT_UNEQUAL_CHECK,
) -> Table:
    """Parse UTF-8 encoded delimited text into a Table.

    A leading byte order mark is ignored. See parse() for details.
    """
    return parse_text(
        as_text(data), has_header, confidence_rows=confidence_rows
    )


def parse(
    data: str | bytes,
    has_header: bool = True,
    *,
    confidence_rows: int = SUFFICIENT_UNEQUAL_CHECK,
) -> Table:
    """Parse comma- or tab-delimited text into a Table.

    The field delimiter is detected. Rows may end in LF or CRLF, and quoted
    fields may contain delimiters, line breaks and doubled quotes. Values
    are converted to None, str, float, bool or datetime; see
    loosecsv.values.coerce_value() for the rules.

    Parameters
    ----------
    data : str or bytes
        Delimited text. Bytes are decoded as UTF-8.
    has_header : bool, default True
        Whether the first row holds column names. If False, names are
        generated: A, B, ... Z, AA, AB, ...
    confidence_rows : int, default 10
        Number of rows to check before trusting the delimiter with the
        higher field count.

    Returns
    -------
    Table

    Raises
    ------
    NoDataError
        If the text is empty or whitespace.
    TooManyFieldsError
        If the first row has more than MAX_FIELD_COUNT fields.
    UnstructuredDataError
        If no delimiter gives consistent field counts, a quoted field is
        missing its closing quote, or a column name is too long.
    FieldCountMismatchError
        If a row has a different number of fields than the first row.

    Examples
    --------
    >>> table = parse("name,age\\nAlice,30\\n")
    >>> table.column_names
    ['name', 'age']
    >>> table.row(0)
    ['Alice', 30.0]
    """
    return parse_text(as_text(data), has_header, confidence_rows=confidence_rows)
