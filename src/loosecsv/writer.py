"""Rendering tables as delimited text.

The output aims to open cleanly in common spreadsheet software:

* UTF-8 without a byte order mark
* tab delimiters by default, comma on request
* quotes only around text that needs them
* CRLF after every row, including the last
* ISO 8601 timestamps in UTC
* nulls as empty fields, booleans as ``true``/``false``
"""

import logging
from collections.abc import Iterable, Sequence

from loosecsv.dialect import TAB, Delimiter
from loosecsv.quoting import quote_text
from loosecsv.table import Table
from loosecsv.values import format_scalar, is_plain_scalar

logger = logging.getLogger(__name__)

ROW_DELIMITER = "\r\n"
DEFAULT_DELIMITER = TAB


def render_cell(value: object, delimiter: str) -> str:
    """Render one cell value, quoting it if it needs quotes."""
    if is_plain_scalar(value):
        return format_scalar(value)
    return quote_text(format_scalar(value), delimiter)


def _render_header_row(field_names: Sequence[str], delimiter: str) -> str:
    return delimiter.join(
        quote_text(str(name).strip(), delimiter) for name in field_names
    )


def render_rows(
    rows: Iterable[Sequence[object]],
    field_names: Sequence[str],
    include_headers: bool = True,
    delimiter: Delimiter | str = DEFAULT_DELIMITER,
) -> str:
    """Render rows of values as delimited text.

    Parameters
    ----------
    rows : iterable of sequences
        Body rows. Each must have one value per field name.
    field_names : sequence of str
        Column names. Written as the first row when ``include_headers`` is
        True, with surrounding whitespace removed.
    include_headers : bool, default True
        Whether to write a header row.
    delimiter : Delimiter or str, default Delimiter.TAB
        Field delimiter, comma or tab.

    Returns
    -------
    str

    Raises
    ------
    ValueError
        If there are no field names, a row's length differs from the number
        of field names, or the delimiter is not comma or tab. Nothing is
        rendered in that case.
    """
    delimiter = Delimiter(delimiter)
    field_names = list(field_names)
    rows = list(rows)
    if not field_names:
        raise ValueError("field_names must have at least one element.")
    for row_i, row in enumerate(rows):
        if len(row) != len(field_names):
            raise ValueError(
                f"All rows must have the same number of fields as field_names "
                f"(row {row_i} has {len(row)}, expected {len(field_names)})."
            )

    lines = []
    if include_headers:
        lines.append(_render_header_row(field_names, delimiter))
    for row in rows:
        lines.append(delimiter.join(render_cell(value, delimiter) for value in row))
    text = "".join(line + ROW_DELIMITER for line in lines)

    logger.debug(
        "Rendered %d rows x %d columns (%d chars) with %r delimiter.",
        len(rows),
        len(field_names),
        len(text),
        delimiter.value,
    )
    return text


def render(
    table: Table,
    include_headers: bool = True,
    delimiter: Delimiter | str = DEFAULT_DELIMITER,
) -> str:
    """Render a Table as delimited text.

    Examples
    --------
    >>> table = Table(["one", "two"], [["a", "b"], ["c", "d"]])
    >>> render(table, delimiter=",")
    'one,two\\r\\na,b\\r\\nc,d\\r\\n'

    See render_rows() for parameters and errors.
    """
    return render_rows(table.rows, table.column_names, include_headers, delimiter)


def render_bytes(
    table: Table,
    include_headers: bool = True,
    delimiter: Delimiter | str = DEFAULT_DELIMITER,
) -> bytes:
    """Render a Table as UTF-8 encoded delimited text, without a BOM."""
    return render(table, include_headers, delimiter).encode("utf-8")
