"""Row and field splitting.

Both splitters first split eagerly on the delimiter, which is fast and
correct for the common case of no quoted delimiters. A second pass then
re-joins the pieces that were wrongly split because the delimiter appeared
inside a quoted field.
"""

from loosecsv.quoting import QUOTE, contains_unclosed_quote

ROW_SEPARATOR = "\n"


def as_text(data: str | bytes | bytearray | memoryview) -> str:
    """Return ``data`` as text, decoding byte input as UTF-8.

    A leading byte order mark is dropped and invalid byte sequences are
    replaced rather than rejected.
    """
    if isinstance(data, str):
        return data
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).decode("utf-8-sig", errors="replace")
    raise TypeError(
        f"Expected str or bytes-like input, got {type(data).__name__}."
    )


def _trim_trailing_cr(text: str) -> str:
    return text[:-1] if text.endswith("\r") else text


def split_rows(text: str) -> list[str]:
    """Split text into logical rows.

    Rows may be separated by LF or CRLF. A line break inside a quoted field
    does not end the row. If a quote is never closed, every remaining line
    is joined into the last row and the problem is left for field parsing
    to report.

    Examples
    --------
    >>> split_rows('a,b\\r\\n"c\\nd",e\\n')
    ['a,b', '"c\\nd",e']
    """
    if text.endswith(ROW_SEPARATOR):
        text = text[:-1]
    lines = text.split(ROW_SEPARATOR)

    rows = []
    line_i = 0
    while line_i < len(lines):
        row = lines[line_i]
        line_i += 1
        if contains_unclosed_quote(row):
            while line_i < len(lines):
                row = f"{row}{ROW_SEPARATOR}{lines[line_i]}"
                line_i += 1
                if not contains_unclosed_quote(row):
                    break
        rows.append(_trim_trailing_cr(row))
    return rows


def split_fields(row: str, delimiter: str) -> list[str]:
    """Split a logical row into raw field texts.

    The returned fields are unprocessed: quotes and surrounding whitespace
    are still present.

    Examples
    --------
    >>> split_fields('"a,b",c', ",")
    ['"a,b"', 'c']
    """
    pieces = row.split(delimiter)

    fields = []
    piece_i = 0
    while piece_i < len(pieces):
        field = pieces[piece_i]
        piece_i += 1
        if contains_unclosed_quote(field):
            while piece_i < len(pieces):
                field = f"{field}{delimiter}{pieces[piece_i]}"
                piece_i += 1
                if field.rstrip().endswith(QUOTE):
                    break
        fields.append(field)
    return fields
