"""Quote scanning shared by the row and field splitters and the writer.

A field is quoted when it is wrapped in double quotes. Inside a quoted field
a literal quote is written as two quotes. The scanners below never look at
delimiters themselves: they only answer where quoted regions begin and end,
so the splitters can tell which delimiters are structural.
"""

from loosecsv.errors import UnstructuredDataError

QUOTE = '"'
ESCAPED_QUOTE = '""'


def find_open_quote(text: str, start: int = 0) -> int:
    """Return the index of the next quote at or after ``start``, or -1.

    ``start`` must be a position known to be outside of quotes.
    """
    return text.find(QUOTE, start)


def find_close_quote(text: str, start: int = 0) -> int:
    """Return the index of the quote closing a quoted region, or -1.

    ``start`` must be a position known to be just inside an opening quote.
    Any number of consecutive quotes may be present: a run of odd length
    ends with the closing quote, a run of even length is escaped content.

    Examples
    --------
    >>> find_close_quote('a"b', 0)
    1
    >>> find_close_quote('a""b"', 0)
    4
    >>> find_close_quote('a""b', 0)
    -1
    """
    length = len(text)
    pos = start
    while pos < length:
        pos = text.find(QUOTE, pos)
        if pos == -1:
            return -1
        run_end = pos + 1
        while run_end < length and text[run_end] == QUOTE:
            run_end += 1
        if (run_end - pos) % 2 == 1:
            return run_end - 1
        # The character after an even run can't be a quote.
        pos = run_end + 1
    return -1


def contains_unclosed_quote(text: str) -> bool:
    """Check whether ``text`` opens a quoted region it never closes.

    The beginning of ``text`` must be outside of quotes.
    """
    pos = 0
    length = len(text)
    while pos < length:
        pos = find_open_quote(text, pos)
        if pos == -1:
            return False
        pos = find_close_quote(text, pos + 1)
        if pos == -1:
            return True
        pos += 1
    return False


def count_fields(line: str, delimiter: str) -> int:
    """Count the fields of a logical row, ignoring delimiters inside quotes.

    An empty line holds a single empty field. Counting stops at a quote that
    is never closed, since nothing after it can be a structural delimiter.
    """
    if not line:
        return 1
    field_count = 1
    pos = 0
    open_quote_pos = find_open_quote(line, pos)
    while True:
        delimiter_pos = line.find(delimiter, pos)
        if delimiter_pos == -1:
            return field_count
        if open_quote_pos != -1 and delimiter_pos > open_quote_pos:
            close_quote_pos = find_close_quote(line, open_quote_pos + 1)
            if close_quote_pos == -1:
                return field_count
            pos = close_quote_pos + 1
            open_quote_pos = find_open_quote(line, pos)
            continue
        pos = delimiter_pos + 1
        field_count += 1


def unescape_quotes(text: str) -> str:
    return text.replace(ESCAPED_QUOTE, QUOTE)


def unquote(text: str, row_no: int) -> str:
    """Extract the string held by raw field text.

    Whitespace outside of quotes is forgiven. Text beginning with a quote
    must end with one; the outer quotes are removed. Escaped quotes are
    unescaped either way. Unquoted text keeps its surrounding whitespace.

    Raises
    ------
    UnstructuredDataError
        If the field opens a quote without closing it.
    """
    trimmed = text.strip()
    if trimmed.startswith(QUOTE):
        if len(trimmed) < 2 or not trimmed.endswith(QUOTE):
            raise UnstructuredDataError(
                f"Field in row #{row_no} is missing closing quote.", row_no=row_no
            )
        text = trimmed[1:-1]
    return unescape_quotes(text)


def needs_quoting(text: str, delimiter: str) -> bool:
    return (
        QUOTE in text or delimiter in text or "\n" in text or "\r" in text
    )


def quote_text(text: str, delimiter: str) -> str:
    """Return ``text`` as it should appear in a delimited field.

    Examples
    --------
    >>> quote_text('The "big" dog', ",")
    '"The ""big"" dog"'
    >>> quote_text("plain", ",")
    'plain'
    """
    if not needs_quoting(text, delimiter):
        return text
    return QUOTE + text.replace(QUOTE, ESCAPED_QUOTE) + QUOTE
