"""Field delimiter detection."""

import logging
from dataclasses import dataclass
from enum import StrEnum

from loosecsv.errors import NoDataError, UnstructuredDataError
from loosecsv.quoting import QUOTE, count_fields
from loosecsv.splitting import as_text, split_rows

logger = logging.getLogger(__name__)

# Rows to check before declaring the delimiter with the higher field count
# the winner.
SUFFICIENT_UNEQUAL_CHECK = 10


class Delimiter(StrEnum):
    """Field delimiters loosecsv can detect and write."""

    COMMA = ","
    TAB = "\t"


COMMA = Delimiter.COMMA
TAB = Delimiter.TAB


@dataclass(frozen=True)
class Dialect:
    """Format of a piece of delimited text, as returned by detect_dialect().

    Attributes
    ----------
    delimiter : Delimiter
        Field separator character.
    quote_char : str
        Quote character used for escaping fields. Always ``'"'``.
    line_ending : str
        Row delimiter seen in the text: ``'\\n'``, ``'\\r\\n'``, ``'mixed'``,
        or ``'unknown'`` when the text has no line breaks.
    field_count : int
        Number of fields in the first row.
    row_count : int
        Number of logical rows, including a header row if there is one.
    """

    delimiter: Delimiter
    quote_char: str = QUOTE
    line_ending: str = "unknown"
    field_count: int = 1
    row_count: int = 1


def detect_delimiter(
    rows: list[str], confidence_rows: int = SUFFICIENT_UNEQUAL_CHECK
) -> Delimiter:
    """Choose between comma and tab for a list of logical rows.

    Each candidate's field count in the first row is its baseline. Rows are
    then checked in order, and a candidate fails on the first row whose
    field count differs from its baseline. If only one candidate fails, the
    other one is chosen right away. When the baselines differ, checking
    stops after ``confidence_rows`` rows. Otherwise every row is checked.
    The candidate with the higher baseline wins, and a tie goes to tab:
    single-column text has no delimiters at all.

    Parameters
    ----------
    rows : list of str
        Logical rows, as returned by split_rows(). Must not be empty.
    confidence_rows : int, default 10
        Row index at which unequal baselines are trusted.

    Returns
    -------
    Delimiter

    Raises
    ------
    UnstructuredDataError
        If both candidates give inconsistent field counts.
    """
    if not rows:
        raise ValueError("At least one row is needed to detect a delimiter.")

    candidates = (COMMA, TAB)
    baselines = {
        delimiter: count_fields(rows[0], delimiter) for delimiter in candidates
    }
    are_baselines_equal = baselines[COMMA] == baselines[TAB]

    failed = set()
    for row_i, row in enumerate(rows):
        for delimiter in candidates:
            if delimiter in failed:
                continue
            if count_fields(row, delimiter) != baselines[delimiter]:
                failed.add(delimiter)

        if len(failed) == len(candidates):
            raise UnstructuredDataError(
                "All field delimiter choices result in unparsable data.",
                row_no=row_i + 1,
            )
        if failed:
            chosen = TAB if COMMA in failed else COMMA
            logger.debug(
                "Chose %r delimiter; %r failed on row %d.",
                chosen.value,
                next(iter(failed)).value,
                row_i + 1,
            )
            return chosen

        if not are_baselines_equal and row_i >= confidence_rows:
            break

    chosen = COMMA if baselines[COMMA] > baselines[TAB] else TAB
    logger.debug(
        "Chose %r delimiter by field count (comma=%d, tab=%d).",
        chosen.value,
        baselines[COMMA],
        baselines[TAB],
    )
    return chosen


def _detect_line_ending(text: str) -> str:
    crlf_count = text.count("\r\n")
    lf_count = text.count("\n") - crlf_count
    if crlf_count and lf_count:
        return "mixed"
    if crlf_count:
        return "\r\n"
    if lf_count:
        return "\n"
    return "unknown"


def detect_dialect(
    data: str | bytes, confidence_rows: int = SUFFICIENT_UNEQUAL_CHECK
) -> Dialect:
    """Detect the dialect of delimited text without parsing its values.

    Parameters
    ----------
    data : str or bytes
        Delimited text. Bytes are decoded as UTF-8.
    confidence_rows : int, default 10
        See detect_delimiter().

    Returns
    -------
    Dialect

    Raises
    ------
    NoDataError
        If the text is empty or whitespace.
    UnstructuredDataError
        If no delimiter gives consistent field counts.
    """
    text = as_text(data)
    if not text.strip():
        raise NoDataError("No data found in CSV text.")

    rows = split_rows(text)
    delimiter = detect_delimiter(rows, confidence_rows)
    return Dialect(
        delimiter=delimiter,
        line_ending=_detect_line_ending(text),
        field_count=count_fields(rows[0], delimiter),
        row_count=len(rows),
    )
