"""Exceptions raised by loosecsv."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Stable error codes callers can map to user-facing messages."""

    NO_DATA = "NO_DATA"
    TOO_MANY_FIELDS = "TOO_MANY_FIELDS"
    UNSTRUCTURED_DATA = "UNSTRUCTURED_DATA"
    FIELD_COUNT_MISMATCH = "FIELD_COUNT_MISMATCH"


class CsvError(RuntimeError):
    """Base exception for loosecsv errors."""


class ParseError(CsvError):
    """Exception raised when delimited text cannot be turned into a table.

    Attributes
    ----------
    kind : ErrorKind
        Which of the import failure modes occurred.
    row_no : int or None
        1-based logical row number the failure was found in, if known.
    """

    kind: ErrorKind

    def __init__(self, message: str, row_no: int | None = None):
        super().__init__(message)
        self.row_no = row_no


class NoDataError(ParseError):
    """The input was empty or contained only whitespace."""

    kind = ErrorKind.NO_DATA


class TooManyFieldsError(ParseError):
    """The first row has more fields than the supported maximum."""

    kind = ErrorKind.TOO_MANY_FIELDS

    def __init__(self, message: str, field_count: int):
        super().__init__(message, row_no=1)
        self.field_count = field_count


class UnstructuredDataError(ParseError):
    """No consistent structure could be recovered from the input.

    Raised when neither delimiter gives consistent field counts, when a
    quoted field or header is missing its closing quote, and when a header
    name is too long.
    """

    kind = ErrorKind.UNSTRUCTURED_DATA


class FieldCountMismatchError(ParseError):
    """A body row has a different number of fields than the header."""

    kind = ErrorKind.FIELD_COUNT_MISMATCH

    def __init__(self, message: str, row_no: int, expected: int, actual: int):
        super().__init__(message, row_no=row_no)
        self.expected = expected
        self.actual = actual
