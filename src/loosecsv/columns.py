"""Spreadsheet-style column names (A, B, ... Z, AA, AB, ... ZZ)."""

_FIRST_LETTER = "A"
_LAST_LETTER = "Z"
_LAST_NAME = _LAST_LETTER * 2

# A-Z plus AA-ZZ.
MAX_COLUMN_NAMES = 26 + 26 * 26


def next_column_name(column_name: str) -> str:
    """Return the column name following ``column_name``.

    The empty string is followed by ``"A"``. Nothing follows ``"ZZ"``.

    Raises
    ------
    ValueError
        If ``column_name`` is ``"ZZ"`` or is not a one- or two-letter
        uppercase name.
    """
    if column_name == "":
        return _FIRST_LETTER
    if column_name == _LAST_NAME:
        raise ValueError(
            f"No column name follows {_LAST_NAME!r}; "
            f"at most {MAX_COLUMN_NAMES} names are supported."
        )
    if len(column_name) > 2 or not all(
        _FIRST_LETTER <= letter <= _LAST_LETTER for letter in column_name
    ):
        raise ValueError(f"Not a generated column name: {column_name!r}")

    if len(column_name) == 1:
        if column_name == _LAST_LETTER:
            return _FIRST_LETTER * 2
        return chr(ord(column_name) + 1)

    first, second = column_name
    if second == _LAST_LETTER:
        return chr(ord(first) + 1) + _FIRST_LETTER
    return first + chr(ord(second) + 1)


def generate_column_names(count: int) -> list[str]:
    """Generate ``count`` unique column names in spreadsheet order.

    Examples
    --------
    >>> generate_column_names(3)
    ['A', 'B', 'C']
    >>> generate_column_names(28)[-2:]
    ['AA', 'AB']

    Raises
    ------
    ValueError
        If ``count`` is negative or greater than MAX_COLUMN_NAMES.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count > MAX_COLUMN_NAMES:
        raise ValueError(
            f"Can't generate {count} column names; "
            f"at most {MAX_COLUMN_NAMES} are supported."
        )

    column_names = []
    column_name = ""
    for _ in range(count):
        column_name = next_column_name(column_name)
        column_names.append(column_name)
    return column_names
