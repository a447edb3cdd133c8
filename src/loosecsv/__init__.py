"""
loosecsv: a forgiving CSV/TSV codec for spreadsheet data.

This package turns delimited text of unknown shape into a typed table and
back, featuring:
- Comma/tab delimiter detection
- Quoted fields with embedded delimiters, line breaks and doubled quotes
- Typed values: null, string, number, boolean and timestamp
- Spreadsheet-style column names when there is no header row
- Output that opens cleanly in common spreadsheet software

Basic Usage
-----------
>>> import loosecsv
>>> table = loosecsv.parse("name,age\\nAlice,30\\n")
>>> print(f"Loaded {table.num_rows} rows, {table.num_columns} columns")
Loaded 1 rows, 2 columns

Rendering
---------
>>> loosecsv.render(table, delimiter=loosecsv.Delimiter.COMMA)
'name,age\\r\\nAlice,30\\r\\n'

Dialect Detection
-----------------
>>> dialect = loosecsv.detect_dialect("a\\tb\\n1\\t2\\n")
>>> print(f"Delimiter: {dialect.delimiter!r}, Fields: {dialect.field_count}")
Delimiter: <Delimiter.TAB: '\\t'>, Fields: 2

Arrow Interoperability
----------------------
>>> import pyarrow as pa
>>> arrow_table = pa.table(loosecsv.parse(text))

>>> import polars as pl
>>> df = pl.from_arrow(loosecsv.parse(text).to_arrow())
"""

from loosecsv.columns import MAX_COLUMN_NAMES, generate_column_names
from loosecsv.dialect import (
    COMMA,
    SUFFICIENT_UNEQUAL_CHECK,
    TAB,
    Delimiter,
    Dialect,
    detect_dialect,
)
from loosecsv.errors import (
    CsvError,
    ErrorKind,
    FieldCountMismatchError,
    NoDataError,
    ParseError,
    TooManyFieldsError,
    UnstructuredDataError,
)
from loosecsv.reader import (
    MAX_FIELD_COUNT,
    MAX_FIELD_NAME_LENGTH,
    parse,
    parse_bytes,
    parse_text,
)
from loosecsv.table import Table
from loosecsv.values import FieldValue
from loosecsv.writer import ROW_DELIMITER, render, render_bytes, render_rows

# Version from setuptools-scm, with fallback to package metadata
try:
    from loosecsv._version import version as __version__
except ImportError:
    from importlib.metadata import version

    __version__ = version("loosecsv")


__all__ = [
    "COMMA",
    "CsvError",
    "Delimiter",
    "Dialect",
    "ErrorKind",
    "FieldCountMismatchError",
    "FieldValue",
    "MAX_COLUMN_NAMES",
    "MAX_FIELD_COUNT",
    "MAX_FIELD_NAME_LENGTH",
    "NoDataError",
    "ParseError",
    "ROW_DELIMITER",
    "SUFFICIENT_UNEQUAL_CHECK",
    "TAB",
    "Table",
    "TooManyFieldsError",
    "UnstructuredDataError",
    "detect_dialect",
    "generate_column_names",
    "parse",
    "parse_bytes",
    "parse_text",
    "render",
    "render_bytes",
    "render_rows",
    "__version__",
]
