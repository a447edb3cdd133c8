"""The Table returned by parse() and accepted by render()."""

from collections.abc import Iterable, Iterator, Sequence
from datetime import datetime
from typing import Any

from loosecsv.values import FieldValue, format_scalar


class Table:
    """Column names plus rows of typed values.

    Every row holds one value per column name. Values are None, str, float,
    bool or datetime. Column names are not required to be unique.

    The table implements the Arrow PyCapsule interface, so it can be handed
    directly to PyArrow, Polars and other Arrow-compatible libraries when
    pyarrow is installed.

    Parameters
    ----------
    column_names : sequence of str
        Name of each column.
    rows : iterable of sequences, optional
        Body rows, not including a header row.

    Raises
    ------
    ValueError
        If a row's length differs from the number of column names.

    Examples
    --------
    >>> table = Table(["name", "age"], [["Alice", 30.0], ["Bob", None]])
    >>> table.num_rows, table.num_columns
    (2, 2)
    >>> table.column("age")
    [30.0, None]
    """

    def __init__(
        self,
        column_names: Sequence[str],
        rows: Iterable[Sequence[FieldValue]] = (),
    ):
        self._column_names = list(column_names)
        self._rows = [list(row) for row in rows]
        width = len(self._column_names)
        for row_i, row in enumerate(self._rows):
            if len(row) != width:
                raise ValueError(
                    f"Row {row_i} has {len(row)} values but there are "
                    f"{width} column names."
                )

    @property
    def column_names(self) -> list[str]:
        """List of column names."""
        return list(self._column_names)

    @property
    def rows(self) -> list[list[FieldValue]]:
        """Body rows."""
        return self._rows

    @property
    def num_rows(self) -> int:
        """Number of body rows."""
        return len(self._rows)

    @property
    def num_columns(self) -> int:
        """Number of columns."""
        return len(self._column_names)

    def _column_index(self, index_or_name: int | str) -> int:
        if isinstance(index_or_name, str):
            try:
                return self._column_names.index(index_or_name)
            except ValueError:
                raise KeyError(index_or_name) from None
        if not -self.num_columns <= index_or_name < self.num_columns:
            raise IndexError(f"Column index {index_or_name} out of range")
        return index_or_name

    def column(self, index_or_name: int | str) -> list[FieldValue]:
        """Get a column's values by index or by name.

        With duplicate names, the first matching column is returned.
        """
        column_i = self._column_index(index_or_name)
        return [row[column_i] for row in self._rows]

    def row(self, index: int) -> list[FieldValue]:
        """Get a body row by index."""
        return list(self._rows[index])

    def row_dict(self, index: int) -> dict[str, FieldValue]:
        """Get a body row as a mapping of column name to value."""
        return dict(zip(self._column_names, self._rows[index]))

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[list[FieldValue]]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return (
            self._column_names == other._column_names
            and self._rows == other._rows
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Table(num_rows={self.num_rows}, num_columns={self.num_columns}, "
            f"column_names={self._column_names!r})"
        )

    def to_arrow(self) -> Any:
        """Convert to a ``pyarrow.Table``.

        Columns holding a single kind of value keep their type: str becomes
        string, float double, bool boolean and datetime ``timestamp[us,
        tz=UTC]``. Columns mixing kinds are rendered to strings the way
        render() writes them. Nulls stay null.

        Raises
        ------
        ImportError
            If pyarrow is not installed.
        """
        try:
            import pyarrow as pa
        except ImportError as exc:
            raise ImportError(
                "Table.to_arrow() requires pyarrow. "
                "Install it with: pip install 'loosecsv[arrow]'"
            ) from exc

        arrow_types = {
            str: pa.string(),
            float: pa.float64(),
            int: pa.int64(),
            bool: pa.bool_(),
            datetime: pa.timestamp("us", tz="UTC"),
        }
        arrays = []
        for column_i in range(self.num_columns):
            values = [row[column_i] for row in self._rows]
            kinds = {type(value) for value in values if value is not None}
            if not kinds:
                arrays.append(pa.array(values, type=pa.null()))
            elif len(kinds) == 1 and next(iter(kinds)) in arrow_types:
                arrays.append(pa.array(values, type=arrow_types[kinds.pop()]))
            else:
                arrays.append(
                    pa.array(
                        [None if v is None else format_scalar(v) for v in values],
                        type=pa.string(),
                    )
                )
        return pa.Table.from_arrays(arrays, names=self._column_names)

    def __arrow_c_schema__(self) -> Any:
        """Export the table schema via the Arrow C Data Interface."""
        return self.to_arrow().schema.__arrow_c_schema__()

    def __arrow_c_stream__(self, requested_schema: Any = None) -> Any:
        """Export the table data via the Arrow C Stream Interface."""
        return self.to_arrow().__arrow_c_stream__(requested_schema)
