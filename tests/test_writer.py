"""Tests for rendering tables as delimited text."""

import math
from datetime import date, datetime, timedelta, timezone

import pytest

import loosecsv
from loosecsv import COMMA, TAB, Table, render, render_bytes, render_rows


def _render_cell(value, delimiter=TAB):
    return render_rows([[value]], ["one"], True, delimiter)


class TestRenderRowsErrors:
    """Tests for input checks in render_rows()."""

    def test_matching_field_count(self):
        render_rows([["a", "b", "c"]], ["one", "two", "three"], False)

    def test_row_with_fewer_fields(self):
        rows = [["a", "b", "c"], ["a", "b"]]
        with pytest.raises(ValueError, match="same number of fields"):
            render_rows(rows, ["one", "two", "three"], False)

    def test_row_with_more_fields(self):
        rows = [["a", "b", "c"], ["a", "b", "c", "d"]]
        with pytest.raises(ValueError, match="same number of fields"):
            render_rows(rows, ["one", "two", "three"], False)

    def test_empty_field_names(self):
        with pytest.raises(ValueError, match="at least one element"):
            render_rows([], [], False)

    @pytest.mark.parametrize("delimiter", [";", "|", ""])
    def test_unsupported_delimiter(self, delimiter):
        with pytest.raises(ValueError):
            render_rows([["a"]], ["one"], True, delimiter)

    def test_rows_may_be_a_generator(self):
        rows = (["a", "b"] for _ in range(2))
        assert render_rows(rows, ["one", "two"]) == "one\ttwo\r\na\tb\r\na\tb\r\n"


class TestRenderRows:
    """Tests for the layout of render_rows() output."""

    def test_no_rows_no_header(self):
        assert render_rows([], ["one", "two", "three"], False) == ""

    def test_no_rows_with_header(self):
        assert render_rows([], ["one", "two", "three"], True) == "one\ttwo\tthree\r\n"

    def test_one_column_one_row(self):
        assert render_rows([["a"]], ["one"]) == "one\r\na\r\n"

    def test_two_columns_one_row(self):
        assert render_rows([["a", "b"]], ["one", "two"]) == "one\ttwo\r\na\tb\r\n"

    def test_one_column_two_rows(self):
        assert render_rows([["a"], ["b"]], ["one"]) == "one\r\na\r\nb\r\n"

    def test_two_columns_two_rows(self):
        rows = [["a", "b"], ["c", "d"]]
        assert render_rows(rows, ["one", "two"]) == "one\ttwo\r\na\tb\r\nc\td\r\n"

    def test_comma_delimiter(self):
        rows = [["a", "b"], ["c", "d"]]
        assert render_rows(rows, ["one", "two"], True, COMMA) == "one,two\r\na,b\r\nc,d\r\n"

    def test_delimiter_as_plain_string(self):
        assert render_rows([["a", "b"]], ["one", "two"], True, ",") == "one,two\r\na,b\r\n"

    def test_without_header(self):
        assert render_rows([["a", "b"]], ["one", "two"], False) == "a\tb\r\n"


class TestHeadings:
    """Tests for rendering the header row."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("One", "One"),
            ("One Two", "One Two"),
            (" One", "One"),
            ("One ", "One"),
            ("One!@#$%^&*()_+", "One!@#$%^&*()_+"),
            ('One"', '"One"""'),
            ("One😀", "One😀"),
        ],
    )
    def test_heading(self, name, expected):
        assert render_rows([], [name]) == expected + "\r\n"

    def test_comma_in_heading_with_comma_delimiter(self):
        assert render_rows([], ["One,"], True, COMMA) == '"One,"\r\n'

    def test_comma_in_heading_with_tab_delimiter(self):
        assert render_rows([], ["One,"], True, TAB) == "One,\r\n"

    def test_tab_in_heading_with_tab_delimiter(self):
        assert render_rows([], ["One\tTwo"], True, TAB) == '"One\tTwo"\r\n'

    def test_row_delimiters_in_heading(self):
        expected = '"One\rTwo\nThree\r\nFour"\r\n'
        assert render_rows([], ["One\rTwo\nThree\r\nFour"]) == expected


class TestTextCells:
    """Tests for rendering text values."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("One", "One"),
            ("One Two", "One Two"),
            (" One", " One"),
            ("One ", "One "),
            ("One!@#$%^&*()_+", "One!@#$%^&*()_+"),
            ('One"', '"One"""'),
            ("One😀", "One😀"),
            ("", ""),
        ],
    )
    def test_text(self, value, expected):
        assert _render_cell(value) == f"one\r\n{expected}\r\n"

    def test_comma_with_comma_delimiter(self):
        assert _render_cell("One,", COMMA) == 'one\r\n"One,"\r\n'

    def test_tab_with_tab_delimiter(self):
        assert _render_cell("One\tTwo", TAB) == 'one\r\n"One\tTwo"\r\n'

    def test_row_delimiters(self):
        expected = 'one\r\n"One\rTwo\nThree\r\nFour"\r\n'
        assert _render_cell("One\rTwo\nThree\r\nFour") == expected

    def test_embedded_quotes(self):
        assert _render_cell('The "big" dog', COMMA) == 'one\r\n"The ""big"" dog"\r\n'


class TestScalarCells:
    """Tests for rendering numbers, booleans, nulls and timestamps."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (123, "123"),
            (-123, "-123"),
            (123.0, "123"),
            (123.456, "123.456"),
            (-123.456, "-123.456"),
            (math.inf, "Infinity"),
            (-math.inf, "-Infinity"),
            (math.nan, "NaN"),
        ],
    )
    def test_numbers(self, value, expected):
        assert _render_cell(value) == f"one\r\n{expected}\r\n"

    def test_true(self):
        assert _render_cell(True) == "one\r\ntrue\r\n"

    def test_false(self):
        assert _render_cell(False) == "one\r\nfalse\r\n"

    def test_none_is_empty(self):
        assert _render_cell(None) == "one\r\n\r\n"

    def test_timestamp(self):
        value = datetime(2021, 8, 1, 1, 23, tzinfo=timezone(timedelta(hours=-7)))
        assert _render_cell(value) == "one\r\n2021-08-01T08:23:00.000Z\r\n"

    def test_utc_timestamp(self):
        value = datetime(2021, 8, 1, 8, 23, tzinfo=timezone.utc)
        assert _render_cell(value) == "one\r\n2021-08-01T08:23:00.000Z\r\n"

    def test_date(self):
        assert _render_cell(date(2021, 8, 1)) == "one\r\n2021-08-01T00:00:00.000Z\r\n"

    def test_timestamp_beyond_utc_range(self):
        value = datetime(9999, 12, 31, 23, tzinfo=timezone(timedelta(hours=-5)))
        assert render(Table(["w"], [[value]])) == "w\r\n9999-12-31T23:00:00.000-05:00\r\n"

    def test_other_objects_use_str(self):
        class Point:
            def __str__(self):
                return "1,2"

        assert _render_cell(Point(), COMMA) == 'one\r\n"1,2"\r\n'


class TestRender:
    """Tests for render() and render_bytes() on tables."""

    def test_render_table(self):
        table = Table(["one", "two"], [["a", "b"], ["c", "d"]])
        assert render(table, True, COMMA) == "one,two\r\na,b\r\nc,d\r\n"

    def test_default_is_tab_with_header(self):
        table = Table(["one", "two"], [["a", 1.0]])
        assert render(table) == "one\ttwo\r\na\t1\r\n"

    def test_table_without_columns(self):
        with pytest.raises(ValueError):
            render(Table([]))

    def test_bytes_have_no_bom(self):
        table = Table(["one"], [["a"]])
        assert render_bytes(table) == bytes([111, 110, 101, 13, 10, 97, 13, 10])

    def test_ascii_bytes_are_single_byte(self):
        table = Table(["one"], [["a"]])
        assert all(byte < 128 for byte in render_bytes(table))

    def test_non_ascii_bytes(self):
        table = Table(["one"], [["😀"]])
        expected = bytes([111, 110, 101, 13, 10, 240, 159, 152, 128, 13, 10])
        assert render_bytes(table) == expected

    def test_render_rows_logs(self, caplog):
        with caplog.at_level("DEBUG", logger="loosecsv.writer"):
            render_rows([["a"]], ["one"])
        assert "Rendered 1 rows x 1 columns" in caplog.text

    def test_exported_names(self):
        assert loosecsv.ROW_DELIMITER == "\r\n"
