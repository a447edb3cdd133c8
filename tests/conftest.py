"""Pytest configuration for loosecsv tests."""

import pytest


@pytest.fixture
def simple_csv():
    """Comma-delimited text with a header row."""
    return "name,age,city\nAlice,30,New York\nBob,25,Los Angeles\nCharlie,35,Chicago\n"


@pytest.fixture
def tsv_text():
    """Tab-delimited text with a header row and CRLF rows."""
    return "name\tage\tcity\r\nAlice\t30\tNew York\r\nBob\t25\tLos Angeles\r\n"


@pytest.fixture
def no_header_csv():
    """Comma-delimited text without a header row."""
    return "Alice,30,New York\nBob,25,Los Angeles\nCharlie,35,Chicago\n"
