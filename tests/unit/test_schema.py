"""Tests for column schemas and cell converters."""
import pytest


@pytest.mark.parametrize("text,expected", [
    ("195.5", 195.5),
    ("  42 ", 42.0),
    ("-3", -3.0),
    ("+7", 7.0),
    (".5", 0.5),
    ("1e3", 1000.0),
    ("8.61%", 8.61),
    ("12abc", 12.0),
])
def test_parse_number_reads_leading_number(text, expected):
    from portfolio_dashboard.sheets.schema import parse_number

    assert parse_number(text) == expected


@pytest.mark.parametrize("text", ["", None, "abc", "n/a", "nan", "-", "$195.50"])
def test_parse_number_defaults_to_zero(text):
    from portfolio_dashboard.sheets.schema import parse_number

    assert parse_number(text) == 0.0


def test_parse_text_trims_and_handles_missing():
    from portfolio_dashboard.sheets.schema import parse_text

    assert parse_text("  AAPL ") == "AAPL"
    assert parse_text(None) == ""


def test_column_out_of_range_uses_converter_default():
    from portfolio_dashboard.sheets.schema import Column, parse_number, parse_text

    row = ["AAPL", "50"]

    assert Column("weight", 12, parse_number).read(row) == 0.0
    assert Column("sell_date", 8, parse_text).read(row) == ""


def test_read_row_maps_names():
    from portfolio_dashboard.sheets.schema import SIMPLE_COLUMNS, read_row

    fields = read_row(SIMPLE_COLUMNS, ["AAPL", "50", "180", "2024-12-01", "195.5"])

    assert fields == {
        "symbol": "AAPL",
        "shares": 50.0,
        "buy_price": 180.0,
        "buy_date": "2024-12-01",
        "current_price": 195.5,
    }


def test_portfolio_info_columns_offsets():
    from portfolio_dashboard.sheets.schema import PORTFOLIO_INFO_COLUMNS

    offsets = {c.name: c.index for c in PORTFOLIO_INFO_COLUMNS}

    assert offsets == {
        "starting_size": 18,
        "current_size": 19,
        "current_month": 21,
        "monthly_pl": 22,
        "monthly_pl_percent": 23,
    }


def test_extended_columns_cover_a_to_m():
    from portfolio_dashboard.sheets.schema import EXTENDED_COLUMNS

    assert [c.index for c in EXTENDED_COLUMNS] == list(range(13))
