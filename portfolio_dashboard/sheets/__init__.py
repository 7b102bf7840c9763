"""Sheet layouts, parsers and fallback data."""

from portfolio_dashboard.sheets.parsers import (
    EmptyResultError,
    ExtendedSheet,
    MalformedSheetError,
    parse_extended_sheet,
    parse_simple_sheet,
)
from portfolio_dashboard.sheets.schema import parse_number

__all__ = [
    "EmptyResultError",
    "ExtendedSheet",
    "MalformedSheetError",
    "parse_extended_sheet",
    "parse_simple_sheet",
    "parse_number",
]
