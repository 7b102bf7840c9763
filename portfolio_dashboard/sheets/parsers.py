"""Parsers turning the sheet's CSV export into holdings."""
import csv
import io
import logging
from dataclasses import dataclass

from portfolio_dashboard.models import Holding, ExtendedHolding, PortfolioInfo
from portfolio_dashboard.sheets.schema import (
    EXTENDED_COLUMNS,
    PORTFOLIO_INFO_COLUMNS,
    SIMPLE_COLUMNS,
    read_row,
)

logger = logging.getLogger(__name__)


class EmptyResultError(ValueError):
    """Raised when a sheet yields no active positions."""

    pass


class MalformedSheetError(EmptyResultError):
    """Raised when the CSV text cannot be split into rows at all."""

    pass


@dataclass(frozen=True)
class ExtendedSheet:
    """Active positions and portfolio totals from the tracking sheet."""
    holdings: tuple[ExtendedHolding, ...]
    info: PortfolioInfo


def split_rows(text: str) -> list[list[str]]:
    """Split CSV text into rows, honouring quoted fields.

    Raises:
        MalformedSheetError: If the reader rejects the text, e.g. an
            unterminated quote swallowing a cell past the field size limit
    """
    try:
        return list(csv.reader(io.StringIO(text)))
    except csv.Error as e:
        logger.warning(f"Sheet text is not readable CSV: {e}")
        raise MalformedSheetError(f"Sheet is not valid CSV: {e}") from e


def _is_blank(row: list[str]) -> bool:
    return not any(cell.strip() for cell in row)


def parse_simple_sheet(text: str) -> tuple[Holding, ...]:
    """Parse the five-column layout into holdings.

    Rows without a symbol or with zero or negative shares are dropped.

    Args:
        text: Raw CSV text; the first row is the header

    Returns:
        Tuple of Holding objects in sheet order

    Raises:
        EmptyResultError: If no row yields a holding
    """
    rows = split_rows(text)
    holdings: list[Holding] = []
    skipped = 0

    for row in rows[1:]:
        if _is_blank(row):
            continue

        fields = read_row(SIMPLE_COLUMNS, row)
        if not fields["symbol"] or fields["shares"] <= 0:
            skipped += 1
            continue

        holdings.append(Holding(**fields))

    logger.debug(
        "TRANSFORM: Simple sheet parsed",
        extra={
            "extra_data": {
                "action": "simple_sheet_parsed",
                "rows": max(len(rows) - 1, 0),
                "holdings": len(holdings),
                "skipped": skipped,
            }
        },
    )

    if not holdings:
        raise EmptyResultError("No holdings found in sheet")

    return tuple(holdings)


def parse_portfolio_info(rows: list[list[str]]) -> PortfolioInfo:
    """Read portfolio totals from the second row at fixed columns."""
    if len(rows) < 2:
        return PortfolioInfo()
    return PortfolioInfo(**read_row(PORTFOLIO_INFO_COLUMNS, rows[1]))


def parse_extended_sheet(text: str) -> ExtendedSheet:
    """Parse the tracking layout into active positions and totals.

    A row is kept only when it has a symbol, no sell date and a positive
    quantity. An empty result is valid for this layout.

    Args:
        text: Raw CSV text; the first row is the header

    Returns:
        ExtendedSheet with holdings in sheet order and the totals record

    Raises:
        MalformedSheetError: If the text is not readable CSV
    """
    rows = split_rows(text)
    info = parse_portfolio_info(rows)
    holdings: list[ExtendedHolding] = []
    closed = 0

    for row in rows[1:]:
        if _is_blank(row):
            continue

        fields = read_row(EXTENDED_COLUMNS, row)
        if not fields["symbol"] or fields["quantity"] <= 0:
            continue
        if fields["sell_date"]:
            closed += 1
            continue

        holdings.append(ExtendedHolding(**fields))

    logger.debug(
        "TRANSFORM: Extended sheet parsed",
        extra={
            "extra_data": {
                "action": "extended_sheet_parsed",
                "holdings": len(holdings),
                "closed": closed,
                "current_month": info.current_month,
            }
        },
    )

    return ExtendedSheet(holdings=tuple(holdings), info=info)
