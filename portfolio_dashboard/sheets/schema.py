"""Named column schemas for the supported sheet layouts."""
import re
from dataclasses import dataclass
from typing import Any, Callable

_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(text: str | None) -> float:
    """Read the leading number from a cell, defaulting to 0.

    Trailing text is ignored ("12.5%" -> 12.5); cells that do not start
    with a number become 0.0 rather than raising.
    """
    if not text:
        return 0.0
    match = _NUMBER_PREFIX.match(text.strip())
    if not match:
        return 0.0
    return float(match.group(0))


def parse_text(text: str | None) -> str:
    return (text or "").strip()


@dataclass(frozen=True)
class Column:
    """Maps a field name to a cell position and converter."""
    name: str
    index: int
    convert: Callable[[str | None], Any]

    def read(self, row: list[str]) -> Any:
        """Convert this column's cell; missing cells convert as empty."""
        cell = row[self.index] if 0 <= self.index < len(row) else None
        return self.convert(cell)


def read_row(columns: tuple[Column, ...], row: list[str]) -> dict[str, Any]:
    """Read every column of a schema from a row into a dict."""
    return {column.name: column.read(row) for column in columns}


# Symbol,Shares,BuyPrice,BuyDate,CurrentPrice
SIMPLE_COLUMNS = (
    Column("symbol", 0, parse_text),
    Column("shares", 1, parse_number),
    Column("buy_price", 2, parse_number),
    Column("buy_date", 3, parse_text),
    Column("current_price", 4, parse_number),
)

# Tracking sheet, columns A-M
EXTENDED_COLUMNS = (
    Column("symbol", 0, parse_text),
    Column("buy_date", 1, parse_text),
    Column("quantity", 2, parse_number),
    Column("buy_price", 3, parse_number),
    Column("stop_loss", 4, parse_number),
    Column("curr_price", 5, parse_number),
    Column("gain_loss_dollar", 6, parse_number),
    Column("gain_loss_percent", 7, parse_number),
    Column("sell_date", 8, parse_text),
    Column("sell_price", 9, parse_number),
    Column("risk_stock", 10, parse_number),
    Column("risk_account", 11, parse_number),
    Column("weight", 12, parse_number),
)

# Portfolio totals, second line only (S2, T2, V2, W2, X2)
PORTFOLIO_INFO_COLUMNS = (
    Column("starting_size", 18, parse_number),
    Column("current_size", 19, parse_number),
    Column("current_month", 21, parse_text),
    Column("monthly_pl", 22, parse_number),
    Column("monthly_pl_percent", 23, parse_number),
)
