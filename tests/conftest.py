"""Shared sheet fixtures."""
import pytest

from tests.sheet_samples import EXTENDED_HEADER, SIMPLE_HEADER, make_extended_row


@pytest.fixture
def simple_csv():
    """Three-row simple sheet (one row has no shares)."""
    return "\n".join([
        SIMPLE_HEADER,
        "AAPL,50,180,2024-12-01,195.5",
        "MSFT,10,400,2024-11-01,420",
        "TSLA,0,250,2024-10-01,240",
        "",
    ])


@pytest.fixture
def extended_csv():
    """Tracking sheet with two open positions and one closed one."""
    return "\n".join([
        EXTENDED_HEADER,
        make_extended_row(totals=("100000", "105000", "1.1.26", "5000", "5")),
        make_extended_row(
            symbol="MSFT", quantity="10", buy_price="400", curr_price="420",
            gain_loss_dollar="200", gain_loss_percent="5", weight="0.04",
        ),
        make_extended_row(
            symbol="TSLA", quantity="5", sell_date="2025-01-15", sell_price="260",
            gain_loss_dollar="50", weight="0",
        ),
        "",
    ])


@pytest.fixture
def extended_row():
    return make_extended_row
