"""Example data shown when the sheet cannot be loaded."""
from portfolio_dashboard.models import Holding, ExtendedHolding, PortfolioInfo
from portfolio_dashboard.sheets.parsers import ExtendedSheet


def simple_fallback() -> tuple[Holding, ...]:
    """Return the example holdings for the five-column layout."""
    return (
        Holding(symbol="AAPL", shares=50, buy_price=180.0, buy_date="2024-12-01", current_price=195.5),
        Holding(symbol="MSFT", shares=20, buy_price=410.0, buy_date="2024-11-15", current_price=425.0),
        Holding(symbol="NVDA", shares=30, buy_price=120.0, buy_date="2025-01-10", current_price=138.0),
    )


def extended_fallback() -> ExtendedSheet:
    """Return the example position and totals for the tracking layout."""
    holdings = (
        ExtendedHolding(
            symbol="AAPL",
            buy_date="2024-12-01",
            quantity=50,
            buy_price=180.0,
            stop_loss=170.0,
            curr_price=195.5,
            gain_loss_dollar=775.0,
            gain_loss_percent=8.61,
            sell_date="",
            sell_price=0.0,
            risk_stock=5.56,
            risk_account=2.78,
            weight=11.7,
        ),
    )
    info = PortfolioInfo(
        starting_size=100000.0,
        current_size=105000.0,
        monthly_pl=5000.0,
        monthly_pl_percent=5.0,
        current_month="1.1.26",
    )
    return ExtendedSheet(holdings=holdings, info=info)
