"""Holding models for the portfolio dashboard."""
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any


class WeightUnit(Enum):
    """How the sheet's weight column is scaled."""
    AUTO = "auto"          # > 1 means percent, otherwise a fraction
    FRACTION = "fraction"  # 0.117 == 11.7%
    PERCENT = "percent"    # 11.7 == 11.7%


@dataclass(frozen=True)
class Holding:
    """Position from the five-column sheet layout."""
    symbol: str
    shares: float
    buy_price: float
    buy_date: str
    current_price: float

    @property
    def market_value(self) -> float:
        return self.shares * self.current_price

    @property
    def cost_basis(self) -> float:
        return self.shares * self.buy_price

    @property
    def gain_loss(self) -> float:
        return self.market_value - self.cost_basis

    @property
    def return_pct(self) -> float:
        """Gain/loss as a percentage of cost basis (0 when there is no cost)."""
        if self.cost_basis == 0:
            return 0.0
        return self.gain_loss / self.cost_basis * 100

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, including derived figures."""
        d = asdict(self)
        d["market_value"] = self.market_value
        d["cost_basis"] = self.cost_basis
        d["gain_loss"] = self.gain_loss
        d["return_pct"] = self.return_pct
        return d


@dataclass(frozen=True)
class ExtendedHolding:
    """Position from the tracking sheet layout.

    Gain/loss figures come straight from the sheet; only market value
    is derived here.
    """
    symbol: str
    buy_date: str
    quantity: float
    buy_price: float
    stop_loss: float
    curr_price: float
    gain_loss_dollar: float
    gain_loss_percent: float
    sell_date: str
    sell_price: float
    risk_stock: float
    risk_account: float
    weight: float          # raw sheet value, see WeightUnit

    @property
    def market_value(self) -> float:
        return self.quantity * self.curr_price

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, including market value."""
        d = asdict(self)
        d["market_value"] = self.market_value
        return d


@dataclass(frozen=True)
class PortfolioInfo:
    """Whole-portfolio totals from the tracking sheet."""
    starting_size: float = 0.0
    current_size: float = 0.0
    monthly_pl: float = 0.0
    monthly_pl_percent: float = 0.0
    current_month: str = ""
