"""Portfolio metrics derived from parsed holdings.

Every function here is pure and recomputes from the full holdings
sequence; nothing is patched incrementally.
"""
import logging
from typing import Sequence

from portfolio_dashboard.models import (
    AllocationSlice,
    ExtendedHolding,
    Holding,
    HoldingRow,
    PortfolioInfo,
    PortfolioMetrics,
    WeightUnit,
)

logger = logging.getLogger(__name__)


def _return_pct(gain_loss: float, invested: float) -> float:
    if invested <= 0:
        return 0.0
    return gain_loss / invested * 100


def simple_metrics(holdings: Sequence[Holding]) -> PortfolioMetrics:
    """Aggregate the five-column layout.

    Invested capital is the sum of each holding's cost basis.
    """
    total_market_value = sum(h.market_value for h in holdings)
    total_invested = sum(h.cost_basis for h in holdings)
    total_gain_loss = sum(h.gain_loss for h in holdings)

    return PortfolioMetrics(
        total_market_value=total_market_value,
        total_invested=total_invested,
        total_gain_loss=total_gain_loss,
        overall_return_pct=_return_pct(total_gain_loss, total_invested),
    )


def extended_metrics(holdings: Sequence[ExtendedHolding], info: PortfolioInfo) -> PortfolioMetrics:
    """Aggregate the tracking layout.

    Invested capital is backed out of the sheet's current size and the
    summed gain/loss column rather than summed per row.
    """
    total_market_value = sum(h.market_value for h in holdings)
    total_gain_loss = sum(h.gain_loss_dollar for h in holdings)
    total_invested = info.current_size - total_gain_loss

    return PortfolioMetrics(
        total_market_value=total_market_value,
        total_invested=total_invested,
        total_gain_loss=total_gain_loss,
        overall_return_pct=_return_pct(total_gain_loss, total_invested),
    )


def display_weight(raw: float, unit: WeightUnit = WeightUnit.AUTO) -> float:
    """Convert a sheet weight to a percentage.

    AUTO treats values above 1 as percentages and anything else as a
    fraction. A fraction sheet holding a leveraged 1.5, or a percent
    sheet holding a position of 1% or less, is misread under AUTO;
    configure an explicit unit for such sheets.
    """
    if unit is WeightUnit.PERCENT:
        return raw
    if unit is WeightUnit.FRACTION:
        return raw * 100
    return raw if raw > 1 else raw * 100


def simple_weights(holdings: Sequence[Holding]) -> list[float]:
    """Each holding's share of total market value, in percent."""
    total = sum(h.market_value for h in holdings)
    if total == 0:
        return [0.0 for _ in holdings]
    return [h.market_value / total * 100 for h in holdings]


def rank_by_market_value(holdings: Sequence[Holding | ExtendedHolding]) -> list[Holding | ExtendedHolding]:
    """Sorted copy, largest position first."""
    return sorted(holdings, key=lambda h: h.market_value, reverse=True)


def holding_rows(
    holdings: Sequence[Holding | ExtendedHolding],
    unit: WeightUnit = WeightUnit.AUTO,
) -> list[HoldingRow]:
    """Table rows ordered by market value, each with its display weight.

    Five-column holdings are weighted by market value; tracking-sheet
    holdings use their weight column.
    """
    ranked = rank_by_market_value(holdings)
    if ranked and all(isinstance(h, Holding) for h in ranked):
        weights = simple_weights(ranked)
    else:
        weights = [display_weight(h.weight, unit) for h in ranked]
    return [HoldingRow(holding=h, display_weight=w) for h, w in zip(ranked, weights)]


def allocation(rows: Sequence[HoldingRow], top: int | None = None) -> list[AllocationSlice]:
    """Allocation chart slices, largest first.

    Args:
        rows: Rows as returned by holding_rows
        top: Keep only the largest N slices (None keeps all)
    """
    slices = [
        AllocationSlice(
            symbol=row.holding.symbol,
            value=row.holding.market_value,
            weight_pct=row.display_weight,
        )
        for row in rows
    ]
    slices.sort(key=lambda s: s.value, reverse=True)
    if top is not None:
        slices = slices[:top]
    return slices
