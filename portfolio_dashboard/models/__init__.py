"""Data models for the portfolio dashboard."""

from portfolio_dashboard.models.events import Event, EventType
from portfolio_dashboard.models.holdings import Holding, ExtendedHolding, PortfolioInfo, WeightUnit
from portfolio_dashboard.models.snapshot import (
    AllocationSlice,
    CandidateFailure,
    DashboardSnapshot,
    FailureKind,
    HoldingRow,
    PortfolioMetrics,
    RefreshError,
    SheetLayout,
)

__all__ = [
    "Event",
    "EventType",
    "Holding",
    "ExtendedHolding",
    "PortfolioInfo",
    "WeightUnit",
    "AllocationSlice",
    "CandidateFailure",
    "DashboardSnapshot",
    "FailureKind",
    "HoldingRow",
    "PortfolioMetrics",
    "RefreshError",
    "SheetLayout",
]
