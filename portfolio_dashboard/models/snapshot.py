"""Dashboard state models."""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from portfolio_dashboard.models.holdings import Holding, ExtendedHolding, PortfolioInfo


class SheetLayout(Enum):
    """Column layout of the published sheet."""
    SIMPLE = "simple"
    EXTENDED = "extended"


class FailureKind(Enum):
    """Refresh failures that reach the presentation layer."""
    RESOLUTION_EXHAUSTED = "resolution_exhausted"
    EMPTY_RESULT = "empty_result"


@dataclass(frozen=True)
class CandidateFailure:
    """Why a single source candidate was skipped."""
    url: str
    reason: str


@dataclass(frozen=True)
class RefreshError:
    """Failure attached to a snapshot built from fallback data."""
    kind: FailureKind
    message: str
    failures: tuple[CandidateFailure, ...] = ()


@dataclass(frozen=True)
class PortfolioMetrics:
    """Portfolio-level figures derived from the holdings."""
    total_market_value: float = 0.0
    total_invested: float = 0.0
    total_gain_loss: float = 0.0
    overall_return_pct: float = 0.0


@dataclass(frozen=True)
class AllocationSlice:
    """One slice of the allocation chart."""
    symbol: str
    value: float
    weight_pct: float


@dataclass(frozen=True)
class HoldingRow:
    """Holding paired with the weight shown next to it."""
    holding: Holding | ExtendedHolding
    display_weight: float


@dataclass(frozen=True)
class DashboardSnapshot:
    """Everything the presentation layer reads after a refresh.

    Snapshots are never modified; each refresh builds a new one.
    """
    layout: SheetLayout
    holdings: tuple[Holding | ExtendedHolding, ...] = ()
    info: PortfolioInfo | None = None
    metrics: PortfolioMetrics = field(default_factory=PortfolioMetrics)
    rows: tuple[HoldingRow, ...] = ()
    allocation: tuple[AllocationSlice, ...] = ()
    refreshed_at: datetime | None = None
    source_url: str | None = None
    error: RefreshError | None = None

    @property
    def is_fallback(self) -> bool:
        """True when the holdings are the built-in example data."""
        return self.error is not None

    @property
    def position_count(self) -> int:
        return len(self.holdings)
