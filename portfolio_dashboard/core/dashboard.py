"""Refresh controller owning the dashboard's current snapshot."""
import asyncio
import logging
from datetime import datetime
from typing import Callable

from portfolio_dashboard.core.config import Config
from portfolio_dashboard.core.event_bus import EventBus
from portfolio_dashboard.core import metrics
from portfolio_dashboard.models import (
    CandidateFailure,
    DashboardSnapshot,
    Event,
    EventType,
    FailureKind,
    PortfolioInfo,
    RefreshError,
    SheetLayout,
)
from portfolio_dashboard.sheets import fallback
from portfolio_dashboard.sheets.parsers import EmptyResultError, parse_extended_sheet, parse_simple_sheet
from portfolio_dashboard.sources.resolver import ResolutionExhausted, SourceResolver

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Cannot load the portfolio sheet; showing example data."


class PortfolioDashboard:
    """Turns the published sheet into dashboard snapshots.

    Responsibilities:
    1. Resolve the sheet text through the configured sources
    2. Parse it with the configured layout
    3. Compute metrics, table rows and allocation
    4. Replace the current snapshot and notify subscribers

    A refresh never raises for fetch or empty-sheet failures; it falls
    back to example data and records the failure on the snapshot.
    """

    def __init__(
        self,
        config: Config,
        resolver: SourceResolver | None = None,
        event_bus: EventBus | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the dashboard.

        Args:
            config: System configuration
            resolver: Source resolver (built from config.source if omitted)
            event_bus: Bus for refresh notifications
            clock: Timestamp source for refreshed_at
        """
        self.config = config
        self.layout = config.sheet.layout
        self.weight_unit = config.sheet.weight_unit
        self.resolver = resolver or SourceResolver(
            url=config.source.url,
            mirrors=config.source.mirrors,
            min_length=config.source.min_length,
            timeout_seconds=config.source.timeout_seconds,
        )
        self.event_bus = event_bus or EventBus()
        self._clock = clock
        self._running = False
        self._refreshing = False
        self._refresh_count = 0
        self._snapshot = DashboardSnapshot(layout=self.layout)

        logger.debug(
            "INIT: PortfolioDashboard initialized",
            extra={
                "extra_data": {
                    "action": "dashboard_init",
                    "layout": self.layout.value,
                    "weight_unit": self.weight_unit.value,
                    "candidates": len(self.resolver.candidates),
                }
            },
        )

    @property
    def snapshot(self) -> DashboardSnapshot:
        """The latest complete snapshot."""
        return self._snapshot

    @property
    def is_refreshing(self) -> bool:
        return self._refreshing

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def refresh_count(self) -> int:
        return self._refresh_count

    async def refresh(self) -> DashboardSnapshot:
        """Run one fetch, parse and aggregate cycle.

        Returns:
            The new snapshot, which is also stored as the current one
        """
        self._refreshing = True
        failures: tuple[CandidateFailure, ...] = ()
        try:
            resolution = await self.resolver.resolve()
            failures = resolution.failures
            snapshot = self._parse(resolution.text, resolution.url)
        except ResolutionExhausted as e:
            logger.warning(f"Sheet unavailable, using example data: {e}")
            snapshot = self._fallback(FailureKind.RESOLUTION_EXHAUSTED, tuple(e.failures))
        except EmptyResultError as e:
            logger.warning(f"Sheet yielded no holdings, using example data: {e}")
            snapshot = self._fallback(FailureKind.EMPTY_RESULT, failures)
        finally:
            self._refreshing = False

        self._snapshot = snapshot
        self._refresh_count += 1
        self._publish(snapshot)
        return snapshot

    def _parse(self, text: str, source_url: str) -> DashboardSnapshot:
        if self.layout is SheetLayout.SIMPLE:
            holdings = parse_simple_sheet(text)
            info = None
        else:
            sheet = parse_extended_sheet(text)
            holdings, info = sheet.holdings, sheet.info

        logger.info(f"Parsed {len(holdings)} active holdings from sheet")

        return self._build(
            holdings,
            info,
            refreshed_at=self._clock(),
            source_url=source_url,
            error=None,
        )

    def _fallback(self, kind: FailureKind, failures: tuple[CandidateFailure, ...]) -> DashboardSnapshot:
        if self.layout is SheetLayout.SIMPLE:
            holdings = fallback.simple_fallback()
            info = None
        else:
            sheet = fallback.extended_fallback()
            holdings, info = sheet.holdings, sheet.info

        return self._build(
            holdings,
            info,
            refreshed_at=self._snapshot.refreshed_at,
            source_url=None,
            error=RefreshError(kind=kind, message=FALLBACK_MESSAGE, failures=failures),
        )

    def _build(
        self,
        holdings: tuple,
        info: PortfolioInfo | None,
        refreshed_at: datetime | None,
        source_url: str | None,
        error: RefreshError | None,
    ) -> DashboardSnapshot:
        if self.layout is SheetLayout.SIMPLE:
            summary = metrics.simple_metrics(holdings)
        else:
            summary = metrics.extended_metrics(holdings, info or PortfolioInfo())

        rows = metrics.holding_rows(holdings, self.weight_unit)

        return DashboardSnapshot(
            layout=self.layout,
            holdings=holdings,
            info=info,
            metrics=summary,
            rows=tuple(rows),
            allocation=tuple(metrics.allocation(rows)),
            refreshed_at=refreshed_at,
            source_url=source_url,
            error=error,
        )

    def _publish(self, snapshot: DashboardSnapshot) -> None:
        event = Event(
            type=EventType.REFRESH_FAILED if snapshot.is_fallback else EventType.SNAPSHOT_REPLACED,
            timestamp=self._clock(),
            source=snapshot.source_url,
            payload={
                "positions": snapshot.position_count,
                "total_market_value": snapshot.metrics.total_market_value,
                "total_gain_loss": snapshot.metrics.total_gain_loss,
                "error": snapshot.error.kind.value if snapshot.error else None,
                "holdings": [row.holding.to_dict() for row in snapshot.rows],
            },
        )
        logger.debug(
            "EVENT: Refresh outcome published",
            extra={"extra_data": {"action": "refresh_published", **event.to_dict()}},
        )
        self.event_bus.publish(event)

    async def run(self, interval_seconds: float = 0.0, iterations: int | None = None) -> None:
        """Refresh repeatedly until stopped.

        Args:
            interval_seconds: Pause between refreshes (0 refreshes once)
            iterations: Stop after this many refreshes (None runs until stop())
        """
        self._running = True
        logger.info("Dashboard refresh loop started")

        completed = 0
        try:
            while self._running:
                await self.refresh()
                completed += 1

                if interval_seconds <= 0:
                    break
                if iterations is not None and completed >= iterations:
                    break
                if not self._running:
                    break

                logger.info(f"Next refresh in {interval_seconds}s")

                # Sleep in short steps so stop() takes effect promptly
                waited = 0.0
                while waited < interval_seconds and self._running:
                    step = min(1.0, interval_seconds - waited)
                    await asyncio.sleep(step)
                    waited += step

        except asyncio.CancelledError:
            logger.info("Dashboard refresh loop cancelled")
        finally:
            self._running = False
            logger.info("Dashboard refresh loop stopped")

    def stop(self) -> None:
        """Stop the refresh loop after the current cycle."""
        self._running = False
