"""Tests for models package exports."""
import pytest


def test_all_models_importable():
    from portfolio_dashboard.models import (
        Event,
        EventType,
        Holding,
        ExtendedHolding,
        PortfolioInfo,
        WeightUnit,
        AllocationSlice,
        CandidateFailure,
        DashboardSnapshot,
        FailureKind,
        HoldingRow,
        PortfolioMetrics,
        RefreshError,
        SheetLayout,
    )

    assert Event is not None
    assert EventType is not None
    assert Holding is not None
    assert ExtendedHolding is not None
    assert PortfolioInfo is not None
    assert WeightUnit is not None
    assert AllocationSlice is not None
    assert CandidateFailure is not None
    assert DashboardSnapshot is not None
    assert FailureKind is not None
    assert HoldingRow is not None
    assert PortfolioMetrics is not None
    assert RefreshError is not None
    assert SheetLayout is not None
