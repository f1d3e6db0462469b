"""Shared test fixtures — channel assumptions matching scenarios/channels.yaml."""

from __future__ import annotations

import pytest

from gtm_simulator.config import (
    ChannelParameters,
    ScenarioConfig,
    default_channel_table,
)
from gtm_simulator.models.results import ProjectionResult


@pytest.fixture
def direct_channel() -> ChannelParameters:
    return ChannelParameters(
        leads_per_month=300,
        conversion_rate=20,
        unit_margin=700,
        cac=300,
        opex_monthly=15_000,
        setup_costs=30_000,
        ramp_months=4,
        revenue_delay=2,
        time_horizon=24,
    )


@pytest.fixture
def contractor_channel() -> ChannelParameters:
    return ChannelParameters(
        is_contractor=True,
        contractor_count=50,
        leads_per_month=5,
        conversion_rate=30,
        unit_margin=600,
        cac=500,
        opex_monthly=7_500,
        setup_costs=15_000,
        ramp_months=4,
        revenue_delay=2,
        time_horizon=24,
    )


@pytest.fixture
def channel_table() -> dict[str, ChannelParameters]:
    return default_channel_table()


@pytest.fixture
def mc_config() -> ScenarioConfig:
    """Small, seeded Monte-Carlo run for fast reproducible tests."""
    return ScenarioConfig(
        time_horizon=24,
        run_monte_carlo=True,
        monte_carlo_iterations=200,
        random_seed=1234,
    )


@pytest.fixture
def make_result():
    """Factory for minimal ProjectionResults (summary tests)."""

    def _make(irr: float, payback: int | None, roi: float) -> ProjectionResult:
        return ProjectionResult(
            irr=irr,
            irr_monthly=None,
            payback_month=payback,
            net_cash_flow=0.0,
            roi_multiple=roi,
            initial_investment=1_000.0,
            cash_flows=[-1_000.0],
        )

    return _make
