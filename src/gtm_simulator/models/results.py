"""Result types — the contract between engine, aggregator, and API.

The engine emits raw numbers only. ``None`` is the sentinel for both an
unconverged monthly IRR and a payback month that was never reached;
string formatting (percent signs, thousands separators, "N/A") belongs to
``gtm_simulator.api.views``.
"""

from __future__ import annotations

from pydantic import BaseModel


# ═══════════════════════════════════════════════════════════════════════════
# Per-channel projection
# ═══════════════════════════════════════════════════════════════════════════

class CashFlowSeries(BaseModel):
    """Month-0 investment plus monthly net cash flows for one channel."""

    initial_investment: float
    """setup_costs + upfront months of opex (positive number)."""

    flows: list[float]
    """Length time_horizon + 1. flows[0] = −initial_investment,
    flows[m] = net cash flow of month m."""

    payback_month: int | None = None
    """First month where cumulative cash flow ≥ 0. None = not reached."""


class ProjectionResult(BaseModel):
    """Return metrics derived from one channel's CashFlowSeries."""

    irr: float
    """Annualised IRR as a fraction. 0.0 when the solver did not converge
    or the monthly rate overflows when compounded to a year."""

    irr_monthly: float | None = None
    """Raw monthly rate from the solver. None = no root found by Newton-Raphson."""

    payback_month: int | None = None
    """First month where cumulative cash flow ≥ 0. None = not reached in horizon."""

    net_cash_flow: float
    """Sum of all flows including the month-0 investment."""

    roi_multiple: float
    """Sum of positive flows ÷ initial investment, 2 d.p. 0 if nothing was invested."""

    initial_investment: float

    cash_flows: list[float]

    @property
    def irr_percent(self) -> float:
        """Annual IRR in percent, 2 d.p."""
        return round(self.irr * 100, 2)


# ═══════════════════════════════════════════════════════════════════════════
# Scenario-level aggregates
# ═══════════════════════════════════════════════════════════════════════════

class ScenarioSummary(BaseModel):
    """Cross-channel headline figures for one deterministic run."""

    best_irr_channel: str | None = None
    """Channel with the highest annual IRR (first one wins on ties)."""

    fastest_payback_month: int | None = None
    """Earliest reached payback across channels. None if no channel paid back."""

    highest_roi_multiple: float = 0.0


class MonteCarloStats(BaseModel):
    """Distribution of annual IRR (in percent) over N jittered trials.

    Percentiles are picked by truncating index into the sorted samples,
    not interpolated.
    """

    iterations: int
    min: float
    p5: float
    p50: float
    p95: float
    max: float
    mean: float


class ScenarioResult(BaseModel):
    """Complete output of one scenario run."""

    summary: ScenarioSummary
    channels: dict[str, ProjectionResult]

    monte_carlo: dict[str, MonteCarloStats] | None = None
    """Per-channel IRR distribution. None unless Monte Carlo was requested."""
