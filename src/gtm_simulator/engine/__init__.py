"""Engine — IRR solver, cash-flow projector, and scenario aggregation."""

from gtm_simulator.engine.irr import annualize, compute_npv, solve_irr
from gtm_simulator.engine.projection import build_cash_flows, project
from gtm_simulator.engine.monte_carlo import (
    percentile_stats,
    perturb,
    run_channel_monte_carlo,
    run_monte_carlo,
)
from gtm_simulator.engine.aggregator import run_deterministic, run_scenario, summarize

__all__ = [
    "annualize",
    "compute_npv",
    "solve_irr",
    "build_cash_flows",
    "project",
    # Monte Carlo
    "percentile_stats",
    "perturb",
    "run_channel_monte_carlo",
    "run_monte_carlo",
    # Scenario
    "run_deterministic",
    "run_scenario",
    "summarize",
]
