"""Scenario aggregator — run every channel, summarise, optionally sweep.

Entry point: ``run_scenario(channels, config)``
  - Deterministic pass: one projection per channel at the scenario horizon
  - Summary: best IRR channel, fastest reached payback, highest ROI
  - Monte Carlo (when ``config.run_monte_carlo``): IRR distribution per channel
"""

from __future__ import annotations

import logging

from gtm_simulator.config.channel import ChannelParameters
from gtm_simulator.config.scenario import ScenarioConfig
from gtm_simulator.engine.monte_carlo import run_monte_carlo
from gtm_simulator.engine.projection import UPFRONT_OPEX_MONTHS, project
from gtm_simulator.models.results import (
    ProjectionResult,
    ScenarioResult,
    ScenarioSummary,
)

logger = logging.getLogger(__name__)


def run_deterministic(
    channels: dict[str, ChannelParameters],
    time_horizon: int,
    upfront_opex_months: int = UPFRONT_OPEX_MONTHS,
) -> dict[str, ProjectionResult]:
    """Project every channel once, overriding its horizon with ``time_horizon``."""
    results: dict[str, ProjectionResult] = {}
    for name, params in channels.items():
        params = params.model_copy(update={"time_horizon": time_horizon})
        results[name] = project(params, upfront_opex_months)
        logger.debug(
            "%s: irr=%.4f payback=%s roi=%.2f",
            name, results[name].irr, results[name].payback_month, results[name].roi_multiple,
        )
    return results


def summarize(results: dict[str, ProjectionResult]) -> ScenarioSummary:
    """Cross-channel headline figures.

    Unreached paybacks (None) never count as the fastest; IRR ties go to
    the channel that appears first.
    """
    if not results:
        return ScenarioSummary()

    best_name: str | None = None
    best_irr = float("-inf")
    for name, res in results.items():
        if res.irr > best_irr:
            best_name, best_irr = name, res.irr

    reached = [r.payback_month for r in results.values() if r.payback_month is not None]

    return ScenarioSummary(
        best_irr_channel=best_name,
        fastest_payback_month=min(reached) if reached else None,
        highest_roi_multiple=max(r.roi_multiple for r in results.values()),
    )


def run_scenario(
    channels: dict[str, ChannelParameters],
    config: ScenarioConfig | None = None,
) -> ScenarioResult:
    """Deterministic run for all channels, plus Monte Carlo when requested."""
    if config is None:
        config = ScenarioConfig()

    logger.info(
        "Running %d channels over %d months (monte_carlo=%s)",
        len(channels), config.time_horizon, config.run_monte_carlo,
    )

    results = run_deterministic(channels, config.time_horizon, config.upfront_opex_months)
    summary = summarize(results)

    monte_carlo = run_monte_carlo(channels, config) if config.run_monte_carlo else None

    return ScenarioResult(summary=summary, channels=results, monte_carlo=monte_carlo)
