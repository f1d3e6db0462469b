"""Monte-Carlo IRR sweep — jittered channel inputs → IRR distribution.

Each trial copies the channel's parameters and scales four fields by an
independent whole-percent draw:

  leads_per_month  ±20%
  conversion_rate  ±20%
  unit_margin      ±10%
  cac              ±15%

The annual IRR (in percent) of every trial is collected, sorted, and
reduced to min / P5 / P50 / P95 / max / mean. Percentiles use the
truncated index ``int(n × q)`` into the sorted samples (no interpolation).
"""

from __future__ import annotations

import logging
import time

import numpy as np

from gtm_simulator.config.channel import ChannelParameters
from gtm_simulator.config.scenario import JitterConfig, ScenarioConfig
from gtm_simulator.engine.projection import UPFRONT_OPEX_MONTHS, project
from gtm_simulator.models.results import MonteCarloStats

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 1000
PERCENTILES = (0.05, 0.50, 0.95)


def perturb(
    params: ChannelParameters,
    jitter: JitterConfig,
    rng: np.random.Generator,
) -> ChannelParameters:
    """Return a copy of ``params`` with each jittered field scaled independently."""
    update: dict[str, float] = {}
    for field_name, half_width in jitter.model_dump().items():
        pct = int(rng.integers(-half_width, half_width, endpoint=True))
        update[field_name] = getattr(params, field_name) * (1 + pct / 100)
    return params.model_copy(update=update)


def _truncated_percentile(sorted_samples: list[float], q: float) -> float:
    idx = min(int(len(sorted_samples) * q), len(sorted_samples) - 1)
    return sorted_samples[idx]


def percentile_stats(samples: list[float]) -> MonteCarloStats:
    """Reduce IRR-percent samples to summary statistics (2 d.p.)."""
    if not samples:
        raise ValueError("percentile_stats needs at least one sample")

    ordered = sorted(samples)
    p5, p50, p95 = (_truncated_percentile(ordered, q) for q in PERCENTILES)

    return MonteCarloStats(
        iterations=len(ordered),
        min=round(ordered[0], 2),
        p5=round(p5, 2),
        p50=round(p50, 2),
        p95=round(p95, 2),
        max=round(ordered[-1], 2),
        mean=round(sum(ordered) / len(ordered), 2),
    )


def run_channel_monte_carlo(
    params: ChannelParameters,
    rng: np.random.Generator,
    iterations: int = DEFAULT_ITERATIONS,
    jitter: JitterConfig | None = None,
    upfront_opex_months: int = UPFRONT_OPEX_MONTHS,
) -> MonteCarloStats:
    """Run ``iterations`` jittered projections of one channel.

    Parameters
    ----------
    params : ChannelParameters
        Base assumptions (horizon already applied).
    rng : np.random.Generator
        Source of the per-trial, per-field draws. Not shared across channels.
    iterations : int
        Number of trials. Must be ≥ 1; ValueError otherwise.
    jitter : JitterConfig | None
        Half-widths per field. None = the stock ±20/20/10/15.
    upfront_opex_months : int
        Passed through to the projector.
    """
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations}")
    if jitter is None:
        jitter = JitterConfig()

    samples: list[float] = []
    for _ in range(iterations):
        trial = perturb(params, jitter, rng)
        result = project(trial, upfront_opex_months)
        samples.append(result.irr * 100)

    return percentile_stats(samples)


def run_monte_carlo(
    channels: dict[str, ChannelParameters],
    config: ScenarioConfig,
) -> dict[str, MonteCarloStats]:
    """Monte-Carlo sweep for every channel in the table.

    Each channel gets its own generator spawned from one SeedSequence, so
    streams are independent and a fixed ``random_seed`` reproduces the run.
    """
    seed_seq = np.random.SeedSequence(config.random_seed)
    child_seeds = seed_seq.spawn(len(channels))

    start = time.perf_counter()
    output: dict[str, MonteCarloStats] = {}
    for (name, params), child in zip(channels.items(), child_seeds):
        params = params.model_copy(update={"time_horizon": config.time_horizon})
        output[name] = run_channel_monte_carlo(
            params,
            np.random.default_rng(child),
            iterations=config.monte_carlo_iterations,
            jitter=config.jitter,
            upfront_opex_months=config.upfront_opex_months,
        )

    logger.info(
        "Monte Carlo: %d channels × %d trials in %.2fs",
        len(channels), config.monte_carlo_iterations, time.perf_counter() - start,
    )
    return output
