"""Top-level scenario settings — horizon, view, Monte-Carlo controls."""

from typing import Literal

from pydantic import BaseModel, Field


class JitterConfig(BaseModel):
    """Monte-Carlo input uncertainty, as integer percent half-widths.

    Each trial draws a whole percent uniformly from ``[-w, +w]`` per field
    and scales the field by ``1 + pct / 100``.
    """

    leads_per_month: int = Field(default=20, ge=0, le=100, description="Lead volume ±%")
    conversion_rate: int = Field(default=20, ge=0, le=100, description="Conversion rate ±%")
    unit_margin: int = Field(default=10, ge=0, le=100, description="Unit margin ±%")
    cac: int = Field(default=15, ge=0, le=100, description="CAC ±%")


class ScenarioConfig(BaseModel):
    """Settings shared by every channel in one scenario run."""

    time_horizon: int = Field(
        default=24, ge=1, le=600,
        description="Projection horizon in months, applied to every channel.",
    )
    view: Literal["full", "simple", "board"] = Field(
        default="full",
        description="Which result fields are rendered. No effect on the numbers.",
    )
    upfront_opex_months: int = Field(
        default=3, ge=0,
        description="Months of opex funded up front as part of the initial investment.",
    )

    # --- Monte Carlo ---------------------------------------------------------
    run_monte_carlo: bool = Field(
        default=False,
        description="Run the jittered-input IRR sweep alongside the deterministic pass.",
    )
    monte_carlo_iterations: int = Field(
        default=1000, ge=1, le=100_000,
        description="Trials per channel.",
    )
    random_seed: int | None = Field(
        default=None,
        description="Optional RNG seed for reproducible Monte-Carlo runs. "
                    "None = non-deterministic.",
    )
    jitter: JitterConfig = Field(default_factory=JitterConfig)
