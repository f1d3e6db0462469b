"""FastAPI server — channel return metrics over HTTP.

Run with:
    uvicorn gtm_simulator.api.server:app --reload --port 8000

Or:
    python -m gtm_simulator.api.server

Endpoints:
    GET  /health             — liveness probe
    GET  /channels/defaults  — stock channel table as JSON
    GET  /returns            — run the stock table (?time_horizon=&view=&montecarlo=&seed=)
    POST /returns            — run a custom or partially overridden channel table
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Literal

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError

from gtm_simulator.config.channel import ChannelParameters
from gtm_simulator.config.channels import DEFAULT_CHANNELS, build_channel_table
from gtm_simulator.config.scenario import JitterConfig, ScenarioConfig
from gtm_simulator.engine.aggregator import run_scenario
from gtm_simulator.api.views import render_scenario

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Go-To-Market Channel Returns API",
    version="1.0",
    description=(
        "IRR, payback period, and ROI multiple for go-to-market channels "
        "from a lagged cash-flow model, with an optional Monte-Carlo IRR sweep."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request models
# ═══════════════════════════════════════════════════════════════════════════

class ReturnsRequest(BaseModel):
    """Request body for POST /returns. All fields optional — defaults used for missing."""
    channels: dict[str, dict[str, Any]] = Field(
        default_factory=dict,
        description="Per-channel overrides merged onto the stock table. "
                    "Example: {'direct': {'cac': 350}, 'partner': {'leads_per_month': 80}}",
    )
    replace_channels: bool = Field(
        default=False,
        description="If True, `channels` replaces the stock table instead of being merged onto it.",
    )
    time_horizon: int = Field(default=24, ge=1, le=600)
    view: Literal["full", "simple", "board"] = "full"
    montecarlo: bool = False
    iterations: int = Field(default=1000, ge=1, le=100_000)
    seed: int | None = None
    jitter: JitterConfig = Field(default_factory=JitterConfig)


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


def _build_channels(
    overrides: dict[str, dict[str, Any]],
    replace: bool = False,
) -> dict[str, ChannelParameters]:
    """Channel table from overrides, merged onto (or replacing) the stock table."""
    if replace:
        return build_channel_table(overrides)
    raw = copy.deepcopy(DEFAULT_CHANNELS)
    _deep_merge(raw, overrides)
    return build_channel_table(raw)


def _run(channels: dict[str, ChannelParameters], config: ScenarioConfig) -> dict[str, Any]:
    # The board view never shows Monte-Carlo output, so skip the sweep.
    if config.view == "board" and config.run_monte_carlo:
        config = config.model_copy(update={"run_monte_carlo": False})
    result = run_scenario(channels, config)
    return render_scenario(result, config.view)


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — returns a welcome message and pointer to /returns."""
    return {
        "name": "Go-To-Market Channel Returns API",
        "version": "1.0",
        "start_here": "GET /returns?time_horizon=24&view=full",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/channels/defaults")
def get_default_channels():
    """Stock channel assumptions. Use as a starting point for POST /returns overrides."""
    return {name: params.model_dump() for name, params in build_channel_table(DEFAULT_CHANNELS).items()}


@app.get("/returns")
def get_returns(
    time_horizon: int = Query(default=24, ge=1, le=600, description="Projection horizon in months"),
    view: Literal["full", "simple", "board"] = Query(default="full"),
    montecarlo: bool = Query(default=False, description="Add the Monte-Carlo IRR distribution"),
    seed: int | None = Query(default=None, description="RNG seed for a reproducible sweep"),
):
    """Return metrics for the stock channel table.

    Example:
    ```
    GET /returns?time_horizon=36&view=simple&montecarlo=1
    ```
    """
    config = ScenarioConfig(
        time_horizon=time_horizon,
        view=view,
        run_monte_carlo=montecarlo,
        random_seed=seed,
    )
    return _run(build_channel_table(DEFAULT_CHANNELS), config)


@app.post("/returns")
def post_returns(req: ReturnsRequest):
    """Return metrics for a custom channel table.

    Send only the fields you want to change. Missing channel fields fall
    back to the stock values (or to model defaults for new channels).
    """
    try:
        channels = _build_channels(req.channels, req.replace_channels)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False),
        ) from exc
    config = ScenarioConfig(
        time_horizon=req.time_horizon,
        view=req.view,
        run_monte_carlo=req.montecarlo,
        monte_carlo_iterations=req.iterations,
        random_seed=req.seed,
        jitter=req.jitter,
    )
    return _run(channels, config)


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(
        "gtm_simulator.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
