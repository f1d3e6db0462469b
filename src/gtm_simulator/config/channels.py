"""Channel tables — the stock five-channel set and YAML loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from gtm_simulator.config.channel import ChannelParameters


DEFAULT_CHANNELS: dict[str, dict[str, Any]] = {
    "contractor": {
        "is_contractor": True, "contractor_count": 50, "leads_per_month": 5,
        "conversion_rate": 30, "cac": 500, "unit_margin": 600,
        "opex_monthly": 7_500, "setup_costs": 15_000,
        "ramp_months": 4, "revenue_delay": 2,
    },
    "direct": {
        "is_contractor": False, "leads_per_month": 300,
        "conversion_rate": 20, "cac": 300, "unit_margin": 700,
        "opex_monthly": 15_000, "setup_costs": 30_000,
        "ramp_months": 4, "revenue_delay": 2,
    },
    "distributor": {
        "is_contractor": False, "leads_per_month": 150,
        "conversion_rate": 35, "cac": 150, "unit_margin": 400,
        "opex_monthly": 5_000, "setup_costs": 10_000,
        "ramp_months": 4, "revenue_delay": 2,
    },
    "retail": {
        "is_contractor": False, "leads_per_month": 100,
        "conversion_rate": 25, "cac": 250, "unit_margin": 500,
        "opex_monthly": 7_000, "setup_costs": 15_000,
        "ramp_months": 4, "revenue_delay": 2,
    },
    "hybrid": {
        "is_contractor": False, "leads_per_month": 60,
        "conversion_rate": 25, "cac": 200, "unit_margin": 550,
        "opex_monthly": 9_000, "setup_costs": 20_000,
        "ramp_months": 4, "revenue_delay": 2,
    },
}


def build_channel_table(raw: Mapping[str, Mapping[str, Any]]) -> dict[str, ChannelParameters]:
    """Validate a ``{name: {field: value}}`` mapping into ChannelParameters.

    Insertion order is preserved — it decides IRR ties in the summary.
    """
    return {name: ChannelParameters(**dict(fields)) for name, fields in raw.items()}


def default_channel_table() -> dict[str, ChannelParameters]:
    """The stock contractor / direct / distributor / retail / hybrid table."""
    return build_channel_table(DEFAULT_CHANNELS)


def load_channel_table(path: str | Path) -> dict[str, ChannelParameters]:
    """Load a channel table from YAML.

    Accepts either a top-level ``channels:`` mapping or a bare
    ``{name: {...}}`` mapping. An empty file yields an empty table.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if "channels" in data and isinstance(data["channels"], dict):
        data = data["channels"]
    return build_channel_table(data)
