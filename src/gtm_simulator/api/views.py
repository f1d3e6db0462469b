"""Response rendering — view modes and display formatting.

The engine returns raw numbers; this module turns a ScenarioResult into
the JSON shape the API serves:

  full   — every headline field, money with thousands separators
  simple — channel, IRR %, payback, ROI multiple
  board  — payback, ROI multiple, IRR display string; no Monte Carlo block
"""

from __future__ import annotations

from typing import Any, Literal

from gtm_simulator.models.results import (
    MonteCarloStats,
    ProjectionResult,
    ScenarioResult,
    ScenarioSummary,
)

ViewMode = Literal["full", "simple", "board"]

PAYBACK_NOT_REACHED = "N/A"


def format_percent(value: float) -> str:
    """12.3456 → '12.35%', 12.5 → '12.5%', 0 → '0%'."""
    text = f"{round(value, 2):.2f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return f"{text}%"


def format_money(value: float) -> str:
    """75000.4 → '75,000'."""
    return f"{value:,.0f}"


def channel_label(name: str) -> str:
    """'direct' → 'Direct'. Only the first letter changes."""
    return name[:1].upper() + name[1:]


def format_payback(month: int | None) -> int | str:
    return month if month is not None else PAYBACK_NOT_REACHED


def render_channel(name: str, result: ProjectionResult, view: ViewMode = "full") -> dict[str, Any]:
    """One channel's result in the requested view."""
    label = channel_label(name)
    payback = format_payback(result.payback_month)

    if view == "simple":
        return {
            "channel": label,
            "irr_percent": format_percent(result.irr_percent),
            "payback_period": payback,
            "roi_multiple": result.roi_multiple,
        }

    if view == "board":
        return {
            "channel": label,
            "payback_months": payback,
            "roi_multiple": result.roi_multiple,
            "irr_display": format_percent(result.irr * 100),
        }

    return {
        "channel": label,
        "irr": result.irr,
        "irr_percent": format_percent(result.irr_percent),
        "payback_period": payback,
        "net_cash_flow": format_money(result.net_cash_flow),
        "roi_multiple": result.roi_multiple,
        "initial_investment": format_money(result.initial_investment),
    }


def render_summary(summary: ScenarioSummary) -> dict[str, Any]:
    return {
        "best_irr_channel": summary.best_irr_channel or "",
        "fastest_payback_months": format_payback(summary.fastest_payback_month),
        "highest_roi_multiple": summary.highest_roi_multiple,
    }


def render_monte_carlo(stats: MonteCarloStats) -> dict[str, str]:
    return {
        "min_irr_percent": format_percent(stats.min),
        "p5_irr_percent": format_percent(stats.p5),
        "p50_irr_percent": format_percent(stats.p50),
        "p95_irr_percent": format_percent(stats.p95),
        "max_irr_percent": format_percent(stats.max),
        "mean_irr_percent": format_percent(stats.mean),
    }


def render_scenario(result: ScenarioResult, view: ViewMode = "full") -> dict[str, Any]:
    """Full response body: summary, per-channel block, optional Monte Carlo."""
    output: dict[str, Any] = {
        "summary": render_summary(result.summary),
        "channels": {
            name: render_channel(name, res, view) for name, res in result.channels.items()
        },
    }
    if view != "board" and result.monte_carlo:
        output["monte_carlo"] = {
            name: render_monte_carlo(stats) for name, stats in result.monte_carlo.items()
        }
    return output
