"""Tests for api/views.py — display formatting and view modes."""

from __future__ import annotations

import pytest

from gtm_simulator.api.views import (
    channel_label,
    format_money,
    format_percent,
    render_channel,
    render_scenario,
    render_summary,
)
from gtm_simulator.engine.aggregator import run_scenario
from gtm_simulator.models.results import ScenarioSummary


class TestFormatting:
    @pytest.mark.parametrize("value, expected", [
        (12.3456, "12.35%"),
        (12.5, "12.5%"),
        (10.0, "10%"),
        (0.0, "0%"),
        (-0.001, "0%"),
        (-35.126, "-35.13%"),
        (100.0, "100%"),
    ])
    def test_format_percent(self, value, expected):
        assert format_percent(value) == expected

    def test_format_money(self):
        assert format_money(75_000) == "75,000"
        assert format_money(-1_234_567.4) == "-1,234,567"
        assert format_money(0) == "0"

    def test_channel_label(self):
        assert channel_label("direct") == "Direct"
        assert channel_label("eMail") == "EMail"
        assert channel_label("") == ""


class TestRenderChannel:
    def test_full_view(self, make_result):
        out = render_channel("direct", make_result(0.25, 18, 2.32), "full")
        assert out == {
            "channel": "Direct",
            "irr": 0.25,
            "irr_percent": "25%",
            "payback_period": 18,
            "net_cash_flow": "0",
            "roi_multiple": 2.32,
            "initial_investment": "1,000",
        }

    def test_simple_view(self, make_result):
        out = render_channel("retail", make_result(0.1234, None, 0.8), "simple")
        assert out == {
            "channel": "Retail",
            "irr_percent": "12.34%",
            "payback_period": "N/A",
            "roi_multiple": 0.8,
        }

    def test_board_view(self, make_result):
        out = render_channel("hybrid", make_result(0.5, 9, 3.1), "board")
        assert out == {
            "channel": "Hybrid",
            "payback_months": 9,
            "roi_multiple": 3.1,
            "irr_display": "50%",
        }


class TestRenderScenario:
    def test_summary_sentinels(self):
        out = render_summary(ScenarioSummary())
        assert out == {"best_irr_channel": "", "fastest_payback_months": "N/A", "highest_roi_multiple": 0.0}

    def test_full_with_monte_carlo(self, channel_table, mc_config):
        out = render_scenario(run_scenario(channel_table, mc_config), "full")
        assert set(out) == {"summary", "channels", "monte_carlo"}
        assert set(out["monte_carlo"]["direct"]) == {
            "min_irr_percent", "p5_irr_percent", "p50_irr_percent",
            "p95_irr_percent", "max_irr_percent", "mean_irr_percent",
        }
        assert all(v.endswith("%") for v in out["monte_carlo"]["direct"].values())

    def test_board_drops_monte_carlo(self, channel_table, mc_config):
        out = render_scenario(run_scenario(channel_table, mc_config), "board")
        assert "monte_carlo" not in out

    def test_no_monte_carlo_block_when_not_requested(self, channel_table):
        out = render_scenario(run_scenario(channel_table), "simple")
        assert set(out) == {"summary", "channels"}
        assert out["channels"]["contractor"]["channel"] == "Contractor"
