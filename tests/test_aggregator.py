"""Tests for engine/aggregator.py — deterministic pass, summary, scenario run."""

from __future__ import annotations

from gtm_simulator.config import ChannelParameters, ScenarioConfig
from gtm_simulator.engine.aggregator import run_deterministic, run_scenario, summarize
from gtm_simulator.engine.projection import project


class TestRunDeterministic:
    def test_one_result_per_channel_in_order(self, channel_table):
        results = run_deterministic(channel_table, time_horizon=24)
        assert list(results) == ["contractor", "direct", "distributor", "retail", "hybrid"]

    def test_horizon_override(self, channel_table):
        results = run_deterministic(channel_table, time_horizon=36)
        for res in results.values():
            assert len(res.cash_flows) == 37

    def test_matches_single_projection(self, channel_table):
        results = run_deterministic(channel_table, time_horizon=24)
        direct = channel_table["direct"].model_copy(update={"time_horizon": 24})
        assert results["direct"] == project(direct)

    def test_table_not_mutated(self, channel_table):
        before = {k: v.model_dump() for k, v in channel_table.items()}
        run_deterministic(channel_table, time_horizon=48)
        assert {k: v.model_dump() for k, v in channel_table.items()} == before


class TestSummarize:
    def test_best_irr(self, make_result):
        results = {"a": make_result(0.1, 10, 1.0), "b": make_result(0.5, 12, 1.5), "c": make_result(0.2, 8, 2.0)}
        summary = summarize(results)
        assert summary.best_irr_channel == "b"
        assert summary.fastest_payback_month == 8
        assert summary.highest_roi_multiple == 2.0

    def test_irr_tie_goes_to_first(self, make_result):
        results = {"x": make_result(0.3, None, 1.0), "y": make_result(0.3, None, 1.0)}
        assert summarize(results).best_irr_channel == "x"

    def test_unreached_payback_never_fastest(self, make_result):
        results = {"a": make_result(0.1, None, 0.5), "b": make_result(0.2, 20, 1.0)}
        assert summarize(results).fastest_payback_month == 20

    def test_no_payback_reached(self, make_result):
        results = {"a": make_result(0.0, None, 0.5), "b": make_result(0.0, None, 0.2)}
        summary = summarize(results)
        assert summary.fastest_payback_month is None
        assert summary.best_irr_channel == "a"

    def test_negative_irrs(self, make_result):
        results = {"a": make_result(-0.4, None, 0.1), "b": make_result(-0.1, None, 0.3)}
        assert summarize(results).best_irr_channel == "b"

    def test_empty(self):
        summary = summarize({})
        assert summary.best_irr_channel is None
        assert summary.fastest_payback_month is None
        assert summary.highest_roi_multiple == 0.0


class TestRunScenario:
    def test_default_config_has_no_monte_carlo(self, channel_table):
        result = run_scenario(channel_table)
        assert result.monte_carlo is None
        assert len(result.channels) == 5

    def test_summary_consistent_with_channels(self, channel_table):
        result = run_scenario(channel_table, ScenarioConfig(time_horizon=24))
        irrs = {name: r.irr for name, r in result.channels.items()}
        assert result.summary.best_irr_channel == max(irrs, key=irrs.get)
        assert result.summary.highest_roi_multiple == max(r.roi_multiple for r in result.channels.values())
        reached = [r.payback_month for r in result.channels.values() if r.payback_month is not None]
        assert result.summary.fastest_payback_month == (min(reached) if reached else None)

    def test_deterministic_run_is_repeatable(self, channel_table):
        config = ScenarioConfig(time_horizon=24)
        a = run_scenario(channel_table, config)
        b = run_scenario(channel_table, config)
        assert a.model_dump_json() == b.model_dump_json()

    def test_monte_carlo_alongside(self, channel_table, mc_config):
        result = run_scenario(channel_table, mc_config)
        assert result.monte_carlo is not None
        assert set(result.monte_carlo) == set(channel_table)
        # Deterministic numbers are unaffected by the sweep
        plain = run_scenario(channel_table, mc_config.model_copy(update={"run_monte_carlo": False}))
        assert result.channels == plain.channels
        assert result.summary == plain.summary

    def test_custom_table(self):
        table = {
            "fast": ChannelParameters(leads_per_month=500, conversion_rate=40, unit_margin=800,
                                      cac=100, opex_monthly=5_000, setup_costs=5_000),
            "slow": ChannelParameters(leads_per_month=20, conversion_rate=10, unit_margin=300,
                                      cac=200, opex_monthly=8_000, setup_costs=40_000),
        }
        result = run_scenario(table, ScenarioConfig(time_horizon=24))
        assert result.summary.best_irr_channel == "fast"
        assert result.channels["slow"].payback_month is None
        assert result.summary.fastest_payback_month == result.channels["fast"].payback_month
