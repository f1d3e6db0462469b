"""Result models — projection and scenario output contracts."""

from gtm_simulator.models.results import (
    CashFlowSeries,
    MonteCarloStats,
    ProjectionResult,
    ScenarioResult,
    ScenarioSummary,
)

__all__ = [
    "CashFlowSeries",
    "MonteCarloStats",
    "ProjectionResult",
    "ScenarioResult",
    "ScenarioSummary",
]
