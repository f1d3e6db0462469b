"""Lagged cash-flow projection — one channel, one deterministic run.

Monthly sequence for m = 1..horizon:
  ramp       = min(1, m / ramp_months)
  customers  = effective_leads × ramp × conversion
  pipelines[m + revenue_delay] += customers × (unit_margin, cac)
  net_cf[m]  = revenue_pipeline[m] − cost_pipeline[m] − opex_monthly

Pipelines are written ``revenue_delay`` months ahead and read at the
current month, so the first ``revenue_delay`` months only pay opex.

Month 0 carries the initial investment: setup_costs plus
``UPFRONT_OPEX_MONTHS`` of opex.
"""

from __future__ import annotations

import logging

import numpy as np

from gtm_simulator.config.channel import ChannelParameters
from gtm_simulator.engine.irr import annualize, solve_irr
from gtm_simulator.models.results import CashFlowSeries, ProjectionResult

logger = logging.getLogger(__name__)

UPFRONT_OPEX_MONTHS = 3


def build_cash_flows(
    params: ChannelParameters,
    upfront_opex_months: int = UPFRONT_OPEX_MONTHS,
) -> CashFlowSeries:
    """Project month-0 investment and monthly net cash flows for one channel.

    Returns a CashFlowSeries of length ``time_horizon + 1`` with the
    payback month (first month where cumulative cash ≥ 0) or None.
    """
    horizon = params.time_horizon
    delay = params.revenue_delay
    initial_investment = params.setup_costs + params.opex_monthly * upfront_opex_months

    full_leads = params.effective_leads
    conversion = params.conversion_fraction

    revenue_pipeline = np.zeros(horizon + delay + 1)
    cost_pipeline = np.zeros(horizon + delay + 1)

    flows: list[float] = [-initial_investment]
    cumulative = -initial_investment
    payback_month: int | None = None

    for m in range(1, horizon + 1):
        ramp = min(1.0, m / params.ramp_months)
        customers = full_leads * ramp * conversion

        revenue_pipeline[m + delay] = customers * params.unit_margin
        cost_pipeline[m + delay] = customers * params.cac

        net_cf = float(revenue_pipeline[m] - cost_pipeline[m]) - params.opex_monthly
        flows.append(net_cf)

        cumulative += net_cf
        if payback_month is None and cumulative >= 0:
            payback_month = m

    return CashFlowSeries(
        initial_investment=initial_investment,
        flows=flows,
        payback_month=payback_month,
    )


def compute_roi_multiple(flows: list[float], initial_investment: float) -> float:
    """Sum of strictly positive flows ÷ initial investment (0 if nothing invested)."""
    if initial_investment <= 0:
        return 0.0
    inflows = sum(cf for cf in flows if cf > 0)
    return inflows / initial_investment


def project(
    params: ChannelParameters,
    upfront_opex_months: int = UPFRONT_OPEX_MONTHS,
) -> ProjectionResult:
    """Run the lagged cash-flow model and derive IRR, payback, and ROI.

    An unconverged IRR is reported as ``irr_monthly=None`` with an annual
    IRR of 0.0. A monthly rate too large to compound to an annual float
    also reports an annual IRR of 0.0. It never raises.
    """
    series = build_cash_flows(params, upfront_opex_months)

    irr_monthly = solve_irr(series.flows)
    if irr_monthly is None:
        logger.debug("IRR did not converge; falling back to 0 (flows=%d)", len(series.flows))
        irr_annual = 0.0
    else:
        try:
            irr_annual = annualize(irr_monthly)
        except OverflowError:
            logger.debug("Annual IRR overflowed for monthly rate %g; falling back to 0", irr_monthly)
            irr_annual = 0.0

    roi = compute_roi_multiple(series.flows, series.initial_investment)

    return ProjectionResult(
        irr=irr_annual,
        irr_monthly=irr_monthly,
        payback_month=series.payback_month,
        net_cash_flow=sum(series.flows),
        roi_multiple=round(roi, 2),
        initial_investment=series.initial_investment,
        cash_flows=series.flows,
    )
