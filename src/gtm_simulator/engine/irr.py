"""IRR solver — Newton-Raphson on periodic cash flows.

Key formulas (t = 0 is the investment period):
  NPV(r)  = Σ CF_t / (1 + r)^t
  NPV'(r) = Σ_{t>0} −t · CF_t / (1 + r)^(t+1)
  r_next  = r − NPV(r) / NPV'(r)

A single Newton path from a 10% guess, with no bracketing or bisection
fallback. ``None`` means this method found no root; it does not prove that
no IRR exists. Series with several sign changes may converge to a spurious
root.
"""

from __future__ import annotations

from typing import Sequence

IRR_INITIAL_GUESS = 0.10
IRR_MAX_ITERATIONS = 1000
IRR_TOLERANCE = 1e-7


def compute_npv(cash_flows: Sequence[float], rate: float) -> float:
    """Net present value at a periodic ``rate``. Index 0 is undiscounted."""
    return sum(cf / (1 + rate) ** t for t, cf in enumerate(cash_flows))


def _npv_and_derivative(cash_flows: Sequence[float], rate: float) -> tuple[float, float]:
    npv = 0.0
    d_npv = 0.0
    for t, cf in enumerate(cash_flows):
        npv += cf / (1 + rate) ** t
        if t > 0:
            d_npv -= t * cf / (1 + rate) ** (t + 1)
    return npv, d_npv


def solve_irr(
    cash_flows: Sequence[float],
    guess: float = IRR_INITIAL_GUESS,
    max_iter: int = IRR_MAX_ITERATIONS,
    tol: float = IRR_TOLERANCE,
) -> float | None:
    """Periodic rate where NPV = 0, or None on non-convergence.

    Returns None if:
      - ``cash_flows`` is empty
      - the derivative is exactly zero at some step
      - the step never shrinks below ``tol`` within ``max_iter`` iterations
      - the iterate runs off to a rate where (1 + r)^t overflows or hits −100%
    """
    if not cash_flows:
        return None

    rate = guess
    for _ in range(max_iter):
        try:
            npv, d_npv = _npv_and_derivative(cash_flows, rate)
        except (OverflowError, ZeroDivisionError):
            return None

        if d_npv == 0:
            return None

        new_rate = rate - npv / d_npv
        if abs(new_rate - rate) < tol:
            return new_rate
        rate = new_rate

    return None


def annualize(monthly_rate: float) -> float:
    """Compound a monthly rate to an annual one: (1 + r)^12 − 1."""
    return (1 + monthly_rate) ** 12 - 1
