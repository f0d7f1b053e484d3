"""DCF engine — NPV, IRR, payback, discounted payback.

Works on annual net cash flows where index 0 is project year 1 and the
initial investment sits at time 0.

Key formulas:
  NPV = Σ CF_t / (1 + r)^(t+1) − I          (t zero-indexed)
  IRR = r where NPV = 0                    (Newton–Raphson)
  Payback = first year i where cumulative ≥ 0, interpolated within year i

IRR limitation: there is no bracketing or bisection fallback.  Cash-flow
sequences with several sign changes can fail to converge (→ None) or land
on a root that has no economic meaning.  Callers wanting a guaranteed
root must bracket it themselves.

The solver iterates on Σ CF_t / (1+r)^t rather than on NPV itself.  Both
have the same roots above r = −1, but the Newton steps differ, so the two
formulations disagree on which hard inputs converge.  A step that would
leave r ≤ −1 ends the search with None instead of crossing the pole; deep
losses (IRR well below −25%) from a far-off guess can therefore return
None even with a single sign change.  Pass a closer ``guess`` for those.
"""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)


def compute_npv(cash_flows: list[float], rate: float, initial_investment: float = 0.0) -> float:
    """Net Present Value of annual cash flows.

    Parameters
    ----------
    cash_flows : list[float]
        Annual net cash flows.  Index 0 = year 1.
    rate : float
        Annual discount rate (e.g. 0.10 for 10%).
    initial_investment : float
        Outlay at time 0, subtracted undiscounted.
    """
    npv = -initial_investment
    for t, cf in enumerate(cash_flows):
        npv += cf / (1 + rate) ** (t + 1)
    return npv


def compute_irr(
    cash_flows: list[float],
    guess: float = 0.1,
    tol: float = 1e-6,
    max_iter: int = 100,
) -> float | None:
    """Internal Rate of Return via Newton–Raphson.

    ``cash_flows[0]`` is the time-0 flow (normally ``−initial_investment``).
    Iterates on f(r) = Σ CF_t / (1+r)^t, which has the same roots as
    ``compute_npv(cash_flows, r)``, with f'(r) = Σ −t·CF_t / (1+r)^(t+1).

    Returns None if:
      - fewer than two cash flows
      - the derivative is exactly zero
      - the iterate reaches r ≤ −1 (or a step would take it there) or overflows
      - ``max_iter`` is reached without convergence
    """
    if len(cash_flows) < 2:
        return None

    r = guess
    try:
        for _ in range(max_iter):
            base = 1 + r
            if base <= 0:
                logger.debug("IRR iterate at r=%.6f is not above -1; giving up", r)
                return None

            value = 0.0
            derivative = 0.0
            for t, cf in enumerate(cash_flows):
                value += cf / base ** t
                derivative -= t * cf / base ** (t + 1)

            if abs(value) < tol:
                return r
            if derivative == 0:
                logger.debug("IRR derivative is zero at r=%.6f", r)
                return None

            next_r = r - value / derivative
            if not math.isfinite(next_r):
                logger.debug("IRR iterate diverged from r=%.6f", r)
                return None
            if 1 + next_r <= 0:
                logger.debug("IRR step from r=%.6f would leave r > -1; giving up", r)
                return None
            if abs(next_r - r) < tol:
                return next_r
            r = next_r
    except (OverflowError, ZeroDivisionError):
        logger.debug("IRR overflowed near r=%.6f", r)
        return None

    logger.debug("IRR did not converge in %d iterations (last r=%.6f)", max_iter, r)
    return None


def compute_payback_period(cash_flows: list[float], initial_investment: float) -> float | None:
    """Fractional years until cumulative cash flow turns non-negative.

    Linear interpolation inside the crossing year:
      payback = i + (−cumulative_before_i) / CF_i

    Returns 0.0 for a non-positive investment, None if never recovered.
    """
    if initial_investment <= 0:
        return 0.0

    cumulative = -initial_investment
    for i, cf in enumerate(cash_flows):
        previous = cumulative
        cumulative += cf
        if cumulative >= 0:
            return i + (-previous) / cf  # previous < 0 here, so cf > 0
    return None


def compute_discounted_payback(
    cash_flows: list[float],
    rate: float,
    initial_investment: float,
) -> float | None:
    """Payback period on cash flows discounted at ``rate``.

    None if the discounted cumulative never reaches zero.
    """
    discounted = [cf / (1 + rate) ** (t + 1) for t, cf in enumerate(cash_flows)]
    return compute_payback_period(discounted, initial_investment)
