"""Metrics aggregator — ProjectAssumptions → FinancialMetrics.

Runs the cash flow projector once and derives every metric from that one
schedule.  Internally all rates are fractions; ``to_percent`` is the only
place a fraction becomes percent points.

Entry point: ``compute_financial_metrics(assumptions)``
"""

from __future__ import annotations

import logging
import math

from evsolar_finance.config.assumptions import ProjectAssumptions
from evsolar_finance.engine.cashflow import annual_loan_payment, loan_principal, project_cash_flows
from evsolar_finance.engine.costs import compute_project_costs
from evsolar_finance.engine.derived import compute_energy_balance
from evsolar_finance.finance.amortization import build_loan_schedule
from evsolar_finance.finance.dcf import (
    compute_discounted_payback,
    compute_irr,
    compute_npv,
    compute_payback_period,
)
from evsolar_finance.models.results import FinancialMetrics

logger = logging.getLogger(__name__)


def to_percent(fraction: float | None) -> float | None:
    """Fraction → percent points.  None passes through."""
    if fraction is None:
        return None
    return fraction * 100


def compute_roi(cash_flows: list[float], initial_investment: float) -> float:
    """(Σ CF − I) / I as a fraction; NaN when I is zero."""
    if initial_investment == 0:
        logger.debug("ROI undefined for zero initial investment")
        return math.nan
    return (sum(cash_flows) - initial_investment) / initial_investment


def compute_financial_metrics(assumptions: ProjectAssumptions) -> FinancialMetrics:
    """Compute the full metrics bundle for one assumptions snapshot."""
    costs = compute_project_costs(assumptions)
    energy = compute_energy_balance(assumptions)
    schedule = project_cash_flows(assumptions, costs)

    net = costs.net_project_cost
    rate = assumptions.discount_rate
    flows = [y.net_cash_flow for y in schedule]
    years = assumptions.ev.operational_years

    # ── Discounting ─────────────────────────────────────────────────────
    npv = compute_npv(flows, rate, net)
    irr = compute_irr([-net, *flows])
    payback = compute_payback_period(flows, net)
    discounted_payback = compute_discounted_payback(flows, rate, net)

    # ── Returns ─────────────────────────────────────────────────────────
    roi = compute_roi(flows, net)
    annualized_roi = roi / years if years > 0 else math.nan

    # ── Financing ───────────────────────────────────────────────────────
    loan_schedule = None
    if assumptions.financing.mode == "loan":
        fin = assumptions.financing
        loan_schedule = build_loan_schedule(loan_principal(assumptions, net), fin.apr_pct, fin.term_years)

    metrics = FinancialMetrics(
        total_project_cost=costs.total_project_cost,
        total_incentives=costs.total_incentives,
        net_project_cost=net,
        irr_pct=to_percent(irr),
        npv=None if math.isnan(npv) else npv,
        payback_period_years=payback,
        discounted_payback_years=discounted_payback,
        roi_pct=to_percent(roi),
        annualized_roi_pct=to_percent(annualized_roi),
        total_cash_flow=sum(flows),
        discount_rate=rate,
        annual_loan_payment=annual_loan_payment(assumptions, net),
        costs=costs,
        energy=energy,
        loan_schedule=loan_schedule,
        cash_flows=schedule,
    )

    logger.debug(
        "Metrics: net cost %.2f, NPV %s, IRR %s%%, payback %s yrs",
        net, metrics.npv, metrics.irr_pct, metrics.payback_period_years,
    )
    return metrics
