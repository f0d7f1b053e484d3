"""Annual cash flow projection — the single source of every downstream metric.

Per year (0-indexed ``year``):
  revenue      = demand × price/kWh × (1 + price_escalation)^year
  grid_cost    = grid kWh × grid rate × (1 + utility_escalation)^year
  maintenance  = (EV + solar [+ battery]) × 1.03^year
  loan_payment = 12 × monthly payment while year < term (loan mode only)
  profit       = revenue + SREC − grid_cost − maintenance − loan_payment
  taxes        = max(0, profit − MACRS depreciation) × tax_rate
  net_cf       = profit − taxes

Cumulative cash flow starts at −net_project_cost.  The utility rebate and
tax credits are upfront incentives (inside net_project_cost), never
revenue lines.
"""

from __future__ import annotations

from evsolar_finance.config.assumptions import ProjectAssumptions
from evsolar_finance.engine.costs import compute_project_costs
from evsolar_finance.engine.derived import compute_energy_balance
from evsolar_finance.finance.amortization import monthly_payment
from evsolar_finance.finance.depreciation import depreciation
from evsolar_finance.models.results import CashFlowYear, ProjectCosts

MAINTENANCE_ESCALATION = 0.03


def loan_principal(assumptions: ProjectAssumptions, net_project_cost: float) -> float:
    """Amount borrowed: net cost less down payment, 0 for cash purchases."""
    if assumptions.financing.mode != "loan":
        return 0.0
    return max(0.0, net_project_cost - assumptions.financing.down_payment)


def annual_loan_payment(assumptions: ProjectAssumptions, net_project_cost: float) -> float:
    """12 × the fixed monthly payment (0 for cash purchases)."""
    principal = loan_principal(assumptions, net_project_cost)
    if principal <= 0:
        return 0.0
    fin = assumptions.financing
    return monthly_payment(principal, fin.apr_pct, fin.term_years) * 12


def project_cash_flows(
    assumptions: ProjectAssumptions,
    costs: ProjectCosts | None = None,
) -> list[CashFlowYear]:
    """Build the year-by-year cash flow schedule.

    Parameters
    ----------
    assumptions : ProjectAssumptions
        Input snapshot; read only.
    costs : ProjectCosts | None
        Precomputed totals.  Computed here when omitted.

    Returns
    -------
    list[CashFlowYear]
        One entry per operational year, in order.
    """
    if costs is None:
        costs = compute_project_costs(assumptions)

    ev = assumptions.ev
    solar = assumptions.solar
    battery = assumptions.battery
    op = assumptions.opex
    fin = assumptions.financing
    tax_rate = assumptions.analysis.tax_rate
    rate = assumptions.discount_rate

    energy = compute_energy_balance(assumptions)
    loan_payment_per_year = annual_loan_payment(assumptions, costs.net_project_cost)
    annual_srec_revenue = energy.annual_srecs * solar.srec_price

    base_maintenance = op.ev_maintenance_per_station * ev.num_stations + op.solar_maintenance_annual
    battery_maintenance = (
        battery.annual_maintenance_per_unit * battery.unit_count if battery.enabled else 0.0
    )

    schedule: list[CashFlowYear] = []
    cumulative = -costs.net_project_cost

    for year in range(ev.operational_years):
        # ── Revenue ──────────────────────────────────────────────────
        revenue = energy.annual_ev_demand_kwh * ev.price_per_kwh * (1 + ev.price_escalation_rate) ** year
        srec_revenue = annual_srec_revenue if year < solar.srec_eligibility_years else 0.0

        # ── Operating costs ──────────────────────────────────────────
        grid_cost = energy.grid_energy_kwh * op.grid_rate_per_kwh * (1 + op.utility_rate_escalation) ** year
        escalation = (1 + MAINTENANCE_ESCALATION) ** year
        maintenance = base_maintenance * escalation + battery_maintenance * escalation

        # ── Financing ────────────────────────────────────────────────
        loan_payment = loan_payment_per_year if fin.mode == "loan" and year < fin.term_years else 0.0

        profit = revenue + srec_revenue - grid_cost - maintenance - loan_payment

        # ── Tax ──────────────────────────────────────────────────────
        dep = depreciation(year, costs.depreciable_basis)
        taxable_income = profit - dep
        taxes = max(0.0, taxable_income) * tax_rate

        net_cf = profit - taxes
        cumulative += net_cf

        schedule.append(CashFlowYear(
            year=year + 1,
            revenue=revenue,
            srec_revenue=srec_revenue,
            grid_cost=grid_cost,
            maintenance_cost=maintenance,
            loan_payment=loan_payment,
            profit=profit,
            depreciation=dep,
            taxable_income=taxable_income,
            taxes=taxes,
            net_cash_flow=net_cf,
            cumulative_cash_flow=cumulative,
            discounted_cash_flow=net_cf / (1 + rate) ** (year + 1),
        ))

    return schedule
