"""Result types — the contract between the engine and its callers.

Every model is frozen: results are computed fresh from a
``ProjectAssumptions`` snapshot and never updated in place.

Units: money in dollars, energy in kWh.  Fields ending in ``_pct`` are
percent points (12.5 = 12.5%); every other rate is a fraction.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


# ═══════════════════════════════════════════════════════════════════════════
# Upfront totals
# ═══════════════════════════════════════════════════════════════════════════

class ProjectCosts(BaseModel):
    """Capital cost and incentive totals at year 0."""

    model_config = ConfigDict(frozen=True)

    solar_cost: float
    """system_size_kw × 1000 × cost_per_watt."""

    ev_stations_cost: float
    """num_stations × cost_per_station."""

    battery_cost: float
    """unit_count × unit_cost when the battery is enabled, else 0."""

    total_project_cost: float

    base_tax_credit: float
    """total_project_cost × base_tax_credit_pct / 100."""

    additional_tax_credit: float
    """total_project_cost × additional_tax_credit_pct / 100 when qualified, else 0."""

    utility_rebate: float
    """num_stations × utility_rebate_per_charger."""

    total_incentives: float

    net_project_cost: float
    """total_project_cost − total_incentives.  The initial investment."""

    depreciable_basis: float
    """total_project_cost − ½ × base_tax_credit."""

    incentive_share: float
    """total_incentives / total_project_cost (0 when cost is 0)."""


class EnergyBalance(BaseModel):
    """Annual energy flows and battery capability."""

    model_config = ConfigDict(frozen=True)

    annual_ev_demand_kwh: float
    """stations × sessions/day × kWh/session × 365."""

    solar_used_kwh: float
    """min(annual production, demand × offset fraction)."""

    grid_energy_kwh: float
    """max(0, demand − solar used)."""

    solar_surplus_kwh: float
    """Production not used for charging."""

    annual_srecs: int
    """floor(annual production / 1000)."""

    battery_usable_capacity_kwh: float
    """units × capacity × depth of discharge (0 when disabled)."""

    battery_lifetime_throughput_kwh: float
    """usable capacity × cycle life × round-trip efficiency (0 when disabled)."""


# ═══════════════════════════════════════════════════════════════════════════
# Loan
# ═══════════════════════════════════════════════════════════════════════════

class LoanScheduleRow(BaseModel):
    """One loan year, summed over its twelve monthly payments."""

    model_config = ConfigDict(frozen=True)

    year: int
    opening_balance: float
    interest: float
    principal: float
    payment: float
    closing_balance: float


class LoanSchedule(BaseModel):
    """Yearly amortization schedule."""

    model_config = ConfigDict(frozen=True)

    principal: float
    monthly_payment: float
    rows: list[LoanScheduleRow]
    total_interest_paid: float
    total_principal_paid: float


# ═══════════════════════════════════════════════════════════════════════════
# Cash flow schedule
# ═══════════════════════════════════════════════════════════════════════════

class CashFlowYear(BaseModel):
    """One operational year.  The ordered list of these is the schedule."""

    model_config = ConfigDict(frozen=True)

    year: int
    """1-indexed project year."""

    revenue: float
    """EV charging revenue."""

    srec_revenue: float
    grid_cost: float
    maintenance_cost: float
    loan_payment: float

    profit: float
    """revenue + srec_revenue − grid_cost − maintenance_cost − loan_payment."""

    depreciation: float
    taxable_income: float

    taxes: float
    """max(0, taxable_income) × tax_rate."""

    net_cash_flow: float
    """profit − taxes."""

    cumulative_cash_flow: float
    """−net_project_cost + Σ net_cash_flow through this year."""

    discounted_cash_flow: float
    """net_cash_flow / (1 + discount_rate)^year."""


# ═══════════════════════════════════════════════════════════════════════════
# Final bundle
# ═══════════════════════════════════════════════════════════════════════════

class FinancialMetrics(BaseModel):
    """Investment metrics for one ``ProjectAssumptions`` snapshot.

    ``irr_pct``, ``roi_pct`` and ``annualized_roi_pct`` are percent points;
    the conversion happens once, in ``engine.metrics.to_percent``.
    """

    model_config = ConfigDict(frozen=True)

    total_project_cost: float
    total_incentives: float
    net_project_cost: float

    irr_pct: float | None
    """None when the solver does not converge."""

    npv: float | None
    """None when the computation produced NaN."""

    payback_period_years: float | None
    """Fractional years; None if never recovered within the horizon."""

    discounted_payback_years: float | None
    """As above, on discounted cash flows."""

    roi_pct: float
    annualized_roi_pct: float

    total_cash_flow: float
    """Σ net cash flow over the horizon (undiscounted)."""

    discount_rate: float
    """Fraction used for NPV and discounted cash flows."""

    annual_loan_payment: float
    """12 × monthly payment; 0 for cash purchases."""

    costs: ProjectCosts
    energy: EnergyBalance
    loan_schedule: LoanSchedule | None = None
    cash_flows: list[CashFlowYear]
