"""Project cost and incentive totals — year-0 capital picture.

Pure arithmetic: ProjectAssumptions → ProjectCosts.
"""

from __future__ import annotations

from evsolar_finance.config.assumptions import ProjectAssumptions
from evsolar_finance.finance.depreciation import depreciable_basis
from evsolar_finance.models.results import ProjectCosts


def compute_project_costs(assumptions: ProjectAssumptions) -> ProjectCosts:
    """Capital cost, incentives, net cost and depreciable basis."""
    ev = assumptions.ev
    solar = assumptions.solar
    battery = assumptions.battery
    inc = assumptions.incentives

    # ── Capital cost ────────────────────────────────────────────────────
    solar_cost = solar.system_size_kw * 1_000 * solar.cost_per_watt
    ev_stations_cost = ev.num_stations * ev.cost_per_station
    battery_cost = battery.unit_count * battery.unit_cost if battery.enabled else 0.0
    total_project_cost = solar_cost + ev_stations_cost + battery_cost

    # ── Incentives (all realised at year 0) ─────────────────────────────
    base_tax_credit = total_project_cost * inc.base_tax_credit_pct / 100
    additional_tax_credit = (
        total_project_cost * inc.additional_tax_credit_pct / 100
        if inc.additional_tax_credit else 0.0
    )
    utility_rebate = ev.num_stations * inc.utility_rebate_per_charger
    total_incentives = base_tax_credit + additional_tax_credit + utility_rebate

    return ProjectCosts(
        solar_cost=solar_cost,
        ev_stations_cost=ev_stations_cost,
        battery_cost=battery_cost,
        total_project_cost=total_project_cost,
        base_tax_credit=base_tax_credit,
        additional_tax_credit=additional_tax_credit,
        utility_rebate=utility_rebate,
        total_incentives=total_incentives,
        net_project_cost=total_project_cost - total_incentives,
        depreciable_basis=depreciable_basis(total_project_cost, base_tax_credit),
        incentive_share=total_incentives / total_project_cost if total_project_cost > 0 else 0.0,
    )
