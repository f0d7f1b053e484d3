"""Derived energy parameters — demand, solar offset, grid draw, battery.

Pure arithmetic: ProjectAssumptions → EnergyBalance.  Year-0 quantities;
energy volumes do not escalate, only prices do.
"""

from __future__ import annotations

import math

from evsolar_finance.config.assumptions import ProjectAssumptions
from evsolar_finance.models.results import EnergyBalance

DAYS_PER_YEAR = 365
KWH_PER_SREC = 1_000


def annual_ev_demand_kwh(assumptions: ProjectAssumptions) -> float:
    """stations × sessions/day × kWh/session × 365."""
    ev = assumptions.ev
    return ev.num_stations * ev.sessions_per_day * ev.energy_per_session_kwh * DAYS_PER_YEAR


def compute_energy_balance(assumptions: ProjectAssumptions) -> EnergyBalance:
    """Split EV demand between solar and grid; size the battery."""
    solar = assumptions.solar
    battery = assumptions.battery

    demand = annual_ev_demand_kwh(assumptions)

    # Solar serves at most the configured share of EV demand
    solar_used = min(solar.annual_production_kwh, demand * solar.ev_offset_fraction)
    grid_energy = max(0.0, demand - solar_used)

    if battery.enabled:
        usable = battery.unit_count * battery.capacity_kwh * battery.depth_of_discharge
        throughput = usable * battery.cycle_life * battery.round_trip_efficiency
    else:
        usable = 0.0
        throughput = 0.0

    return EnergyBalance(
        annual_ev_demand_kwh=demand,
        solar_used_kwh=solar_used,
        grid_energy_kwh=grid_energy,
        solar_surplus_kwh=solar.annual_production_kwh - solar_used,
        annual_srecs=math.floor(solar.annual_production_kwh / KWH_PER_SREC),
        battery_usable_capacity_kwh=usable,
        battery_lifetime_throughput_kwh=throughput,
    )
