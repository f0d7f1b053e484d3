"""Battery storage — optional, off by default."""

from pydantic import BaseModel, ConfigDict, Field


class BatteryConfig(BaseModel):
    """Stationary battery bank.

    Counted in project cost and maintenance only when ``enabled`` is True.
    The performance fields feed the energy balance (usable capacity and
    lifetime throughput); they do not change the cash flows.
    """

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(default=False, description="Include battery in totals")
    unit_count: int = Field(default=1, ge=0, description="Number of battery units")
    unit_cost: float = Field(default=100_000.0, ge=0, description="Installed cost per unit ($)")
    capacity_kwh: float = Field(default=200.0, ge=0, description="Nameplate capacity per unit (kWh)")
    round_trip_efficiency: float = Field(default=0.90, gt=0, le=1.0, description="Round-trip efficiency (0–1)")
    cycle_life: int = Field(default=4_000, ge=1, description="Rated full cycles")
    depth_of_discharge: float = Field(default=0.80, gt=0, le=1.0, description="Usable fraction of capacity")
    annual_maintenance_per_unit: float = Field(default=200.0, ge=0, description="Maintenance per unit per year ($)")
