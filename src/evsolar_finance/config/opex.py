"""Operating costs — grid electricity and maintenance."""

from pydantic import BaseModel, ConfigDict, Field


class OperatingCostConfig(BaseModel):
    """Annual operating cost inputs."""

    model_config = ConfigDict(frozen=True)

    grid_rate_per_kwh: float = Field(default=0.12, ge=0, description="Grid electricity rate ($/kWh)")
    utility_rate_escalation: float = Field(
        default=0.02, ge=0,
        description="Annual escalation of the grid rate (e.g. 0.02 = 2%/yr)",
    )
    ev_maintenance_per_station: float = Field(default=500.0, ge=0, description="Maintenance per station per year ($)")
    solar_maintenance_annual: float = Field(default=1_000.0, ge=0, description="Maintenance for the whole array per year ($)")
