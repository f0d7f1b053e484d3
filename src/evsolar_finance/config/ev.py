"""EV charging stations — station count, pricing, utilisation."""

from pydantic import BaseModel, ConfigDict, Field


class EVStationConfig(BaseModel):
    """Charging-side inputs.  Revenue is per kWh dispensed."""

    model_config = ConfigDict(frozen=True)

    num_stations: int = Field(default=4, ge=0, description="Number of charging stations")
    cost_per_station: float = Field(default=50_000.0, ge=0, description="Installed cost per station ($)")
    price_per_kwh: float = Field(default=0.45, ge=0, description="Price charged to drivers ($/kWh)")
    sessions_per_day: float = Field(default=10.0, ge=0, description="Average sessions per station per day")
    energy_per_session_kwh: float = Field(default=20.0, ge=0, description="Average energy per session (kWh)")
    price_escalation_rate: float = Field(
        default=0.0, ge=0,
        description="Annual escalation of the charging price (e.g. 0.02 = 2%/yr)",
    )
    operational_years: int = Field(default=20, ge=1, description="Project horizon (years)")
