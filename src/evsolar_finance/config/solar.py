"""Solar PV system — size, cost, production, SRECs."""

from pydantic import BaseModel, ConfigDict, Field


class SolarConfig(BaseModel):
    """Co-located solar array.

    Solar output first serves EV demand, up to ``ev_offset_fraction`` of it;
    the remainder of EV demand is bought from the grid.
    """

    model_config = ConfigDict(frozen=True)

    system_size_kw: float = Field(default=100.0, ge=0, description="Nameplate DC size (kW)")
    cost_per_watt: float = Field(default=1.8, ge=0, description="Installed cost ($/W)")
    annual_production_kwh: float = Field(default=120_000.0, ge=0, description="Annual energy production (kWh)")
    ev_offset_fraction: float = Field(
        default=0.5, ge=0, le=1.0,
        description="Fraction of EV energy demand that solar may cover (0–1)",
    )

    # --- SREC market ---
    srec_price: float = Field(
        default=0.0, ge=0,
        description="Market price per SREC ($). One SREC per MWh produced. "
                    "0 = no SREC market (e.g. CA); MD ≈ 80, DC ≈ 350.",
    )
    srec_eligibility_years: int = Field(
        default=0, ge=0,
        description="Years from commissioning during which SRECs are earned.",
    )
