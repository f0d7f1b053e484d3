"""Incentives — tax credits and utility rebates."""

from pydantic import BaseModel, ConfigDict, Field


class IncentivesConfig(BaseModel):
    """Upfront incentives.  All reduce the net project cost at year 0."""

    model_config = ConfigDict(frozen=True)

    base_tax_credit_pct: float = Field(
        default=30.0, ge=0, le=100,
        description="Investment tax credit as percent of total project cost",
    )
    additional_tax_credit: bool = Field(
        default=False,
        description="Whether the project qualifies for the additional flat credit",
    )
    additional_tax_credit_pct: float = Field(
        default=10.0, ge=0, le=100,
        description="Additional credit (percent of total cost) when qualified",
    )
    utility_rebate_per_charger: float = Field(default=5_000.0, ge=0, description="Utility rebate per station ($)")
