"""Top-level project assumptions — bundles every input group."""

from pydantic import BaseModel, ConfigDict, Field

from evsolar_finance.config.ev import EVStationConfig
from evsolar_finance.config.solar import SolarConfig
from evsolar_finance.config.battery import BatteryConfig
from evsolar_finance.config.financing import FinancingConfig
from evsolar_finance.config.incentives import IncentivesConfig
from evsolar_finance.config.opex import OperatingCostConfig


class AnalysisConfig(BaseModel):
    """Tax and discounting settings."""

    model_config = ConfigDict(frozen=True)

    tax_rate: float = Field(default=0.21, ge=0, le=1.0, description="Flat corporate tax rate")
    default_discount_rate: float = Field(
        default=0.10, ge=0,
        description="Discount rate for cash-financed projects. "
                    "Loan-financed projects discount at the loan APR.",
    )


class ProjectAssumptions(BaseModel):
    """Complete, immutable input snapshot for one metrics run."""

    model_config = ConfigDict(frozen=True)

    ev: EVStationConfig = Field(default_factory=EVStationConfig)
    solar: SolarConfig = Field(default_factory=SolarConfig)
    battery: BatteryConfig = Field(default_factory=BatteryConfig)
    financing: FinancingConfig = Field(default_factory=FinancingConfig)
    incentives: IncentivesConfig = Field(default_factory=IncentivesConfig)
    opex: OperatingCostConfig = Field(default_factory=OperatingCostConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)

    @property
    def discount_rate(self) -> float:
        """Loan APR as a fraction when financed, else the default rate."""
        if self.financing.mode == "loan":
            return self.financing.apr_pct / 100
        return self.analysis.default_discount_rate
