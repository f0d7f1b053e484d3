"""Configuration models — every project input group."""

from evsolar_finance.config.ev import EVStationConfig
from evsolar_finance.config.solar import SolarConfig
from evsolar_finance.config.battery import BatteryConfig
from evsolar_finance.config.financing import FinancingConfig
from evsolar_finance.config.incentives import IncentivesConfig
from evsolar_finance.config.opex import OperatingCostConfig
from evsolar_finance.config.assumptions import AnalysisConfig, ProjectAssumptions
from evsolar_finance.config.loader import load_assumptions

__all__ = [
    "EVStationConfig",
    "SolarConfig",
    "BatteryConfig",
    "FinancingConfig",
    "IncentivesConfig",
    "OperatingCostConfig",
    "AnalysisConfig",
    "ProjectAssumptions",
    "load_assumptions",
]
