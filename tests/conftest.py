"""Shared test fixtures — assumption sets matching scenarios/*.yaml."""

from __future__ import annotations

import pytest

from evsolar_finance.config import (
    AnalysisConfig,
    BatteryConfig,
    EVStationConfig,
    FinancingConfig,
    IncentivesConfig,
    OperatingCostConfig,
    ProjectAssumptions,
    SolarConfig,
)


@pytest.fixture
def ev() -> EVStationConfig:
    return EVStationConfig(
        num_stations=4,
        cost_per_station=50_000,
        price_per_kwh=0.45,
        sessions_per_day=6,
        energy_per_session_kwh=30,
        price_escalation_rate=0.0,
        operational_years=20,
    )


@pytest.fixture
def solar() -> SolarConfig:
    return SolarConfig(
        system_size_kw=100,
        cost_per_watt=1.8,
        annual_production_kwh=120_000,
        ev_offset_fraction=0.5,
    )


@pytest.fixture
def incentives() -> IncentivesConfig:
    return IncentivesConfig(
        base_tax_credit_pct=30,
        additional_tax_credit=False,
        utility_rebate_per_charger=15_000,
    )


@pytest.fixture
def opex() -> OperatingCostConfig:
    return OperatingCostConfig(
        grid_rate_per_kwh=0.12,
        utility_rate_escalation=0.02,
        ev_maintenance_per_station=500,
        solar_maintenance_annual=1_000,
    )


@pytest.fixture
def cash_assumptions(
    ev: EVStationConfig,
    solar: SolarConfig,
    incentives: IncentivesConfig,
    opex: OperatingCostConfig,
) -> ProjectAssumptions:
    """Reference case: 4 stations, 100 kW solar, paid in cash."""
    return ProjectAssumptions(
        ev=ev,
        solar=solar,
        battery=BatteryConfig(enabled=False),
        financing=FinancingConfig(mode="cash"),
        incentives=incentives,
        opex=opex,
        analysis=AnalysisConfig(tax_rate=0.21, default_discount_rate=0.10),
    )


@pytest.fixture
def loan_assumptions(cash_assumptions: ProjectAssumptions) -> ProjectAssumptions:
    """Reference case financed with a 10-year 5% loan."""
    return cash_assumptions.model_copy(update={
        "financing": FinancingConfig(mode="loan", apr_pct=5.0, term_years=10, down_payment=20_000),
    })
