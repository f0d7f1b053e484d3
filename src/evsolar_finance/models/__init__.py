"""Result models — engine output contracts."""

from evsolar_finance.models.results import (
    CashFlowYear,
    EnergyBalance,
    FinancialMetrics,
    LoanSchedule,
    LoanScheduleRow,
    ProjectCosts,
)

__all__ = [
    "CashFlowYear",
    "EnergyBalance",
    "FinancialMetrics",
    "LoanSchedule",
    "LoanScheduleRow",
    "ProjectCosts",
]
