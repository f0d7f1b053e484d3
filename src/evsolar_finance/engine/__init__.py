"""Engine — cost totals, energy balance, cash flow projection, metrics."""

from evsolar_finance.engine.costs import compute_project_costs
from evsolar_finance.engine.derived import compute_energy_balance
from evsolar_finance.engine.cashflow import project_cash_flows
from evsolar_finance.engine.metrics import compute_financial_metrics, to_percent

__all__ = [
    "compute_project_costs",
    "compute_energy_balance",
    "project_cash_flows",
    "compute_financial_metrics",
    "to_percent",
]
