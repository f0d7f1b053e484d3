"""Finance — amortization, depreciation, discounting, sensitivity."""

from evsolar_finance.finance.amortization import build_loan_schedule, monthly_payment
from evsolar_finance.finance.depreciation import MACRS_5_YEAR, depreciable_basis, depreciation
from evsolar_finance.finance.dcf import (
    compute_discounted_payback,
    compute_irr,
    compute_npv,
    compute_payback_period,
)

__all__ = [
    "MACRS_5_YEAR",
    "build_loan_schedule",
    "compute_discounted_payback",
    "compute_irr",
    "compute_npv",
    "compute_payback_period",
    "depreciable_basis",
    "depreciation",
    "monthly_payment",
]
