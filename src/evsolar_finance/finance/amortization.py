"""Loan amortization — fixed monthly payment and yearly schedule.

Key formulas:
  r = APR / 12 / 100        (monthly rate, APR in percent points)
  n = term_years × 12
  payment = P × r × (1+r)^n / ((1+r)^n − 1)
  payment = P / n           when r = 0
"""

from __future__ import annotations

from evsolar_finance.models.results import LoanSchedule, LoanScheduleRow


def monthly_payment(principal: float, annual_rate_pct: float, term_years: int) -> float:
    """Fixed monthly payment that retires ``principal`` over ``term_years``.

    Parameters
    ----------
    principal : float
        Amount borrowed.
    annual_rate_pct : float
        Annual percentage rate in percent points (5.0 = 5%).
    term_years : int
        Loan term in years.

    Returns
    -------
    float
        Payment per month.  Zero rate amortizes straight-line.
    """
    n = term_years * 12
    if n <= 0:
        return 0.0

    r = annual_rate_pct / 12 / 100
    if r == 0:
        return principal / n

    factor = (1 + r) ** n
    return principal * r * factor / (factor - 1)


def build_loan_schedule(principal: float, annual_rate_pct: float, term_years: int) -> LoanSchedule:
    """Generate the loan schedule, one row per loan year.

    Runs the monthly amortization and sums interest, principal and payment
    within each year.  A non-positive principal gives an empty schedule.
    """
    if principal <= 0 or term_years <= 0:
        return LoanSchedule(
            principal=0.0, monthly_payment=0.0, rows=[],
            total_interest_paid=0.0, total_principal_paid=0.0,
        )

    r = annual_rate_pct / 12 / 100
    payment = monthly_payment(principal, annual_rate_pct, term_years)

    rows: list[LoanScheduleRow] = []
    balance = principal
    total_interest = 0.0
    total_principal = 0.0

    for year in range(1, term_years + 1):
        opening = balance
        year_interest = 0.0
        year_principal = 0.0
        year_payment = 0.0

        for _ in range(12):
            interest = balance * r
            principal_part = min(payment - interest, balance)  # final month may be short
            year_interest += interest
            year_principal += principal_part
            year_payment += interest + principal_part
            balance -= principal_part

        balance = max(balance, 0.0)
        rows.append(LoanScheduleRow(
            year=year,
            opening_balance=opening,
            interest=year_interest,
            principal=year_principal,
            payment=year_payment,
            closing_balance=balance,
        ))

        total_interest += year_interest
        total_principal += year_principal

    return LoanSchedule(
        principal=principal,
        monthly_payment=payment,
        rows=rows,
        total_interest_paid=total_interest,
        total_principal_paid=total_principal,
    )
