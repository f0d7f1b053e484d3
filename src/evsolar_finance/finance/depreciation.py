"""Accelerated depreciation — 5-year MACRS table.

The half-year convention spreads a 5-year class over six tax years.
The basis is reduced by half of the base investment tax credit.
"""

from __future__ import annotations

MACRS_5_YEAR: tuple[float, ...] = (0.20, 0.32, 0.192, 0.1152, 0.1152, 0.0576)

BASIS_REDUCTION_SHARE = 0.5
"""Share of the base tax credit removed from the depreciable basis."""


def depreciable_basis(total_project_cost: float, base_tax_credit: float) -> float:
    """total cost − ½ × base tax credit amount."""
    return total_project_cost - BASIS_REDUCTION_SHARE * base_tax_credit


def depreciation(year: int, basis: float) -> float:
    """Depreciation for 0-indexed project ``year``; 0 outside the table."""
    if year < 0 or year >= len(MACRS_5_YEAR):
        return 0.0
    return MACRS_5_YEAR[year] * basis


def depreciation_schedule(basis: float, years: int) -> list[float]:
    """Per-year depreciation over a ``years``-long horizon."""
    return [depreciation(y, basis) for y in range(years)]
