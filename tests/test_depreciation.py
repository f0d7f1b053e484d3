"""Tests for the MACRS depreciation table."""

import pytest

from evsolar_finance.finance.depreciation import (
    MACRS_5_YEAR,
    depreciable_basis,
    depreciation,
    depreciation_schedule,
)


def test_table_sums_to_one():
    assert sum(MACRS_5_YEAR) == pytest.approx(1.0, abs=1e-12)


def test_table_values():
    assert MACRS_5_YEAR == (0.20, 0.32, 0.192, 0.1152, 0.1152, 0.0576)


def test_first_year():
    assert depreciation(0, 100_000) == pytest.approx(20_000)


def test_beyond_table_is_zero():
    for year in range(6, 30):
        assert depreciation(year, 100_000) == 0.0


def test_negative_year_is_zero():
    assert depreciation(-1, 100_000) == 0.0


def test_schedule_recovers_full_basis():
    sched = depreciation_schedule(323_000, 20)
    assert len(sched) == 20
    assert sum(sched) == pytest.approx(323_000)
    assert sum(sched[:6]) == pytest.approx(323_000)


def test_short_horizon_truncates():
    sched = depreciation_schedule(100_000, 2)
    assert sched == pytest.approx([20_000, 32_000])


def test_basis_reduced_by_half_credit():
    assert depreciable_basis(380_000, 114_000) == pytest.approx(323_000)
