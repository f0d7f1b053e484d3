"""Tests for finance/sensitivity.py — tornado, sweeps, optimism factor."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from evsolar_finance.config import ProjectAssumptions
from evsolar_finance.engine.metrics import compute_financial_metrics
from evsolar_finance.finance.sensitivity import (
    DEFAULT_SWEEPS,
    apply_sensitivity_factor,
    run_factor_analysis,
    run_sensitivity,
    sweep_parameter,
    with_value,
)


class TestWithValue:
    def test_sets_nested_field(self, cash_assumptions: ProjectAssumptions):
        a = with_value(cash_assumptions, "ev.price_per_kwh", 0.60)
        assert a.ev.price_per_kwh == 0.60
        assert cash_assumptions.ev.price_per_kwh == 0.45

    def test_rounds_int_fields(self, cash_assumptions: ProjectAssumptions):
        a = with_value(cash_assumptions, "ev.num_stations", 4.6)
        assert a.ev.num_stations == 5
        assert isinstance(a.ev.num_stations, int)

    def test_unknown_field(self, cash_assumptions: ProjectAssumptions):
        with pytest.raises(AttributeError):
            with_value(cash_assumptions, "ev.no_such_field", 1.0)

    def test_out_of_range_rejected(self, cash_assumptions: ProjectAssumptions):
        with pytest.raises(ValidationError):
            with_value(cash_assumptions, "incentives.base_tax_credit_pct", 108.0)

    def test_zero_horizon_rejected(self, cash_assumptions: ProjectAssumptions):
        with pytest.raises(ValidationError):
            with_value(cash_assumptions, "ev.operational_years", 0)

    def test_result_still_frozen(self, cash_assumptions: ProjectAssumptions):
        a = with_value(cash_assumptions, "solar.cost_per_watt", 2.0)
        with pytest.raises(ValidationError):
            a.solar.cost_per_watt = 3.0


class TestTornado:
    def test_one_bar_per_sweep(self, cash_assumptions: ProjectAssumptions):
        result = run_sensitivity(cash_assumptions)
        assert len(result.bars) == len(DEFAULT_SWEEPS)

    def test_sorted_by_swing(self, cash_assumptions: ProjectAssumptions):
        result = run_sensitivity(cash_assumptions)
        deltas = [b.delta_npv for b in result.bars]
        assert deltas == sorted(deltas, reverse=True)

    def test_base_npv(self, cash_assumptions: ProjectAssumptions):
        result = run_sensitivity(cash_assumptions)
        assert result.base_npv == pytest.approx(compute_financial_metrics(cash_assumptions).npv)

    def test_price_direction(self, cash_assumptions: ProjectAssumptions):
        result = run_sensitivity(cash_assumptions)
        bar = next(b for b in result.bars if b.param_path == "ev.price_per_kwh")
        assert bar.low_value == pytest.approx(0.405)
        assert bar.high_value == pytest.approx(0.495)
        assert bar.npv_at_high > result.base_npv > bar.npv_at_low

    def test_apr_irrelevant_for_cash(self, cash_assumptions: ProjectAssumptions):
        result = run_sensitivity(cash_assumptions)
        bar = next(b for b in result.bars if b.param_path == "financing.apr_pct")
        assert bar.delta_npv == pytest.approx(0.0)

    def test_custom_sweeps(self, cash_assumptions: ProjectAssumptions):
        result = run_sensitivity(cash_assumptions, [("Stations", "ev.num_stations", -0.5, 0.5)])
        assert len(result.bars) == 1
        assert result.bars[0].low_value == pytest.approx(2)

    def test_high_credit_sweep_rejected(self, cash_assumptions: ProjectAssumptions):
        """90% credit + 20% would be 108%, which no config accepts."""
        base = with_value(cash_assumptions, "incentives.base_tax_credit_pct", 90.0)
        with pytest.raises(ValidationError):
            run_sensitivity(base, [("Credit", "incentives.base_tax_credit_pct", -0.2, 0.2)])

    def test_base_not_mutated(self, cash_assumptions: ProjectAssumptions):
        before = cash_assumptions.model_dump()
        run_sensitivity(cash_assumptions)
        assert cash_assumptions.model_dump() == before


class TestSweep:
    def test_grid(self, cash_assumptions: ProjectAssumptions):
        points = sweep_parameter(cash_assumptions, "ev.sessions_per_day", 2, 10, steps=5)
        assert [p.value for p in points] == pytest.approx([2, 4, 6, 8, 10])

    def test_more_sessions_more_value(self, cash_assumptions: ProjectAssumptions):
        points = sweep_parameter(cash_assumptions, "ev.sessions_per_day", 2, 10, steps=5)
        npvs = [p.npv for p in points]
        assert npvs == sorted(npvs)

    def test_matches_direct_computation(self, cash_assumptions: ProjectAssumptions):
        points = sweep_parameter(cash_assumptions, "ev.price_per_kwh", 0.45, 0.45, steps=1)
        assert points[0].npv == pytest.approx(compute_financial_metrics(cash_assumptions).npv)

    def test_invalid_grid_point_raises(self, cash_assumptions: ProjectAssumptions):
        with pytest.raises(ValidationError):
            sweep_parameter(cash_assumptions, "ev.operational_years", 0, 2, steps=3)


class TestSensitivityFactor:
    def test_factor_one_is_identity(self, loan_assumptions: ProjectAssumptions):
        cmp = run_factor_analysis(loan_assumptions, 1.0)
        assert cmp.adjusted.npv == pytest.approx(cmp.baseline.npv)
        assert cmp.adjusted.irr_pct == pytest.approx(cmp.baseline.irr_pct)

    def test_scaled_inputs(self, loan_assumptions: ProjectAssumptions):
        a = apply_sensitivity_factor(loan_assumptions, 1.25)
        assert a.ev.price_per_kwh == pytest.approx(0.45 * 1.25)
        assert a.ev.sessions_per_day == pytest.approx(6 * 1.25)
        assert a.solar.system_size_kw == pytest.approx(125)
        assert a.solar.cost_per_watt == pytest.approx(1.8 / 1.25)
        assert a.incentives.base_tax_credit_pct == pytest.approx(37.5)
        assert a.financing.apr_pct == pytest.approx(4.0)

    def test_credit_capped(self, loan_assumptions: ProjectAssumptions):
        a = apply_sensitivity_factor(loan_assumptions, 4.0)
        assert a.incentives.base_tax_credit_pct == 100.0

    def test_optimistic_raises_npv(self, cash_assumptions: ProjectAssumptions):
        cmp = run_factor_analysis(cash_assumptions, 1.2)
        assert cmp.adjusted.npv > cmp.baseline.npv

    def test_conservative_lowers_npv(self, cash_assumptions: ProjectAssumptions):
        cmp = run_factor_analysis(cash_assumptions, 0.8)
        assert cmp.adjusted.npv < cmp.baseline.npv

    def test_non_positive_factor_rejected(self, cash_assumptions: ProjectAssumptions):
        with pytest.raises(ValueError):
            apply_sensitivity_factor(cash_assumptions, 0)

    def test_apr_bound_enforced(self, loan_assumptions: ProjectAssumptions):
        """5% APR / 0.04 = 125%, past the 100% ceiling."""
        with pytest.raises(ValidationError):
            apply_sensitivity_factor(loan_assumptions, 0.04)
