"""Sensitivity / tornado analysis.

Vary inputs, recompute the full metrics bundle, measure the change.

  - ``run_sensitivity``: one-at-a-time ± sweeps, tornado bars sorted by NPV swing
  - ``sweep_parameter``: metrics along an evenly spaced grid for one input
  - ``run_factor_analysis``: one optimism factor applied to several inputs at once

Default sweep set:
  - ev.price_per_kwh ± 10%
  - ev.sessions_per_day ± 20%
  - ev.cost_per_station ± 15%
  - solar.cost_per_watt ± 15%
  - opex.grid_rate_per_kwh ± 10%
  - incentives.base_tax_credit_pct ± 20%
  - financing.apr_pct ± 20%
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from pydantic import BaseModel

from evsolar_finance.config.assumptions import ProjectAssumptions
from evsolar_finance.engine.metrics import compute_financial_metrics
from evsolar_finance.models.results import FinancialMetrics


@dataclass(frozen=True)
class TornadoBar:
    """One bar in the tornado chart."""

    param_name: str
    """Human-readable parameter name."""

    param_path: str
    """Dot-path into ProjectAssumptions (e.g. 'ev.price_per_kwh')."""

    base_value: float
    low_value: float
    high_value: float

    npv_at_low: float | None
    npv_at_high: float | None

    delta_npv: float
    """abs(npv_at_high − npv_at_low); 0 if either NPV is unavailable."""


@dataclass
class SensitivityResult:
    """Complete tornado analysis output."""

    base_npv: float | None
    bars: list[TornadoBar] = field(default_factory=list)
    """Sorted by delta_npv, largest first."""


@dataclass(frozen=True)
class SweepPoint:
    """Metrics at one grid value of a swept input."""

    value: float
    npv: float | None
    irr_pct: float | None
    payback_period_years: float | None


@dataclass(frozen=True)
class FactorComparison:
    """Baseline vs. adjusted metrics for one sensitivity factor."""

    factor: float
    baseline: FinancialMetrics
    adjusted: FinancialMetrics


DEFAULT_SWEEPS: list[tuple[str, str, float, float]] = [
    ("Charging price", "ev.price_per_kwh", -0.10, 0.10),
    ("Sessions per day", "ev.sessions_per_day", -0.20, 0.20),
    ("Station cost", "ev.cost_per_station", -0.15, 0.15),
    ("Solar cost per watt", "solar.cost_per_watt", -0.15, 0.15),
    ("Grid electricity rate", "opex.grid_rate_per_kwh", -0.10, 0.10),
    ("Base tax credit", "incentives.base_tax_credit_pct", -0.20, 0.20),
    ("Loan APR", "financing.apr_pct", -0.20, 0.20),
]


def _get_nested_attr(obj: object, path: str) -> float:
    """Get a nested attribute via dot-path string."""
    current = obj
    for part in path.split("."):
        current = getattr(current, part)
    return float(current)


def _validated_copy(model: BaseModel, update: dict[str, object]) -> BaseModel:
    """Like ``model_copy(update=...)`` but runs field validation."""
    return type(model).model_validate({**dict(model), **update})


def with_value(model: BaseModel, path: str, value: float) -> BaseModel:
    """Return a copy of ``model`` with the dot-path field set to ``value``.

    Each level is rebuilt through ``model_validate``, so the copy obeys the
    same bounds as a hand-built config: an out-of-range value raises
    ``pydantic.ValidationError``.  The original is untouched.  If the target
    field is typed as ``int``, the value is rounded first.
    """
    head, _, rest = path.partition(".")
    if rest:
        child = getattr(model, head)
        return _validated_copy(model, {head: with_value(child, rest, value)})

    field_info = type(model).model_fields.get(head)
    if field_info is None:
        raise AttributeError(f"{type(model).__name__} has no field {head!r}")
    if field_info.annotation is int:
        value = round(value)
    return _validated_copy(model, {head: value})


def run_sensitivity(
    assumptions: ProjectAssumptions,
    sweeps: list[tuple[str, str, float, float]] | None = None,
) -> SensitivityResult:
    """Tornado analysis on NPV.

    Parameters
    ----------
    assumptions : ProjectAssumptions
        Base case.
    sweeps : list[tuple[name, path, low_pct, high_pct]] | None
        Parameter sweeps. None = use DEFAULT_SWEEPS.
    """
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS

    base_npv = compute_financial_metrics(assumptions).npv
    bars: list[TornadoBar] = []

    for name, path, low_pct, high_pct in sweeps:
        base_val = _get_nested_attr(assumptions, path)
        low_val = base_val * (1 + low_pct)
        high_val = base_val * (1 + high_pct)

        npv_low = compute_financial_metrics(with_value(assumptions, path, low_val)).npv
        npv_high = compute_financial_metrics(with_value(assumptions, path, high_val)).npv

        delta = abs(npv_high - npv_low) if npv_low is not None and npv_high is not None else 0.0

        bars.append(TornadoBar(
            param_name=name,
            param_path=path,
            base_value=base_val,
            low_value=low_val,
            high_value=high_val,
            npv_at_low=npv_low,
            npv_at_high=npv_high,
            delta_npv=delta,
        ))

    bars.sort(key=lambda b: b.delta_npv, reverse=True)
    return SensitivityResult(base_npv=base_npv, bars=bars)


def sweep_parameter(
    assumptions: ProjectAssumptions,
    path: str,
    low: float,
    high: float,
    steps: int = 11,
) -> list[SweepPoint]:
    """Evaluate metrics at ``steps`` evenly spaced values in [low, high]."""
    points: list[SweepPoint] = []
    for value in np.linspace(low, high, steps):
        m = compute_financial_metrics(with_value(assumptions, path, float(value)))
        points.append(SweepPoint(
            value=float(value),
            npv=m.npv,
            irr_pct=m.irr_pct,
            payback_period_years=m.payback_period_years,
        ))
    return points


def apply_sensitivity_factor(assumptions: ProjectAssumptions, factor: float) -> ProjectAssumptions:
    """Shift several inputs together by one optimism factor.

    factor > 1 is optimistic: higher price, more sessions, bigger array,
    cheaper panels, larger credit (capped at 100%), lower APR.  A factor
    that pushes APR past its bound raises ``pydantic.ValidationError``.
    """
    if factor <= 0:
        raise ValueError(f"sensitivity factor must be positive, got {factor}")

    ev = assumptions.ev
    solar = assumptions.solar
    inc = assumptions.incentives
    fin = assumptions.financing

    return _validated_copy(assumptions, {
        "ev": _validated_copy(ev, {
            "price_per_kwh": ev.price_per_kwh * factor,
            "sessions_per_day": ev.sessions_per_day * factor,
        }),
        "solar": _validated_copy(solar, {
            "system_size_kw": solar.system_size_kw * factor,
            "cost_per_watt": solar.cost_per_watt / factor,
        }),
        "incentives": _validated_copy(inc, {
            "base_tax_credit_pct": min(100.0, inc.base_tax_credit_pct * factor),
        }),
        "financing": _validated_copy(fin, {
            "apr_pct": fin.apr_pct / factor,
        }),
    })


def run_factor_analysis(assumptions: ProjectAssumptions, factor: float) -> FactorComparison:
    """Baseline metrics next to metrics under ``apply_sensitivity_factor``."""
    return FactorComparison(
        factor=factor,
        baseline=compute_financial_metrics(assumptions),
        adjusted=compute_financial_metrics(apply_sensitivity_factor(assumptions, factor)),
    )
