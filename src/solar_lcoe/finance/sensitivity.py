"""Sensitivity views — discount sweep, range sweeps, tornado, heatmap.

Every view is built by re-running ``evaluate`` with one or two fields of
``ProjectInputs`` overridden.  Trials are independent: there is no
incremental computation and no cache, so the same overrides always yield
the same LCOE.

Default tornado set (± variance_pct, 20% by default):
  - CAPEX per MW
  - Annual energy
  - Discount rate
  - OPEX %
  - Loan tenure
  - Interest rate
"""

from __future__ import annotations

from typing import Any

import numpy as np
from pydantic import ValidationError

from solar_lcoe.config.project import ProjectInputs
from solar_lcoe.engine.orchestrator import evaluate
from solar_lcoe.errors import InvalidInputError
from solar_lcoe.models.results import (
    HeatmapResult,
    RangeSummaryRow,
    SweepPoint,
    SweepResult,
    TornadoBar,
    TornadoResult,
)

# Upper bounds on the number of evaluate() calls one view may trigger
MAX_SWEEP_POINTS = 1000
MAX_HEATMAP_CELLS = 2500

PARAMETER_LABELS: dict[str, str] = {
    "capacity": "Capacity (MW)",
    "energy_generation": "Annual Energy (MWh)",
    "capex_per_mw": "CAPEX per MW",
    "opex_percent": "OPEX (% of CAPEX)",
    "interest_rate": "Interest Rate (%)",
    "loan_tenure": "Loan Tenure (years)",
    "project_lifetime": "Project Lifetime (years)",
    "discount_rate": "Discount Rate (%)",
}

# Curves for the parameter-range charts
DEFAULT_RANGES: dict[str, list[float]] = {
    "capex_per_mw": [30e6, 35e6, 40e6, 45e6, 50e6, 55e6, 60e6, 65e6, 70e6],
    "energy_generation": [1000, 1200, 1400, 1600, 1800, 2000, 2200, 2400, 2600],
    "discount_rate": [4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16],
}

# (name, field, practical min, practical max) for the range summary table
DEFAULT_RANGE_BOUNDS: list[tuple[str, str, float, float]] = [
    ("CAPEX per MW", "capex_per_mw", 30e6, 70e6),
    ("Annual Energy (MWh)", "energy_generation", 1200, 2400),
    ("Discount Rate (%)", "discount_rate", 5, 15),
    ("OPEX (% of CAPEX)", "opex_percent", 1, 3),
    ("Interest Rate (%)", "interest_rate", 7, 12),
]

DEFAULT_TORNADO_PARAMS: list[tuple[str, str]] = [
    ("CAPEX per MW", "capex_per_mw"),
    ("Annual Energy", "energy_generation"),
    ("Discount Rate", "discount_rate"),
    ("OPEX %", "opex_percent"),
    ("Loan Tenure", "loan_tenure"),
    ("Interest Rate", "interest_rate"),
]

# 5-point grids offered for the two-parameter heatmap
HEATMAP_RANGES: dict[str, list[float]] = {
    "capex_per_mw": [30e6, 40e6, 50e6, 60e6, 70e6],
    "energy_generation": [1000, 1300, 1700, 2100, 2500],
    "discount_rate": [5, 7, 9, 11, 13],
    "opex_percent": [1, 1.5, 2.0, 2.5, 3.0],
    "interest_rate": [7, 8, 9, 10, 11],
}

_INT_FIELDS = {
    name for name, info in ProjectInputs.model_fields.items() if info.annotation is int
}


def apply_overrides(inputs: ProjectInputs, **overrides: Any) -> ProjectInputs:
    """Return a new, validated ``ProjectInputs`` with some fields replaced.

    Integer fields (loan tenure, lifetime) are rounded first so fractional
    sweeps stay valid.

    Raises
    ------
    InvalidInputError
        For unknown field names or out-of-range values.
    """
    data = inputs.model_dump()
    for name, value in overrides.items():
        if name not in ProjectInputs.model_fields:
            raise InvalidInputError(name, value, "unknown input field")
        if name in _INT_FIELDS:
            value = round(value)
        data[name] = value

    try:
        return ProjectInputs.model_validate(data)
    except ValidationError as exc:
        err = exc.errors()[0]
        field = str(err["loc"][0]) if err["loc"] else "inputs"
        raise InvalidInputError(field, data.get(field), err["msg"]) from exc


def grid_size(min_rate: float, max_rate: float, step: float) -> int:
    """Number of points in the inclusive grid min_rate..max_rate by step."""
    return int(np.floor((max_rate - min_rate) / step + 1e-9)) + 1


def discount_rate_grid(min_rate: float, max_rate: float, step: float) -> list[float]:
    """Inclusive grid min_rate, min_rate + step, ..., max_rate (no float drift)."""
    if step <= 0:
        raise ValueError("step must be positive")
    if max_rate < min_rate:
        raise ValueError("max_rate must be >= min_rate")
    n = grid_size(min_rate, max_rate, step)
    if n > MAX_SWEEP_POINTS:
        raise ValueError(f"grid has {n} points; at most {MAX_SWEEP_POINTS} allowed")
    grid = np.round(min_rate + step * np.arange(n), 10)
    return [float(v) for v in grid]


def sweep_parameter(inputs: ProjectInputs, param: str, values: list[float]) -> SweepResult:
    """LCOE at each value of one parameter, all other inputs held fixed."""
    if len(values) > MAX_SWEEP_POINTS:
        raise ValueError(f"{len(values)} values; at most {MAX_SWEEP_POINTS} allowed")
    points: list[SweepPoint] = []
    for value in values:
        result = evaluate(apply_overrides(inputs, **{param: value}))
        points.append(SweepPoint(
            value=float(value),
            lcoe_kwh=result.levelized_cost_per_kwh,
            lcoe_mwh=result.levelized_cost_per_mwh,
        ))
    return SweepResult(param=param, points=points)


def sweep_discount_rate(
    inputs: ProjectInputs,
    min_rate: float = 5.0,
    max_rate: float = 15.0,
    step: float = 0.5,
) -> SweepResult:
    """LCOE versus discount rate across an inclusive grid (percent)."""
    return sweep_parameter(inputs, "discount_rate", discount_rate_grid(min_rate, max_rate, step))


def range_summary(
    inputs: ProjectInputs,
    bounds: list[tuple[str, str, float, float]] | None = None,
) -> list[RangeSummaryRow]:
    """LCOE at each parameter's practical min, current value and max.

    Parameters
    ----------
    bounds : list[tuple[name, field, min, max]] | None
        None = DEFAULT_RANGE_BOUNDS.
    """
    if bounds is None:
        bounds = DEFAULT_RANGE_BOUNDS

    current = evaluate(inputs).levelized_cost_per_kwh
    rows: list[RangeSummaryRow] = []
    for name, param, low, high in bounds:
        lcoe_min = evaluate(apply_overrides(inputs, **{param: low})).levelized_cost_per_kwh
        lcoe_max = evaluate(apply_overrides(inputs, **{param: high})).levelized_cost_per_kwh
        spread = abs(lcoe_max - lcoe_min)
        rows.append(RangeSummaryRow(
            param_name=name,
            param=param,
            min_value=low,
            current_value=float(getattr(inputs, param)),
            max_value=high,
            lcoe_at_min=lcoe_min,
            lcoe_at_current=current,
            lcoe_at_max=lcoe_max,
            spread=spread,
            spread_pct=spread / current * 100 if current else 0.0,
        ))
    return rows


def run_tornado(
    inputs: ProjectInputs,
    variance_pct: float = 20.0,
    params: list[tuple[str, str]] | None = None,
) -> TornadoResult:
    """Rank parameters by the LCOE swing of a ± variance_pct perturbation.

    Parameters
    ----------
    inputs : ProjectInputs
        Base case.
    variance_pct : float
        Each parameter is evaluated at base × (1 − v/100) and base × (1 + v/100).
    params : list[tuple[name, field]] | None
        None = DEFAULT_TORNADO_PARAMS.

    Returns
    -------
    TornadoResult
        Bars sorted by spread (largest first).  ``sorted`` is stable, so
        equal spreads keep their input order.
    """
    if not 0 < variance_pct < 100:
        raise ValueError("variance_pct must be between 0 and 100")
    if params is None:
        params = DEFAULT_TORNADO_PARAMS

    base_lcoe = evaluate(inputs).levelized_cost_per_kwh

    bars: list[TornadoBar] = []
    for name, param in params:
        base_val = float(getattr(inputs, param))
        delta = base_val * variance_pct / 100

        low_inputs = apply_overrides(inputs, **{param: base_val - delta})
        high_inputs = apply_overrides(inputs, **{param: base_val + delta})
        lcoe_low = evaluate(low_inputs).levelized_cost_per_kwh
        lcoe_high = evaluate(high_inputs).levelized_cost_per_kwh

        bars.append(TornadoBar(
            param_name=name,
            param=param,
            base_value=base_val,
            low_value=float(getattr(low_inputs, param)),
            high_value=float(getattr(high_inputs, param)),
            lcoe_at_low=lcoe_low,
            lcoe_at_high=lcoe_high,
            impact_low=min(lcoe_low, lcoe_high) - base_lcoe,
            impact_high=max(lcoe_low, lcoe_high) - base_lcoe,
            spread=max(lcoe_low, lcoe_high) - min(lcoe_low, lcoe_high),
        ))

    bars = sorted(bars, key=lambda b: b.spread, reverse=True)

    return TornadoResult(base_lcoe_kwh=base_lcoe, variance_pct=variance_pct, bars=bars)


def build_heatmap(
    inputs: ProjectInputs,
    row_param: str,
    row_values: list[float],
    col_param: str,
    col_values: list[float],
) -> HeatmapResult:
    """LCOE/kWh over every (row, column) combination of two parameters."""
    if row_param == col_param:
        raise ValueError("row_param and col_param must differ")
    if not row_values or not col_values:
        raise ValueError("row_values and col_values must be non-empty")
    if len(row_values) * len(col_values) > MAX_HEATMAP_CELLS:
        raise ValueError(f"heatmap is limited to {MAX_HEATMAP_CELLS} cells")

    grid = np.empty((len(row_values), len(col_values)))
    for i, rv in enumerate(row_values):
        for j, cv in enumerate(col_values):
            trial = apply_overrides(inputs, **{row_param: rv, col_param: cv})
            grid[i, j] = evaluate(trial).levelized_cost_per_kwh

    return HeatmapResult(
        row_param=row_param,
        row_values=[float(v) for v in row_values],
        col_param=col_param,
        col_values=[float(v) for v in col_values],
        lcoe_kwh=grid.tolist(),
        min_lcoe=float(grid.min()),
        max_lcoe=float(grid.max()),
    )
