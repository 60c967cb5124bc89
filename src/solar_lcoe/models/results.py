"""Result types — the contract between engine, finance, api, and dashboard.

Every result is produced fresh per evaluation and never mutated afterwards
(models are frozen and per-year series are tuples).  Values are unrounded;
rounding is a presentation concern handled by the narrative, export and
dashboard layers.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from solar_lcoe.config.project import ProjectInputs


# ═══════════════════════════════════════════════════════════════════════════
# Single-point evaluation
# ═══════════════════════════════════════════════════════════════════════════

class ProjectResult(BaseModel):
    """Output of one ``evaluate`` call."""

    model_config = ConfigDict(frozen=True)

    inputs: ProjectInputs
    """The validated input record this result was computed from."""

    # --- Costs ---
    total_capex: float
    """capex_per_mw / capacity."""

    annual_opex_year0: float
    """opex_percent / 100 × total_capex — operating cost before escalation."""

    annual_financing_payment: float
    """total_capex × interest_rate / 100, paid each year while the loan is active."""

    total_operating_cost: float
    """Undiscounted sum of the escalated operating-cost series."""

    total_financing_cost: float
    """Undiscounted sum of the financing series."""

    total_cost: float
    """total_operating_cost + total_financing_cost."""

    present_value_of_costs: float
    """NPV of annual_cash_flows, first flow discounted one full period."""

    # --- Energy ---
    energy_per_year: float
    """Year-1 energy after normalization: energy_generation / capacity."""

    total_energy_generated: float
    """Sum of the degraded energy series over the project lifetime."""

    # --- Headline ---
    levelized_cost_per_mwh: float
    """(total_capex + present_value_of_costs) / total_energy_generated; 0 when degenerate."""

    levelized_cost_per_kwh: float
    """levelized_cost_per_mwh / 1000."""

    capacity_utilization: float
    """energy_generation / (capacity × 8760). Not clipped — values > 1 raise a warning."""

    # --- Per-year series (index 0 = project year 1) ---
    annual_cash_flows: tuple[float, ...]
    """operating_cost_series[i] + financing_series[i]."""

    operating_cost_series: tuple[float, ...]
    financing_series: tuple[float, ...]
    energy_series: tuple[float, ...]

    # --- Diagnostics ---
    is_degenerate: bool = False
    """True when total energy is not positive and the levelized cost is the 0 sentinel."""

    warnings: tuple[str, ...] = ()
    """Human-readable diagnostics (degenerate energy, implausible utilization, ...)."""


class CashFlowRow(BaseModel):
    """One year of the discounted cash-flow table."""

    year: int
    """1-indexed project year."""

    operating_cost: float
    financing: float
    total: float
    discount_factor: float
    """1 / (1 + r)^year."""

    present_value: float
    cumulative_present_value: float


# ═══════════════════════════════════════════════════════════════════════════
# Sensitivity views
# ═══════════════════════════════════════════════════════════════════════════

class SweepPoint(BaseModel):
    """LCOE at one value of the swept parameter."""

    value: float
    lcoe_kwh: float
    lcoe_mwh: float


class SweepResult(BaseModel):
    """Single-parameter sweep."""

    param: str
    """ProjectInputs field that was varied."""

    points: list[SweepPoint]

    @property
    def lcoe_kwh_values(self) -> list[float]:
        return [p.lcoe_kwh for p in self.points]


class RangeSummaryRow(BaseModel):
    """LCOE at a parameter's practical minimum, current value, and maximum."""

    param_name: str
    param: str
    min_value: float
    current_value: float
    max_value: float
    lcoe_at_min: float
    lcoe_at_current: float
    lcoe_at_max: float

    spread: float
    """abs(lcoe_at_max − lcoe_at_min), LCOE/kWh."""

    spread_pct: float
    """spread as a percentage of lcoe_at_current (0 if that is 0)."""


class TornadoBar(BaseModel):
    """One bar in the tornado chart."""

    param_name: str
    """Human-readable parameter name."""

    param: str
    """ProjectInputs field."""

    base_value: float
    low_value: float
    high_value: float

    lcoe_at_low: float
    lcoe_at_high: float

    impact_low: float
    """min(lcoe_at_low, lcoe_at_high) − base LCOE."""

    impact_high: float
    """max(lcoe_at_low, lcoe_at_high) − base LCOE."""

    spread: float
    """max(trials) − min(trials) — total swing width used for ranking."""


class TornadoResult(BaseModel):
    """Tornado ranking around a base case."""

    base_lcoe_kwh: float
    variance_pct: float
    bars: list[TornadoBar]
    """Sorted by spread (descending); ties keep input order."""


class HeatmapResult(BaseModel):
    """Two-parameter LCOE grid."""

    row_param: str
    row_values: list[float]
    col_param: str
    col_values: list[float]

    lcoe_kwh: list[list[float]]
    """Row-major: lcoe_kwh[i][j] is at (row_values[i], col_values[j])."""

    min_lcoe: float
    max_lcoe: float
