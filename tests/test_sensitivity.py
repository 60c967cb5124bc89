"""Tests for finance/sensitivity.py — sweeps, range summary, tornado, heatmap."""

from __future__ import annotations

import pytest

from solar_lcoe.config import ProjectInputs
from solar_lcoe.engine.orchestrator import evaluate
from solar_lcoe.errors import InvalidInputError
from solar_lcoe.finance.sensitivity import (
    DEFAULT_RANGES,
    DEFAULT_TORNADO_PARAMS,
    HEATMAP_RANGES,
    MAX_HEATMAP_CELLS,
    MAX_SWEEP_POINTS,
    apply_overrides,
    build_heatmap,
    discount_rate_grid,
    range_summary,
    run_tornado,
    sweep_discount_rate,
    sweep_parameter,
)


class TestApplyOverrides:

    def test_returns_new_validated_inputs(self, base_inputs: ProjectInputs):
        changed = apply_overrides(base_inputs, discount_rate=12)
        assert changed.discount_rate == 12.0
        assert base_inputs.discount_rate == 9.0

    def test_integer_fields_rounded(self, base_inputs: ProjectInputs):
        changed = apply_overrides(base_inputs, loan_tenure=16.4, project_lifetime=23.6)
        assert changed.loan_tenure == 16
        assert changed.project_lifetime == 24

    def test_unknown_field_rejected(self, base_inputs: ProjectInputs):
        with pytest.raises(InvalidInputError) as exc_info:
            apply_overrides(base_inputs, colour=3)
        assert exc_info.value.field == "colour"

    def test_out_of_range_rejected(self, base_inputs: ProjectInputs):
        with pytest.raises(InvalidInputError) as exc_info:
            apply_overrides(base_inputs, capacity=0)
        assert exc_info.value.field == "capacity"


class TestDiscountRateGrid:

    def test_default_grid(self):
        grid = discount_rate_grid(5, 15, 0.5)
        assert len(grid) == 21
        assert grid[0] == 5.0
        assert grid[-1] == 15.0
        assert 9.5 in grid

    def test_no_float_drift(self):
        grid = discount_rate_grid(0, 1, 0.1)
        assert grid[3] == 0.3
        assert grid[-1] == 1.0

    def test_single_point(self):
        assert discount_rate_grid(9, 9, 0.5) == [9.0]

    def test_bad_arguments(self):
        with pytest.raises(ValueError):
            discount_rate_grid(5, 15, 0)
        with pytest.raises(ValueError):
            discount_rate_grid(15, 5, 0.5)

    def test_oversized_grid_rejected(self):
        with pytest.raises(ValueError):
            discount_rate_grid(0, 1e12, 1e-6)

    def test_grid_at_cap(self):
        assert len(discount_rate_grid(0, MAX_SWEEP_POINTS - 1, 1)) == MAX_SWEEP_POINTS


class TestSweeps:

    def test_too_many_values_rejected(self, base_inputs: ProjectInputs):
        with pytest.raises(ValueError):
            sweep_parameter(base_inputs, "opex_percent", [1.0] * (MAX_SWEEP_POINTS + 1))

    def test_discount_sweep_matches_single_evaluations(self, base_inputs: ProjectInputs):
        sweep = sweep_discount_rate(base_inputs)
        assert sweep.param == "discount_rate"
        for point in sweep.points:
            expected = evaluate(apply_overrides(base_inputs, discount_rate=point.value))
            assert point.lcoe_kwh == expected.levelized_cost_per_kwh
            assert point.lcoe_mwh == expected.levelized_cost_per_mwh

    def test_lcoe_falls_as_discount_rate_rises(self, base_inputs: ProjectInputs):
        """All costs after year 0 are positive, so heavier discounting lowers their PV."""
        values = sweep_discount_rate(base_inputs, 5, 15, 0.5).lcoe_kwh_values
        assert all(a > b for a, b in zip(values, values[1:]))

    def test_capex_sweep_increasing(self, base_inputs: ProjectInputs):
        sweep = sweep_parameter(base_inputs, "capex_per_mw", DEFAULT_RANGES["capex_per_mw"])
        values = sweep.lcoe_kwh_values
        assert len(values) == 9
        assert all(a < b for a, b in zip(values, values[1:]))

    def test_energy_sweep_decreasing(self, base_inputs: ProjectInputs):
        values = sweep_parameter(
            base_inputs, "energy_generation", DEFAULT_RANGES["energy_generation"]
        ).lcoe_kwh_values
        assert all(a > b for a, b in zip(values, values[1:]))

    def test_sweep_is_reproducible(self, base_inputs: ProjectInputs):
        a = sweep_parameter(base_inputs, "interest_rate", [7, 8, 9])
        b = sweep_parameter(base_inputs, "interest_rate", [7, 8, 9])
        assert a == b

    def test_invalid_trial_raises(self, base_inputs: ProjectInputs):
        with pytest.raises(InvalidInputError):
            sweep_parameter(base_inputs, "project_lifetime", [10, 0])


class TestRangeSummary:

    def test_default_rows(self, base_inputs: ProjectInputs):
        rows = range_summary(base_inputs)
        assert [r.param for r in rows] == [
            "capex_per_mw", "energy_generation", "discount_rate", "opex_percent", "interest_rate",
        ]
        base = evaluate(base_inputs).levelized_cost_per_kwh
        for row in rows:
            assert row.lcoe_at_current == base
            assert row.spread == pytest.approx(abs(row.lcoe_at_max - row.lcoe_at_min))
            assert row.spread_pct == pytest.approx(row.spread / base * 100)

    def test_custom_bounds(self, base_inputs: ProjectInputs):
        rows = range_summary(base_inputs, [("Lifetime", "project_lifetime", 15, 30)])
        assert len(rows) == 1
        assert rows[0].current_value == 20


class TestTornado:

    def test_bars_sorted_by_spread(self, base_inputs: ProjectInputs):
        tornado = run_tornado(base_inputs)
        spreads = [b.spread for b in tornado.bars]
        assert spreads == sorted(spreads, reverse=True)
        assert len(tornado.bars) == len(DEFAULT_TORNADO_PARAMS)

    def test_base_lcoe(self, base_inputs: ProjectInputs):
        tornado = run_tornado(base_inputs)
        assert tornado.base_lcoe_kwh == evaluate(base_inputs).levelized_cost_per_kwh

    def test_bar_values(self, base_inputs: ProjectInputs):
        tornado = run_tornado(base_inputs, variance_pct=20)
        capex = next(b for b in tornado.bars if b.param == "capex_per_mw")
        assert capex.low_value == pytest.approx(34_400_000 * 0.8)
        assert capex.high_value == pytest.approx(34_400_000 * 1.2)
        for bar in tornado.bars:
            assert bar.impact_low <= bar.impact_high
            assert bar.spread == pytest.approx(bar.impact_high - bar.impact_low)

    def test_integer_parameter_rounded(self, base_inputs: ProjectInputs):
        tornado = run_tornado(base_inputs, variance_pct=20)
        tenure = next(b for b in tornado.bars if b.param == "loan_tenure")
        assert tenure.low_value == 16
        assert tenure.high_value == 24

    def test_energy_ranks_first_regardless_of_order(self, base_inputs: ProjectInputs):
        """±20% energy swings LCOE by 1/0.8 − 1/1.2 ≈ 41.7%; CAPEX by exactly 40%."""
        forward = run_tornado(base_inputs, params=DEFAULT_TORNADO_PARAMS)
        backward = run_tornado(base_inputs, params=list(reversed(DEFAULT_TORNADO_PARAMS)))
        assert forward.bars[0].param == "energy_generation"
        assert backward.bars[0].param == "energy_generation"
        assert forward.bars[1].param == "capex_per_mw"

    def test_ties_keep_input_order(self, base_inputs: ProjectInputs):
        params = [("First", "interest_rate"), ("Second", "interest_rate")]
        tornado = run_tornado(base_inputs, params=params)
        assert [b.param_name for b in tornado.bars] == ["First", "Second"]

    @pytest.mark.parametrize("variance", [0, 100, -5])
    def test_variance_out_of_range(self, base_inputs: ProjectInputs, variance):
        with pytest.raises(ValueError):
            run_tornado(base_inputs, variance_pct=variance)


class TestHeatmap:

    def test_grid_shape_and_values(self, base_inputs: ProjectInputs):
        rows = HEATMAP_RANGES["capex_per_mw"]
        cols = HEATMAP_RANGES["discount_rate"]
        hm = build_heatmap(base_inputs, "capex_per_mw", rows, "discount_rate", cols)
        assert len(hm.lcoe_kwh) == 5
        assert all(len(r) == 5 for r in hm.lcoe_kwh)
        expected = evaluate(apply_overrides(base_inputs, capex_per_mw=rows[2], discount_rate=cols[4]))
        assert hm.lcoe_kwh[2][4] == expected.levelized_cost_per_kwh

    def test_min_max(self, base_inputs: ProjectInputs):
        hm = build_heatmap(
            base_inputs, "opex_percent", HEATMAP_RANGES["opex_percent"],
            "interest_rate", HEATMAP_RANGES["interest_rate"],
        )
        flat = [v for row in hm.lcoe_kwh for v in row]
        assert hm.min_lcoe == min(flat)
        assert hm.max_lcoe == max(flat)
        # Cheapest corner: lowest OPEX and lowest interest.
        assert hm.lcoe_kwh[0][0] == hm.min_lcoe

    def test_same_parameter_rejected(self, base_inputs: ProjectInputs):
        with pytest.raises(ValueError):
            build_heatmap(base_inputs, "discount_rate", [5, 6], "discount_rate", [5, 6])

    def test_empty_axis_rejected(self, base_inputs: ProjectInputs):
        with pytest.raises(ValueError):
            build_heatmap(base_inputs, "capex_per_mw", [], "discount_rate", [5, 6])

    def test_oversized_grid_rejected(self, base_inputs: ProjectInputs):
        side = int(MAX_HEATMAP_CELLS ** 0.5) + 1
        with pytest.raises(ValueError):
            build_heatmap(
                base_inputs, "capex_per_mw", [30e6 + i for i in range(side)],
                "discount_rate", [1 + i * 0.01 for i in range(side)],
            )
