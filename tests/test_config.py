"""Validation tests for ProjectInputs, SensitivityConfig and the YAML loader."""

from __future__ import annotations

import math
from pathlib import Path

import pytest
from pydantic import ValidationError

from solar_lcoe.config import ProjectInputs, Scenario, SensitivityConfig, load_scenario


class TestProjectInputsDefaults:

    def test_default_construction(self):
        inp = ProjectInputs()
        assert inp.capacity == 1.0
        assert inp.energy_generation == 1627.53
        assert inp.capex_per_mw == 34_400_000
        assert inp.opex_percent == 1.0
        assert inp.interest_rate == 8.25
        assert inp.loan_tenure == 20
        assert inp.project_lifetime == 20
        assert inp.discount_rate == 9.0

    def test_inputs_are_immutable(self):
        inp = ProjectInputs()
        with pytest.raises(ValidationError):
            inp.capacity = 2.0


class TestProjectInputsValidation:

    @pytest.mark.parametrize("value", [0, -1.0])
    def test_non_positive_capacity_rejected(self, value):
        with pytest.raises(ValidationError):
            ProjectInputs(capacity=value)

    def test_tiny_capacity_accepted(self):
        assert ProjectInputs(capacity=1e-9).capacity == 1e-9

    @pytest.mark.parametrize("field", ["energy_generation", "capex_per_mw"])
    def test_zero_rejected_where_positive_required(self, field):
        with pytest.raises(ValidationError):
            ProjectInputs(**{field: 0})

    def test_zero_lifetime_rejected(self):
        with pytest.raises(ValidationError):
            ProjectInputs(project_lifetime=0)

    @pytest.mark.parametrize("field", ["opex_percent", "interest_rate", "discount_rate", "loan_tenure"])
    def test_zero_allowed(self, field):
        ProjectInputs(**{field: 0})

    @pytest.mark.parametrize("field", ["opex_percent", "interest_rate", "discount_rate", "loan_tenure"])
    def test_negative_rejected(self, field):
        with pytest.raises(ValidationError):
            ProjectInputs(**{field: -1})

    def test_nan_rejected(self):
        with pytest.raises(ValidationError):
            ProjectInputs(discount_rate=math.nan)

    def test_infinity_rejected(self):
        with pytest.raises(ValidationError):
            ProjectInputs(capex_per_mw=math.inf)

    def test_fractional_tenure_rejected(self):
        with pytest.raises(ValidationError):
            ProjectInputs(loan_tenure=12.5)


class TestSensitivityConfig:

    def test_defaults(self):
        cfg = SensitivityConfig()
        assert cfg.discount_rate_min == 5.0
        assert cfg.discount_rate_max == 15.0
        assert cfg.discount_rate_step == 0.5
        assert cfg.tornado_variance_pct == 20.0
        assert cfg.heatmap_row_param == "capex_per_mw"
        assert cfg.heatmap_col_param == "discount_rate"

    def test_inverted_bounds_rejected(self):
        with pytest.raises(ValidationError):
            SensitivityConfig(discount_rate_min=10, discount_rate_max=5)

    def test_zero_step_rejected(self):
        with pytest.raises(ValidationError):
            SensitivityConfig(discount_rate_step=0)

    def test_variance_range(self):
        SensitivityConfig(tornado_variance_pct=99)
        with pytest.raises(ValidationError):
            SensitivityConfig(tornado_variance_pct=100)
        with pytest.raises(ValidationError):
            SensitivityConfig(tornado_variance_pct=0)

    def test_same_heatmap_axes_rejected(self):
        with pytest.raises(ValidationError):
            SensitivityConfig(heatmap_row_param="discount_rate", heatmap_col_param="discount_rate")

    def test_unknown_heatmap_param_rejected(self):
        with pytest.raises(ValidationError):
            SensitivityConfig(heatmap_row_param="colour")


class TestLoadScenario:

    def test_base_case_yaml_loads(self):
        path = Path(__file__).parent.parent / "scenarios" / "base_case.yaml"
        scenario = load_scenario(path)
        assert scenario.project == ProjectInputs()
        assert scenario.sensitivity == SensitivityConfig()

    def test_partial_file_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "partial.yaml"
        path.write_text("project:\n  capacity: 2.5\n  discount_rate: 7\n", encoding="utf-8")
        scenario = load_scenario(path)
        assert scenario.project.capacity == 2.5
        assert scenario.project.discount_rate == 7.0
        assert scenario.project.loan_tenure == 20
        assert scenario.sensitivity.tornado_variance_pct == 20.0

    def test_empty_file_is_default_scenario(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_scenario(path) == Scenario()

    def test_invalid_values_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("project:\n  capacity: 0\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_scenario(path)
