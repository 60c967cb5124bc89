"""Shared test fixtures — sample inputs matching scenarios/base_case.yaml."""

from __future__ import annotations

import pytest

from solar_lcoe.config import ProjectInputs
from solar_lcoe.engine.orchestrator import evaluate
from solar_lcoe.models.results import ProjectResult


@pytest.fixture
def base_inputs() -> ProjectInputs:
    """1 MW reference case."""
    return ProjectInputs(
        capacity=1.0,
        energy_generation=1627.53,
        capex_per_mw=34_400_000,
        opex_percent=1.0,
        interest_rate=8.25,
        loan_tenure=20,
        project_lifetime=20,
        discount_rate=9.0,
    )


@pytest.fixture
def short_loan_inputs(base_inputs: ProjectInputs) -> ProjectInputs:
    """Same plant with a 10-year loan over a 25-year life."""
    return base_inputs.model_copy(update={"loan_tenure": 10, "project_lifetime": 25})


@pytest.fixture
def base_result(base_inputs: ProjectInputs) -> ProjectResult:
    return evaluate(base_inputs)
