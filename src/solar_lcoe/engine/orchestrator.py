"""LCOE orchestrator — the single ``evaluate`` entry point.

Pipeline:
  1. Validate inputs at the boundary (no partial results).
  2. CAPEX = capex_per_mw / capacity; base energy = energy_generation / capacity.
  3. Year-0 OPEX and annual financing payment.
  4. Escalated OPEX, financing and degraded energy series.
  5. Cash flows → present value (first flow discounted one full period).
  6. LCOE = (CAPEX + PV of costs) / total energy, with a 0 sentinel when the
     energy total is not positive.
"""

from __future__ import annotations

import math

from solar_lcoe.config.constants import KWH_PER_MWH
from solar_lcoe.config.project import ProjectInputs
from solar_lcoe.engine.capex import (
    compute_capacity_utilization,
    compute_energy_per_year,
    compute_total_capex,
)
from solar_lcoe.engine.cashflow import assemble_cash_flows
from solar_lcoe.engine.financing import build_financing_series, compute_financing_payment
from solar_lcoe.engine.projection import project_energy_output, project_operating_costs
from solar_lcoe.errors import InvalidInputError
from solar_lcoe.finance.dcf import compute_npv
from solar_lcoe.models.results import ProjectResult

# (field, minimum, strict) — strict means the value must exceed the minimum.
_BOUNDS: list[tuple[str, float, bool]] = [
    ("capacity", 0, True),
    ("energy_generation", 0, True),
    ("capex_per_mw", 0, True),
    ("opex_percent", 0, False),
    ("interest_rate", 0, False),
    ("loan_tenure", 0, False),
    ("project_lifetime", 1, False),
    ("discount_rate", 0, False),
]


def _validate_inputs(inputs: ProjectInputs) -> None:
    """Re-check every bound.

    ``ProjectInputs`` validates on construction, but ``model_construct``
    and ``model_copy(update=...)`` bypass it.
    """
    for name, minimum, strict in _BOUNDS:
        value = getattr(inputs, name, None)
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise InvalidInputError(name, value, "must be a number")
        if not math.isfinite(value):
            raise InvalidInputError(name, value, "must be finite")
        if strict and value <= minimum:
            raise InvalidInputError(name, value, f"must be > {minimum}")
        if not strict and value < minimum:
            raise InvalidInputError(name, value, f"must be >= {minimum}")

    for name in ("loan_tenure", "project_lifetime"):
        value = getattr(inputs, name)
        if value != int(value):
            raise InvalidInputError(name, value, "must be a whole number of years")


def evaluate(inputs: ProjectInputs) -> ProjectResult:
    """Compute the levelized cost of energy for one project.

    Raises
    ------
    InvalidInputError
        If any field is out of range (e.g. capacity ≤ 0, lifetime < 1).

    Returns
    -------
    ProjectResult
        Fresh, immutable result.  ``is_degenerate`` is set (and the
        levelized cost is 0) when total energy comes out non-positive.
    """
    _validate_inputs(inputs)

    years = int(inputs.project_lifetime)
    loan_tenure = int(inputs.loan_tenure)
    warnings: list[str] = []

    # --- Capital cost & normalized energy ---
    total_capex = compute_total_capex(inputs.capacity, inputs.capex_per_mw)
    energy_per_year = compute_energy_per_year(inputs.energy_generation, inputs.capacity)

    # --- Year-0 OPEX & financing ---
    annual_opex = inputs.opex_percent / 100 * total_capex
    annual_payment = compute_financing_payment(total_capex, inputs.interest_rate)

    # --- Per-year series ---
    operating_costs = project_operating_costs(annual_opex, years)
    financing = build_financing_series(annual_payment, loan_tenure, years)
    cash_flows = assemble_cash_flows(operating_costs, financing)
    energy = project_energy_output(energy_per_year, years)

    total_operating_cost = sum(operating_costs)
    total_financing_cost = sum(financing)
    total_energy = sum(energy)

    if loan_tenure > years:
        warnings.append(
            f"Loan tenure ({loan_tenure} y) exceeds project lifetime ({years} y); "
            f"payments after year {years} are not counted."
        )

    # --- Present value ---
    pv_costs = compute_npv(cash_flows, inputs.discount_rate)

    # --- Levelized cost ---
    is_degenerate = total_energy <= 0
    if is_degenerate:
        lcoe_mwh = 0.0
        warnings.append(
            "Total energy generated is not positive "
            "(check energy_generation against capacity); LCOE reported as 0."
        )
    else:
        lcoe_mwh = (total_capex + pv_costs) / total_energy

    # --- Utilization ---
    utilization = compute_capacity_utilization(inputs.energy_generation, inputs.capacity)
    if utilization > 1:
        warnings.append(
            f"Capacity utilization {utilization:.1%} exceeds 100%; "
            f"energy_generation is implausible for {inputs.capacity} MW."
        )

    return ProjectResult(
        inputs=inputs,
        total_capex=total_capex,
        annual_opex_year0=annual_opex,
        annual_financing_payment=annual_payment,
        total_operating_cost=total_operating_cost,
        total_financing_cost=total_financing_cost,
        total_cost=total_operating_cost + total_financing_cost,
        present_value_of_costs=pv_costs,
        energy_per_year=energy_per_year,
        total_energy_generated=total_energy,
        levelized_cost_per_mwh=lcoe_mwh,
        levelized_cost_per_kwh=lcoe_mwh / KWH_PER_MWH,
        capacity_utilization=utilization,
        annual_cash_flows=tuple(cash_flows),
        operating_cost_series=tuple(operating_costs),
        financing_series=tuple(financing),
        energy_series=tuple(energy),
        is_degenerate=is_degenerate,
        warnings=tuple(warnings),
    )
