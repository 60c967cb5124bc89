"""Engine — pure LCOE computation pipeline."""

from solar_lcoe.engine.capex import (
    compute_capacity_utilization,
    compute_energy_per_year,
    compute_total_capex,
)
from solar_lcoe.engine.financing import build_financing_series, compute_financing_payment
from solar_lcoe.engine.projection import project_energy_output, project_operating_costs
from solar_lcoe.engine.cashflow import assemble_cash_flows
from solar_lcoe.engine.orchestrator import evaluate

__all__ = [
    "compute_total_capex",
    "compute_energy_per_year",
    "compute_capacity_utilization",
    "compute_financing_payment",
    "build_financing_series",
    "project_operating_costs",
    "project_energy_output",
    "assemble_cash_flows",
    "evaluate",
]
