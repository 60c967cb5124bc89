"""Result export — sectioned CSV report and pandas cash-flow table."""

from __future__ import annotations

import csv
import io
from datetime import datetime

import pandas as pd

from solar_lcoe.config.constants import DEGRADATION_RATE, OPEX_ESCALATION_RATE
from solar_lcoe.finance.dcf import build_cash_flow_table
from solar_lcoe.models.results import ProjectResult


def cash_flow_frame(result: ProjectResult) -> pd.DataFrame:
    """Discounted cash-flow table as a DataFrame indexed by project year."""
    rows = [row.model_dump() for row in build_cash_flow_table(result)]
    df = pd.DataFrame(rows, columns=[
        "year", "operating_cost", "financing", "total",
        "discount_factor", "present_value", "cumulative_present_value",
    ])
    df["energy_mwh"] = result.energy_series
    return df.set_index("year")


def export_csv(result: ProjectResult, generated_at: datetime | None = None) -> str:
    """Render the full calculation report as CSV text.

    Sections: input parameters, main results, detailed breakdown, annual
    cash flows, calculation notes.
    """
    if generated_at is None:
        generated_at = datetime.now()
    inp = result.inputs

    buf = io.StringIO()
    w = csv.writer(buf, lineterminator="\n")

    w.writerow(["Solar LCOE Calculator - Export Report"])
    w.writerow(["Generated", generated_at.isoformat(timespec="seconds")])
    w.writerow([])

    w.writerow(["=== INPUT PARAMETERS ==="])
    w.writerow(["Capacity (MW)", inp.capacity])
    w.writerow(["Annual Energy Generation (MWh)", inp.energy_generation])
    w.writerow(["CAPEX per MW (₹)", inp.capex_per_mw])
    w.writerow(["Annual OPEX (% of CAPEX)", inp.opex_percent])
    w.writerow(["Loan Interest Rate (%)", inp.interest_rate])
    w.writerow(["Loan Tenure (Years)", inp.loan_tenure])
    w.writerow(["Project Lifetime (Years)", inp.project_lifetime])
    w.writerow(["Discount Rate (%)", inp.discount_rate])
    w.writerow([])

    w.writerow(["=== MAIN RESULTS ==="])
    w.writerow(["LCOE (₹/MWh)", f"{result.levelized_cost_per_mwh:.2f}"])
    w.writerow(["LCOE (₹/kWh)", f"{result.levelized_cost_per_kwh:.4f}"])
    w.writerow(["Capacity Utilization (%)", f"{result.capacity_utilization * 100:.2f}"])
    w.writerow(["Degenerate Result", "yes" if result.is_degenerate else "no"])
    w.writerow([])

    w.writerow(["=== DETAILED BREAKDOWN ==="])
    w.writerow(["Total CAPEX (₹)", f"{result.total_capex:.2f}"])
    w.writerow(["Annual OPEX Year 0 (₹)", f"{result.annual_opex_year0:.2f}"])
    w.writerow(["Annual Financing Payment (₹)", f"{result.annual_financing_payment:.2f}"])
    w.writerow(["Total O&M Cost (₹)", f"{result.total_operating_cost:.2f}"])
    w.writerow(["Total Financing Cost (₹)", f"{result.total_financing_cost:.2f}"])
    w.writerow(["Total Cost (₹)", f"{result.total_cost:.2f}"])
    w.writerow(["Present Value of Costs (₹)", f"{result.present_value_of_costs:.2f}"])
    w.writerow(["Total Energy Generated (MWh)", f"{result.total_energy_generated:.2f}"])
    w.writerow([])

    w.writerow(["=== ANNUAL CASH FLOWS ==="])
    w.writerow(["Year", "Cash Flow (₹)"])
    for year, cf in enumerate(result.annual_cash_flows, start=1):
        w.writerow([year, f"{cf:.2f}"])
    w.writerow([])

    w.writerow(["=== CALCULATION NOTES ==="])
    w.writerow(["OPEX Escalation Rate", f"{OPEX_ESCALATION_RATE:.0%} per year"])
    w.writerow(["Panel Degradation Rate", f"{DEGRADATION_RATE:.1%} per year"])
    w.writerow(["LCOE Formula", "(CAPEX + PV of O&M and financing) / Total Energy Generated"])
    for warning in result.warnings:
        w.writerow(["Warning", warning])

    return buf.getvalue()
