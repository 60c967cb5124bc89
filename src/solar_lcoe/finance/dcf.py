"""Present-value discounting and the discounted cash-flow table.

Convention: the series is treated as starting one period out.  Year 0
("now") carries no cash flow, and the flow at 0-based index i is discounted
by (1 + r)^(i + 1):

  PV = Σ CF_i / (1 + r)^(i+1)

A zero rate degenerates to the plain sum.
"""

from __future__ import annotations

from solar_lcoe.models.results import CashFlowRow, ProjectResult


def discount_factor(rate_pct: float, year: int) -> float:
    """1 / (1 + r)^year for a rate in percent and a 1-indexed year."""
    return 1 / (1 + rate_pct / 100) ** year


def compute_npv(cash_flows: list[float], rate_pct: float) -> float:
    """Present value of annual cash flows.

    Parameters
    ----------
    cash_flows : list[float]
        Annual flows. Index 0 = end of project year 1.
    rate_pct : float
        Annual discount rate in percent (e.g. 9.0 for 9%).
    """
    if not cash_flows:
        return 0.0
    if rate_pct == 0:
        return float(sum(cash_flows))

    rate = rate_pct / 100
    npv = 0.0
    for t, cf in enumerate(cash_flows, start=1):
        npv += cf / (1 + rate) ** t
    return npv


def build_cash_flow_table(result: ProjectResult) -> list[CashFlowRow]:
    """Year-by-year breakdown of the cash flows behind ``present_value_of_costs``."""
    rate_pct = result.inputs.discount_rate
    rows: list[CashFlowRow] = []
    cumulative_pv = 0.0
    for year, (om, fin, cf) in enumerate(
        zip(result.operating_cost_series, result.financing_series, result.annual_cash_flows),
        start=1,
    ):
        df = discount_factor(rate_pct, year)
        pv = cf * df
        cumulative_pv += pv
        rows.append(CashFlowRow(
            year=year,
            operating_cost=om,
            financing=fin,
            total=cf,
            discount_factor=df,
            present_value=pv,
            cumulative_present_value=cumulative_pv,
        ))
    return rows
