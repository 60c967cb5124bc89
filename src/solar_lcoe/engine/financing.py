"""Debt service — simple interest on the capital cost.

annual_payment = total_capex × interest_rate / 100, charged every year the
loan is active (years 0 .. loan_tenure − 1).  It is not an
amortizing-loan annuity.
"""

from __future__ import annotations


def compute_financing_payment(total_capex: float, interest_rate_pct: float) -> float:
    """Annual financing payment for an interest rate given in percent."""
    return total_capex * (interest_rate_pct / 100)


def build_financing_series(annual_payment: float, loan_tenure: int, years: int) -> list[float]:
    """Per-year financing outflow: the payment while year < loan_tenure, else 0.

    The series always has ``years`` entries; tenure beyond the project
    lifetime is truncated.
    """
    return [annual_payment if year < loan_tenure else 0.0 for year in range(years)]
