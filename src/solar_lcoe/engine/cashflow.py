"""Annual cash-flow assembly.

Entry i = escalated operating cost in year i + financing payment in year i.
This series is what gets discounted, and it is exposed unchanged on the
result for tables and exports.
"""

from __future__ import annotations


def assemble_cash_flows(operating_costs: list[float], financing: list[float]) -> list[float]:
    """Sum the operating and financing components year by year."""
    if len(operating_costs) != len(financing):
        raise ValueError(
            f"series length mismatch: {len(operating_costs)} operating vs {len(financing)} financing"
        )
    return [om + fin for om, fin in zip(operating_costs, financing)]
