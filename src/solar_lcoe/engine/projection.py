"""Operating-cost escalation and energy degradation projections.

Both series compound geometrically from year 0, i.e. the first entry is the
unadjusted base value:

  opex[i]   = base_opex   × (1 + 0.05)^i
  energy[i] = base_energy × (1 − 0.005)^i
"""

from __future__ import annotations

from solar_lcoe.config.constants import DEGRADATION_RATE, OPEX_ESCALATION_RATE


def project_operating_costs(base_opex: float, years: int) -> list[float]:
    """Escalated operating cost for each project year."""
    return [base_opex * (1 + OPEX_ESCALATION_RATE) ** i for i in range(years)]


def project_energy_output(base_energy: float, years: int) -> list[float]:
    """Degraded energy output for each project year."""
    return [base_energy * (1 - DEGRADATION_RATE) ** i for i in range(years)]
