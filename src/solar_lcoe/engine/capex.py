"""Capital-cost and energy normalization, capacity utilization.

Both the CAPEX rate and the annual generation are normalized by *dividing*
by capacity, not multiplying.
"""

from __future__ import annotations

from solar_lcoe.config.constants import HOURS_PER_YEAR


def compute_total_capex(capacity: float, capex_rate: float) -> float:
    """Total capital expenditure = capex_rate / capacity.

    ``capacity`` must already be validated > 0.
    """
    return capex_rate / capacity


def compute_energy_per_year(energy_generation: float, capacity: float) -> float:
    """Year-1 energy used by the degradation projection = energy_generation / capacity."""
    return energy_generation / capacity


def compute_capacity_utilization(energy_generation: float, capacity: float) -> float:
    """Capacity utilization = energy_generation / (capacity × 8760).

    Returned unclipped so that implausible inputs (> 1) stay visible.
    """
    return energy_generation / (capacity * HOURS_PER_YEAR)
