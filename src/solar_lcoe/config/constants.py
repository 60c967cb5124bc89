"""Fixed engine constants shared by every calculation."""

HOURS_PER_YEAR = 8760
"""Hours in a standard (non-leap) year, used for capacity utilization."""

OPEX_ESCALATION_RATE = 0.05
"""Annual operating-cost escalation (5%), compounding from year 0."""

DEGRADATION_RATE = 0.005
"""Annual energy-output degradation (0.5%), compounding from year 0."""

KWH_PER_MWH = 1000
"""Conversion between the per-MWh and per-kWh levelized cost."""
