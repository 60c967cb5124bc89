"""Result models — engine and sensitivity output contracts."""

from solar_lcoe.models.results import (
    CashFlowRow,
    HeatmapResult,
    ProjectResult,
    RangeSummaryRow,
    SweepPoint,
    SweepResult,
    TornadoBar,
    TornadoResult,
)

__all__ = [
    "CashFlowRow",
    "HeatmapResult",
    "ProjectResult",
    "RangeSummaryRow",
    "SweepPoint",
    "SweepResult",
    "TornadoBar",
    "TornadoResult",
]
