"""Sensitivity defaults — discount sweep, tornado and heatmap settings."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

SweepParam = Literal[
    "capacity",
    "energy_generation",
    "capex_per_mw",
    "opex_percent",
    "interest_rate",
    "loan_tenure",
    "project_lifetime",
    "discount_rate",
]


class SensitivityConfig(BaseModel):
    """Settings the presentation layer uses when re-evaluating the engine."""

    # --- Discount-rate sweep ---
    discount_rate_min: float = Field(default=5.0, ge=0, description="Sweep start (%).")
    discount_rate_max: float = Field(default=15.0, ge=0, description="Sweep end, inclusive (%).")
    discount_rate_step: float = Field(default=0.5, gt=0, description="Sweep step (%).")

    # --- Tornado ---
    tornado_variance_pct: float = Field(
        default=20.0, gt=0, lt=100,
        description="Each tornado parameter is evaluated at base × (1 ± variance/100).",
    )

    # --- Heatmap ---
    heatmap_row_param: SweepParam = Field(
        default="capex_per_mw",
        description="Parameter varied along heatmap rows.",
    )
    heatmap_col_param: SweepParam = Field(
        default="discount_rate",
        description="Parameter varied along heatmap columns.",
    )

    @model_validator(mode="after")
    def _check_bounds(self) -> "SensitivityConfig":
        if self.discount_rate_max < self.discount_rate_min:
            raise ValueError("discount_rate_max must be >= discount_rate_min")
        if self.heatmap_row_param == self.heatmap_col_param:
            raise ValueError("heatmap row and column parameters must differ")
        return self
