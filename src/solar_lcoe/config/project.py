"""Project inputs — the single record the LCOE engine evaluates."""

from pydantic import BaseModel, ConfigDict, Field


class ProjectInputs(BaseModel):
    """Financial and technical inputs for one solar project.

    Defaults reproduce the calculator's standard 1 MW reference case.
    Instances are immutable; sensitivity sweeps build new ones through
    ``solar_lcoe.finance.sensitivity.apply_overrides``.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    # --- Plant ---
    capacity: float = Field(
        default=1.0, gt=0,
        description="Installed capacity (MW).",
    )
    energy_generation: float = Field(
        default=1627.53, gt=0,
        description="Year-1 energy generation (MWh/year).",
    )

    # --- Costs ---
    capex_per_mw: float = Field(
        default=34_400_000.0, gt=0,
        description="CAPEX rate (currency). Total CAPEX = capex_per_mw / capacity.",
    )
    opex_percent: float = Field(
        default=1.0, ge=0,
        description="Year-0 OPEX as a percentage of total CAPEX per year.",
    )

    # --- Financing ---
    interest_rate: float = Field(
        default=8.25, ge=0,
        description="Nominal annual loan interest rate (%). "
                    "Annual financing payment = total CAPEX × rate / 100.",
    )
    loan_tenure: int = Field(
        default=20, ge=0,
        description="Years over which the financing payment is due (0 = no debt service). "
                    "Should not exceed project_lifetime.",
    )

    # --- Valuation ---
    project_lifetime: int = Field(
        default=20, ge=1,
        description="Project lifetime (years); one cash flow per year.",
    )
    discount_rate: float = Field(
        default=9.0, ge=0,
        description="Annual discount rate (%) for the present value of costs.",
    )
