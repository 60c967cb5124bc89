"""FastAPI server — HTTP access to the LCOE engine and sensitivity views.

Run with:
    uvicorn solar_lcoe.api.server:app --reload --port 8000

Or:
    solar-lcoe-api

Endpoints:
    GET  /health                        — liveness probe
    GET  /schema                        — JSON Schema for ProjectInputs
    GET  /inputs/defaults               — default inputs as JSON
    POST /evaluate                      — single LCOE evaluation
    POST /evaluate/narrative            — evaluation + plain-English summary
    POST /export/csv                    — CSV report of one evaluation
    POST /sensitivity/discount-rate     — LCOE vs discount rate
    POST /sensitivity/range             — LCOE across one parameter's values
    POST /sensitivity/range-summary     — LCOE at practical min / current / max
    POST /sensitivity/tornado           — ± variance ranking
    POST /sensitivity/heatmap           — two-parameter LCOE grid
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from solar_lcoe.config.project import ProjectInputs
from solar_lcoe.config.sensitivity import SensitivityConfig, SweepParam
from solar_lcoe.engine.orchestrator import evaluate
from solar_lcoe.errors import InvalidInputError
from solar_lcoe.finance.dcf import build_cash_flow_table
from solar_lcoe.finance.sensitivity import (
    DEFAULT_RANGES,
    HEATMAP_RANGES,
    MAX_HEATMAP_CELLS,
    MAX_SWEEP_POINTS,
    build_heatmap,
    grid_size,
    range_summary,
    run_tornado,
    sweep_discount_rate,
    sweep_parameter,
)
from solar_lcoe.api.export import export_csv
from solar_lcoe.api.narrative import generate_narrative, generate_tornado_narrative

_SENS = SensitivityConfig()

# Longest project lifetime accepted over HTTP (one series entry per year)
MAX_API_LIFETIME = 100


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Solar LCOE Calculator API",
    version="1.0",
    description=(
        "Levelized Cost of Energy for a solar project from capacity, CAPEX, OPEX, "
        "financing and discounting inputs, plus sensitivity views "
        "(discount sweep, range sweeps, tornado, heatmap)."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidInputError)
def _invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": [{"field": exc.field, "msg": exc.reason, "error": str(exc)}]},
    )


@app.exception_handler(ValidationError)
def _validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": exc.errors(include_url=False, include_context=False)},
    )


# ═══════════════════════════════════════════════════════════════════════════
# Request models
# ═══════════════════════════════════════════════════════════════════════════

class EvaluateRequest(BaseModel):
    """Partial inputs; missing fields use defaults."""
    model_config = ConfigDict(allow_inf_nan=False)

    inputs: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full ProjectInputs. Example: {'capacity': 2, 'discount_rate': 8}",
    )


class DiscountSweepRequest(EvaluateRequest):
    min_rate: float = Field(default=_SENS.discount_rate_min, ge=0)
    max_rate: float = Field(default=_SENS.discount_rate_max, ge=0)
    step: float = Field(default=_SENS.discount_rate_step, gt=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> "DiscountSweepRequest":
        if self.max_rate < self.min_rate:
            raise ValueError("max_rate must be >= min_rate")
        if grid_size(self.min_rate, self.max_rate, self.step) > MAX_SWEEP_POINTS:
            raise ValueError(f"sweep is limited to {MAX_SWEEP_POINTS} points")
        return self


class RangeRequest(EvaluateRequest):
    param: SweepParam
    values: list[float] | None = Field(
        default=None,
        max_length=MAX_SWEEP_POINTS,
        description="Values to evaluate. None = built-in range for the parameter.",
    )


class TornadoRequest(EvaluateRequest):
    variance_pct: float = Field(default=_SENS.tornado_variance_pct, gt=0, lt=100)


class HeatmapRequest(EvaluateRequest):
    row_param: SweepParam = _SENS.heatmap_row_param
    col_param: SweepParam = _SENS.heatmap_col_param
    row_values: list[float] | None = None
    col_values: list[float] | None = None

    @model_validator(mode="after")
    def _check_size(self) -> "HeatmapRequest":
        rows = len(self.row_values or HEATMAP_RANGES.get(self.row_param, []))
        cols = len(self.col_values or HEATMAP_RANGES.get(self.col_param, []))
        if rows * cols > MAX_HEATMAP_CELLS:
            raise ValueError(f"heatmap is limited to {MAX_HEATMAP_CELLS} cells")
        return self


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def get_default_inputs() -> dict[str, Any]:
    """Default ProjectInputs as a JSON-serializable dict."""
    return ProjectInputs().model_dump()


def _build_inputs(overrides: dict[str, Any]) -> ProjectInputs:
    """Merge partial overrides onto defaults and validate."""
    unknown = set(overrides) - set(ProjectInputs.model_fields)
    if unknown:
        name = sorted(unknown)[0]
        raise InvalidInputError(name, overrides[name], "unknown input field")
    inputs = ProjectInputs(**{**get_default_inputs(), **overrides})
    if inputs.project_lifetime > MAX_API_LIFETIME:
        raise InvalidInputError(
            "project_lifetime", inputs.project_lifetime, f"must be <= {MAX_API_LIFETIME}"
        )
    return inputs


def _values_for(param: str, values: list[float] | None, presets: dict[str, list[float]]) -> list[float]:
    if values:
        if param == "project_lifetime" and max(values) > MAX_API_LIFETIME:
            raise InvalidInputError(param, max(values), f"must be <= {MAX_API_LIFETIME}")
        return values
    if param not in presets:
        raise InvalidInputError(param, None, "no built-in range; supply values explicitly")
    return presets[param]


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — pointer to the docs and defaults."""
    return {
        "name": "Solar LCOE Calculator API",
        "version": "1.0",
        "docs": "GET /docs (interactive Swagger UI)",
        "defaults": "GET /inputs/defaults",
    }


@app.get("/schema")
def get_schema():
    """JSON Schema for ProjectInputs — types, defaults, constraints."""
    return ProjectInputs.model_json_schema()


@app.get("/inputs/defaults")
def get_defaults():
    return get_default_inputs()


@app.post("/evaluate")
def evaluate_endpoint(req: EvaluateRequest):
    """Evaluate one project. Returns the full result plus the discounted cash-flow table."""
    result = evaluate(_build_inputs(req.inputs))
    return {
        "result": result.model_dump(),
        "cash_flow_table": [row.model_dump() for row in build_cash_flow_table(result)],
    }


@app.post("/evaluate/narrative")
def evaluate_narrative(req: EvaluateRequest):
    """Evaluate and return only the plain-English narrative and headline metrics."""
    result = evaluate(_build_inputs(req.inputs))
    return {
        "narrative": generate_narrative(result),
        "headline_metrics": {
            "lcoe_kwh": round(result.levelized_cost_per_kwh, 4),
            "lcoe_mwh": round(result.levelized_cost_per_mwh, 2),
            "capacity_utilization": round(result.capacity_utilization, 4),
            "is_degenerate": result.is_degenerate,
        },
    }


@app.post("/export/csv", response_class=PlainTextResponse)
def export_csv_endpoint(req: EvaluateRequest):
    """CSV report of one evaluation."""
    result = evaluate(_build_inputs(req.inputs))
    return PlainTextResponse(
        export_csv(result),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="lcoe_report.csv"'},
    )


@app.post("/sensitivity/discount-rate")
def sensitivity_discount_rate(req: DiscountSweepRequest):
    inputs = _build_inputs(req.inputs)
    return sweep_discount_rate(inputs, req.min_rate, req.max_rate, req.step).model_dump()


@app.post("/sensitivity/range")
def sensitivity_range(req: RangeRequest):
    inputs = _build_inputs(req.inputs)
    values = _values_for(req.param, req.values, DEFAULT_RANGES)
    return sweep_parameter(inputs, req.param, values).model_dump()


@app.post("/sensitivity/range-summary")
def sensitivity_range_summary(req: EvaluateRequest):
    inputs = _build_inputs(req.inputs)
    return {"rows": [row.model_dump() for row in range_summary(inputs)]}


@app.post("/sensitivity/tornado")
def sensitivity_tornado(req: TornadoRequest):
    """Tornado bars sorted by LCOE swing (largest first)."""
    inputs = _build_inputs(req.inputs)
    tornado = run_tornado(inputs, req.variance_pct)
    return {
        **tornado.model_dump(),
        "interpretation": generate_tornado_narrative(tornado),
    }


@app.post("/sensitivity/heatmap")
def sensitivity_heatmap(req: HeatmapRequest):
    if req.row_param == req.col_param:
        raise InvalidInputError("col_param", req.col_param, "must differ from row_param")
    inputs = _build_inputs(req.inputs)
    row_values = _values_for(req.row_param, req.row_values, HEATMAP_RANGES)
    col_values = _values_for(req.col_param, req.col_values, HEATMAP_RANGES)
    heatmap = build_heatmap(inputs, req.row_param, row_values, req.col_param, col_values)
    return heatmap.model_dump()


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    uvicorn.run(
        "solar_lcoe.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
