"""Plotly figure builders for the dashboard.

Pure functions: each takes engine/sensitivity output and returns a
``go.Figure``, so the figures can be built (and tested) without Streamlit.
"""

from __future__ import annotations

import plotly.graph_objects as go

from solar_lcoe.finance.sensitivity import PARAMETER_LABELS
from solar_lcoe.models.results import (
    HeatmapResult,
    ProjectResult,
    SweepResult,
    TornadoResult,
)

_COLORS = {
    "capex_per_mw": "#ef5350",
    "energy_generation": "#66bb6a",
    "discount_rate": "#42a5f5",
    "opex_percent": "#ffa726",
    "interest_rate": "#ab47bc",
    "loan_tenure": "#29b6f6",
}


def _style(fig: go.Figure, xaxis_title: str, yaxis_title: str, height: int = 320) -> go.Figure:
    fig.update_layout(
        xaxis_title=xaxis_title,
        yaxis_title=yaxis_title,
        height=height,
        margin=dict(l=20, r=20, t=30, b=20),
        plot_bgcolor='rgba(0,0,0,0)',
        paper_bgcolor='rgba(0,0,0,0)',
        font=dict(family="Inter", size=11, color="rgba(255,255,255,0.7)"),
    )
    return fig


def cash_flow_chart(result: ProjectResult) -> go.Figure:
    """Stacked O&M + financing bars per project year."""
    years = list(range(1, len(result.annual_cash_flows) + 1))
    fig = go.Figure()
    fig.add_trace(go.Bar(x=years, y=result.operating_cost_series, name="O&M", marker_color="#ffa726"))
    fig.add_trace(go.Bar(x=years, y=result.financing_series, name="Financing", marker_color="#ab47bc"))
    fig.update_layout(barmode="stack")
    return _style(fig, "Project year", "Cash outflow (₹)")


def sweep_chart(sweep: SweepResult, current_value: float | None = None) -> go.Figure:
    """LCOE/kWh curve across one parameter's values."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=[p.value for p in sweep.points],
        y=sweep.lcoe_kwh_values,
        mode="lines+markers",
        name=PARAMETER_LABELS.get(sweep.param, sweep.param),
        line=dict(color=_COLORS.get(sweep.param, "#42a5f5"), width=2),
    ))
    if current_value is not None:
        fig.add_vline(x=current_value, line_dash="dash", line_color="#00b894",
                      annotation_text="Current", annotation_position="top right")
    fig.update_layout(showlegend=False)
    return _style(fig, PARAMETER_LABELS.get(sweep.param, sweep.param), "LCOE (₹/kWh)")


def tornado_chart(tornado: TornadoResult) -> go.Figure:
    """Horizontal bars of LCOE decrease/increase around the base case."""
    # Plotly draws the first category at the bottom; reverse so rank 1 is on top.
    bars = list(reversed(tornado.bars))
    names = [b.param_name for b in bars]
    fig = go.Figure()
    # Each bar spans impact_low..impact_high; the part below the base case is
    # drawn as the decrease trace and the part above it as the increase trace.
    dec_start = [min(b.impact_low, 0.0) for b in bars]
    dec_end = [min(b.impact_high, 0.0) for b in bars]
    inc_start = [max(b.impact_low, 0.0) for b in bars]
    inc_end = [max(b.impact_high, 0.0) for b in bars]
    fig.add_trace(go.Bar(
        y=names, base=dec_start, x=[e - s for s, e in zip(dec_start, dec_end)], orientation="h",
        name=f"LCOE decrease [-{tornado.variance_pct:g}%]", marker_color="#66bb6a",
    ))
    fig.add_trace(go.Bar(
        y=names, base=inc_start, x=[e - s for s, e in zip(inc_start, inc_end)], orientation="h",
        name=f"LCOE increase [+{tornado.variance_pct:g}%]", marker_color="#ef5350",
    ))
    fig.update_layout(barmode="overlay")
    return _style(fig, f"Δ LCOE vs base ₹{tornado.base_lcoe_kwh:.4f}/kWh", "", height=360)


def heatmap_chart(heatmap: HeatmapResult) -> go.Figure:
    """Two-parameter LCOE grid."""
    fig = go.Figure(go.Heatmap(
        z=heatmap.lcoe_kwh,
        x=[f"{v:g}" for v in heatmap.col_values],
        y=[f"{v:g}" for v in heatmap.row_values],
        colorscale="RdYlGn_r",
        zmin=heatmap.min_lcoe,
        zmax=heatmap.max_lcoe,
        text=[[f"{v:.3f}" for v in row] for row in heatmap.lcoe_kwh],
        texttemplate="%{text}",
        colorbar=dict(title="₹/kWh"),
    ))
    return _style(
        fig,
        PARAMETER_LABELS.get(heatmap.col_param, heatmap.col_param),
        PARAMETER_LABELS.get(heatmap.row_param, heatmap.row_param),
        height=400,
    )
