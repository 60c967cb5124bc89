"""Solar LCOE Calculator — Streamlit dashboard.

Layout: sidebar inputs → headline metrics → tabs
(Breakdown | Discount Sensitivity | Parameter Ranges | Tornado | Heatmap).

Run with:
    streamlit run src/solar_lcoe/dashboard/app.py
"""

from __future__ import annotations

import streamlit as st

from solar_lcoe.api.export import cash_flow_frame, export_csv
from solar_lcoe.config import ProjectInputs, SensitivityConfig
from solar_lcoe.dashboard.charts import (
    cash_flow_chart,
    heatmap_chart,
    sweep_chart,
    tornado_chart,
)
from solar_lcoe.engine.orchestrator import evaluate
from solar_lcoe.finance.sensitivity import (
    DEFAULT_RANGES,
    HEATMAP_RANGES,
    MAX_SWEEP_POINTS,
    PARAMETER_LABELS,
    build_heatmap,
    grid_size,
    range_summary,
    run_tornado,
    sweep_discount_rate,
    sweep_parameter,
)

# ---------------------------------------------------------------------------
# Default instances — single source of truth for sidebar defaults
# ---------------------------------------------------------------------------
_DEF = ProjectInputs()
_DEF_S = SensitivityConfig()

st.set_page_config(page_title="Solar LCOE Calculator", page_icon="☀️", layout="wide")

# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
st.sidebar.header("Project Inputs")

with st.sidebar.expander("Plant", expanded=True):
    capacity = st.number_input("Capacity (MW)", 0.01, 10_000.0, _DEF.capacity, 0.1)
    energy_generation = st.number_input("Annual energy (MWh)", 1.0, 1e8, _DEF.energy_generation, 10.0)

with st.sidebar.expander("Costs", expanded=True):
    capex_per_mw = st.number_input("CAPEX per MW (₹)", 1.0, 1e12, float(_DEF.capex_per_mw), 1e6)
    opex_percent = st.number_input("OPEX (% of CAPEX)", 0.0, 100.0, _DEF.opex_percent, 0.1)

with st.sidebar.expander("Financing", expanded=True):
    interest_rate = st.number_input("Interest rate (%)", 0.0, 100.0, _DEF.interest_rate, 0.25)
    c1, c2 = st.columns(2)
    loan_tenure = c1.number_input("Loan tenure (y)", 0, 100, _DEF.loan_tenure, 1)
    project_lifetime = c2.number_input("Lifetime (y)", 1, 100, _DEF.project_lifetime, 1)
    discount_rate = st.number_input("Discount rate (%)", 0.0, 100.0, _DEF.discount_rate, 0.5)

try:
    inputs = ProjectInputs(
        capacity=capacity,
        energy_generation=energy_generation,
        capex_per_mw=capex_per_mw,
        opex_percent=opex_percent,
        interest_rate=interest_rate,
        loan_tenure=loan_tenure,
        project_lifetime=project_lifetime,
        discount_rate=discount_rate,
    )
    result = evaluate(inputs)
except ValueError as exc:  # InvalidInputError and pydantic ValidationError
    st.error(f"Invalid input: {exc}")
    st.stop()

# ---------------------------------------------------------------------------
# Headline
# ---------------------------------------------------------------------------
st.title("Solar LCOE Calculator")

m1, m2, m3, m4 = st.columns(4)
m1.metric("LCOE (₹/kWh)", f"{result.levelized_cost_per_kwh:.4f}")
m2.metric("LCOE (₹/MWh)", f"{result.levelized_cost_per_mwh:,.2f}")
m3.metric("Total CAPEX (₹)", f"{result.total_capex:,.0f}")
m4.metric("Capacity utilization", f"{result.capacity_utilization:.2%}")

for warning in result.warnings:
    st.warning(warning)

breakdown_tab, discount_tab, range_tab, tornado_tab, heatmap_tab = st.tabs(
    ["Breakdown", "Discount Sensitivity", "Parameter Ranges", "Tornado", "Heatmap"]
)

# ---------------------------------------------------------------------------
# Breakdown
# ---------------------------------------------------------------------------
with breakdown_tab:
    b1, b2, b3 = st.columns(3)
    b1.metric("Year-0 OPEX (₹)", f"{result.annual_opex_year0:,.0f}")
    b2.metric("Annual financing (₹)", f"{result.annual_financing_payment:,.0f}")
    b3.metric("PV of costs (₹)", f"{result.present_value_of_costs:,.0f}")
    b1.metric("Total O&M (₹)", f"{result.total_operating_cost:,.0f}")
    b2.metric("Total financing (₹)", f"{result.total_financing_cost:,.0f}")
    b3.metric("Lifetime energy (MWh)", f"{result.total_energy_generated:,.1f}")

    st.plotly_chart(cash_flow_chart(result), use_container_width=True)
    df = cash_flow_frame(result)
    st.dataframe(df, use_container_width=True, height=min(400, 35 * len(df) + 38))
    st.download_button(
        "📥  Download report CSV",
        data=export_csv(result),
        file_name="lcoe_report.csv",
        mime="text/csv",
    )

# ---------------------------------------------------------------------------
# Discount-rate sweep
# ---------------------------------------------------------------------------
with discount_tab:
    d1, d2, d3 = st.columns(3)
    min_rate = d1.number_input("Min rate (%)", 0.0, 100.0, _DEF_S.discount_rate_min, 0.5)
    max_rate = d2.number_input("Max rate (%)", 0.0, 100.0, _DEF_S.discount_rate_max, 0.5)
    step = d3.number_input("Step (%)", 0.1, 10.0, _DEF_S.discount_rate_step, 0.1)
    if max_rate < min_rate:
        st.error("Max rate must be at least the min rate.")
    elif grid_size(min_rate, max_rate, step) > MAX_SWEEP_POINTS:
        st.error(f"Sweep is limited to {MAX_SWEEP_POINTS} points; use a larger step.")
    else:
        sweep = sweep_discount_rate(inputs, min_rate, max_rate, step)
        st.plotly_chart(sweep_chart(sweep, inputs.discount_rate), use_container_width=True)
        st.dataframe(
            [{"Rate (%)": p.value, "LCOE (₹/kWh)": round(p.lcoe_kwh, 4),
              "LCOE (₹/MWh)": round(p.lcoe_mwh, 2)} for p in sweep.points],
            use_container_width=True, hide_index=True,
        )

# ---------------------------------------------------------------------------
# Parameter ranges
# ---------------------------------------------------------------------------
with range_tab:
    cols = st.columns(len(DEFAULT_RANGES))
    for col, (param, values) in zip(cols, DEFAULT_RANGES.items()):
        with col:
            st.caption(PARAMETER_LABELS[param])
            fig = sweep_chart(sweep_parameter(inputs, param, values), float(getattr(inputs, param)))
            st.plotly_chart(fig, use_container_width=True)

    st.dataframe(
        [{
            "Parameter": row.param_name,
            "Min": row.min_value,
            "LCOE @ Min": round(row.lcoe_at_min, 4),
            "Current": row.current_value,
            "LCOE @ Current": round(row.lcoe_at_current, 4),
            "Max": row.max_value,
            "LCOE @ Max": round(row.lcoe_at_max, 4),
            "LCOE Range": f"{row.spread:.4f} ({row.spread_pct:.1f}%)",
        } for row in range_summary(inputs)],
        use_container_width=True, hide_index=True,
    )

# ---------------------------------------------------------------------------
# Tornado
# ---------------------------------------------------------------------------
with tornado_tab:
    variance = st.slider("Variance (±%)", 5, 50, int(_DEF_S.tornado_variance_pct), 5)
    tornado = run_tornado(inputs, float(variance))
    st.plotly_chart(tornado_chart(tornado), use_container_width=True)

# ---------------------------------------------------------------------------
# Heatmap
# ---------------------------------------------------------------------------
with heatmap_tab:
    _HM_PARAMS = list(HEATMAP_RANGES)
    h1, h2 = st.columns(2)
    row_param = h1.selectbox("Rows", _HM_PARAMS, index=_HM_PARAMS.index(_DEF_S.heatmap_row_param),
                             format_func=PARAMETER_LABELS.get)
    col_param = h2.selectbox("Columns", _HM_PARAMS, index=_HM_PARAMS.index(_DEF_S.heatmap_col_param),
                             format_func=PARAMETER_LABELS.get)
    if row_param == col_param:
        st.info("Pick two different parameters.")
    else:
        heatmap = build_heatmap(
            inputs, row_param, HEATMAP_RANGES[row_param], col_param, HEATMAP_RANGES[col_param],
        )
        st.plotly_chart(heatmap_chart(heatmap), use_container_width=True)
