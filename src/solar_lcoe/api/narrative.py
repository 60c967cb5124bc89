"""Narrative generator — plain-English interpretation of an LCOE result."""

from __future__ import annotations

from solar_lcoe.models.results import ProjectResult, TornadoResult


def generate_narrative(result: ProjectResult) -> str:
    """Generate a plain-English narrative from a single evaluation.

    Covers the project summary, the headline LCOE, the cost split, and any
    diagnostics attached to the result.
    """
    inp = result.inputs
    sections: list[str] = []

    # ── 1. Project summary ──
    sections.append("=" * 60)
    sections.append("PROJECT SUMMARY")
    sections.append("=" * 60)
    sections.append(
        f"Capacity: {inp.capacity:g} MW\n"
        f"Year-1 generation: {inp.energy_generation:,.2f} MWh\n"
        f"Capacity utilization: {result.capacity_utilization:.2%}\n"
        f"Lifetime: {inp.project_lifetime} years "
        f"(loan tenure {inp.loan_tenure} years at {inp.interest_rate:g}%)\n"
        f"Discount rate: {inp.discount_rate:g}%"
    )

    # ── 2. Headline ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("LEVELIZED COST OF ENERGY")
    sections.append("=" * 60)
    if result.is_degenerate:
        sections.append("LCOE could not be computed: total energy generated is not positive.")
    else:
        sections.append(
            f"LCOE: ₹{result.levelized_cost_per_kwh:.4f}/kWh "
            f"(₹{result.levelized_cost_per_mwh:,.2f}/MWh)\n"
            f"Lifetime energy: {result.total_energy_generated:,.2f} MWh"
        )

    # ── 3. Cost structure ──
    upfront = result.total_capex
    pv = result.present_value_of_costs
    share = upfront / (upfront + pv) if (upfront + pv) > 0 else 0.0
    sections.append("")
    sections.append("=" * 60)
    sections.append("COST STRUCTURE")
    sections.append("=" * 60)
    sections.append(
        f"Total CAPEX: ₹{upfront:,.2f}\n"
        f"Year-0 OPEX: ₹{result.annual_opex_year0:,.2f} (escalating 5%/year)\n"
        f"Annual financing payment: ₹{result.annual_financing_payment:,.2f}\n"
        f"Undiscounted O&M + financing: ₹{result.total_cost:,.2f}\n"
        f"Present value of O&M + financing: ₹{pv:,.2f}\n"
        f"CAPEX share of discounted lifecycle cost: {share:.1%}"
    )

    # ── 4. Diagnostics ──
    if result.warnings:
        sections.append("")
        sections.append("=" * 60)
        sections.append("WARNINGS")
        sections.append("=" * 60)
        sections.extend(f"- {w}" for w in result.warnings)

    return "\n".join(sections)


def generate_tornado_narrative(tornado: TornadoResult) -> str:
    """One line per tornado bar, most influential first."""
    lines = [
        f"Base LCOE ₹{tornado.base_lcoe_kwh:.4f}/kWh; "
        f"each parameter varied ±{tornado.variance_pct:g}%."
    ]
    for rank, bar in enumerate(tornado.bars, start=1):
        lines.append(
            f"{rank}. {bar.param_name}: ₹{bar.lcoe_at_low:.4f} → ₹{bar.lcoe_at_high:.4f}/kWh "
            f"(swing ₹{bar.spread:.4f})"
        )
    return "\n".join(lines)
