"""Narrative generator: plain-English summary of a comparison run."""

from __future__ import annotations

from vehicle_tco.models.results import ComparisonResult, VehicleResult
from vehicle_tco.reporting.tables import format_currency


def _vehicle_lines(r: VehicleResult) -> list[str]:
    c = r.costs
    lines = [
        f"{r.name} ({c.payment_method})",
        f"  Net cost: {format_currency(c.net_cost)} "
        f"({format_currency(c.cost_per_year)}/year, {format_currency(c.cost_per_month)}/month)",
        f"  Fuel: {format_currency(c.fuel_cost)}  Residual value: {format_currency(c.residual_value)}",
    ]
    if c.financing_cost is not None:
        lines.append(f"  Financing: {format_currency(c.financing_cost)}")
    if r.loan is not None:
        rate = r.loan.effective_rate
        flag = "" if rate.converged else f" (UNRELIABLE: {rate.reason})"
        lines.append(
            f"  Loan: {format_currency(r.loan.monthly_payment)}/month, "
            f"effective rate {rate.rate_pct:.2f}%{flag}"
        )
    return lines


def generate_comparison_narrative(result: ComparisonResult) -> str:
    """Ranking by net cost followed by one block per vehicle."""
    if not result.vehicles:
        return "No vehicles to compare."

    sections: list[str] = []
    sections.append("=" * 60)
    sections.append("VEHICLE COST COMPARISON")
    sections.append("=" * 60)
    sections.append(f"Annual distance: {result.annual_distance:,.0f} km")

    if len(result.vehicles) > 1:
        sections.append(
            f"Cheapest overall: {result.cheapest_vehicle}, saving "
            f"{format_currency(result.savings)} versus {result.most_expensive_vehicle}."
        )

    ranked = sorted(result.vehicles, key=lambda r: r.costs.net_cost)
    for position, r in enumerate(ranked, start=1):
        sections.append("")
        block = _vehicle_lines(r)
        block[0] = f"{position}. {block[0]}"
        sections.extend(block)

    return "\n".join(sections)
