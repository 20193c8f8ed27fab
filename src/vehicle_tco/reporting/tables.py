"""Row-oriented comparison tables for spreadsheet and document export.

Consumers get plain ``headers`` + ``rows`` (first cell = label, one cell
per vehicle), already in display order.  Numbers stay unrounded; use
``format_currency`` when rendering text.
"""

from __future__ import annotations

from pydantic import BaseModel

from vehicle_tco.config.vehicle import LoanPayment, VehicleProfile
from vehicle_tco.errors import InvalidInputError
from vehicle_tco.models.results import ComparisonResult, CostBreakdown, LoanResult

Cell = str | float | int

# Fixed category order expected by the export layer.
COST_CATEGORIES: list[tuple[str, str]] = [
    ("Purchase Price", "purchase_cost"),
    ("Fuel Cost", "fuel_cost"),
    ("Maintenance Cost", "maintenance_cost"),
    ("Insurance Cost", "insurance_cost"),
    ("Tax Cost", "tax_cost"),
    ("Financing Cost", "financing_cost"),
    ("Total Cost", "total_cost"),
    ("Residual Value", "residual_value"),
    ("Net Cost", "net_cost"),
    ("Cost per Year", "cost_per_year"),
    ("Cost per Month", "cost_per_month"),
]


class ComparisonTable(BaseModel):
    """Array-of-rows view of a comparison."""

    headers: list[str]
    rows: list[list[Cell]]
    detail_rows: list[list[Cell]] = []


def format_currency(value: float, symbol: str = "€") -> str:
    """Whole-unit currency string with thousands separators."""
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.0f}"


def efficiency_label(vehicle: VehicleProfile) -> str:
    unit = "kWh/100km" if vehicle.energy_type == "electric" else "L/100km"
    return f"{vehicle.efficiency:g} {unit}"


def build_comparison_table(
    vehicles: list[VehicleProfile],
    breakdowns: list[CostBreakdown],
) -> ComparisonTable:
    """Cost categories by vehicle, plus a block of vehicle details."""
    if len(vehicles) != len(breakdowns):
        raise InvalidInputError("vehicles and breakdowns must have the same length")

    headers = ["Expense Category", *(v.name for v in vehicles)]
    rows: list[list[Cell]] = []
    for label, attr in COST_CATEGORIES:
        # a missing financing cost is shown as 0
        rows.append([label, *((getattr(b, attr) or 0.0) for b in breakdowns)])

    detail_rows: list[list[Cell]] = [
        ["Fuel Type", *(v.energy_type for v in vehicles)],
        ["Fuel Efficiency", *(efficiency_label(v) for v in vehicles)],
        ["Ownership Period", *(f"{v.ownership_years} years" for v in vehicles)],
        ["Payment Method", *(v.payment_method for v in vehicles)],
        ["Cash Payment", *(getattr(v.payment, "cash_payment", 0.0) for v in vehicles)],
    ]

    return ComparisonTable(headers=headers, rows=rows, detail_rows=detail_rows)


def build_loan_comparison_table(
    vehicles: list[VehicleProfile],
    loans: list[LoanResult | None],
) -> ComparisonTable | None:
    """Loan terms and results side by side, loan-financed vehicles only.

    Returns None when no vehicle is financed with a loan.
    """
    if len(vehicles) != len(loans):
        raise InvalidInputError("vehicles and loans must have the same length")

    pairs = [
        (v, loan) for v, loan in zip(vehicles, loans)
        if isinstance(v.payment, LoanPayment) and loan is not None
    ]
    if not pairs:
        return None

    def row(label: str, values: list[Cell]) -> list[Cell]:
        return [label, *values]

    rows = [
        row("Loan Amount", [v.payment.loan_amount for v, _ in pairs]),
        row("Loan Term (months)", [v.payment.resolved_term_months(v.ownership_years) for v, _ in pairs]),
        row("Nominal Interest Rate (%)", [v.payment.annual_rate_pct for v, _ in pairs]),
        row("Effective Interest Rate (%)", [loan.effective_interest_rate for _, loan in pairs]),
        row("Monthly Payment", [loan.monthly_payment for _, loan in pairs]),
        row("Monthly Fee", [v.payment.monthly_fee for v, _ in pairs]),
        row("Start Fee", [v.payment.origination_fee for v, _ in pairs]),
        row("Total Payment", [loan.total_payment for _, loan in pairs]),
        row("Total Interest and Fees", [loan.total_interest for _, loan in pairs]),
    ]
    return ComparisonTable(headers=["Loan Details", *(v.name for v, _ in pairs)], rows=rows)


def tables_for(vehicles: list[VehicleProfile], result: ComparisonResult) -> dict[str, ComparisonTable | None]:
    """Both tables for a finished comparison run."""
    return {
        "costs": build_comparison_table(vehicles, [r.costs for r in result.vehicles]),
        "loans": build_loan_comparison_table(vehicles, [r.loan for r in result.vehicles]),
    }
