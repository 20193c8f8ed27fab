"""Result types — the contract between the engine and its consumers.

Nothing here is rounded: amortization rows must sum back to the principal
and cost categories must add up to the total exactly, so rounding is left
to presentation code (see ``reporting.tables``).
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


# ═══════════════════════════════════════════════════════════════════════════
# Loan engine
# ═══════════════════════════════════════════════════════════════════════════

class AmortizationRow(BaseModel):
    """One month of the loan ledger."""

    month: int
    payment: float
    """Total installment = principal + interest + monthly fee."""
    principal: float
    interest: float
    monthly_fee: float
    remaining_balance: float
    """Balance after this month's principal, clamped at zero."""


class EffectiveRate(BaseModel):
    """Outcome of the APR solve.

    ``status == "unreliable"`` means the Newton iteration stopped without
    meeting tolerance; ``rate_pct`` then holds the last estimate only.
    """

    rate_pct: float
    """Annual effective rate in percent."""

    status: Literal["converged", "unreliable"]
    iterations: int
    reason: Literal["flat_derivative", "iteration_cap", "non_finite"] | None = None

    @property
    def converged(self) -> bool:
        return self.status == "converged"


class LoanResult(BaseModel):
    """Everything derived from one set of loan terms."""

    monthly_payment: float
    """Base (principal + interest) payment plus the monthly fee."""

    total_payment: float
    """monthly_payment × term + origination fee."""

    total_interest: float
    """Cost of financing: interest plus every fee (not literal bank interest)."""

    total_fees: float
    """origination fee + monthly fee × term."""

    effective_rate: EffectiveRate
    amortization_schedule: list[AmortizationRow]

    @property
    def effective_interest_rate(self) -> float:
        """Effective annual rate in percent."""
        return self.effective_rate.rate_pct


# ═══════════════════════════════════════════════════════════════════════════
# Expense aggregation
# ═══════════════════════════════════════════════════════════════════════════

class CostBreakdown(BaseModel):
    """Ownership-period cost of one vehicle, comparable across vehicles.

    Invariants:
      total_cost = purchase + fuel + maintenance + insurance + tax + financing
      net_cost   = total_cost − residual_value
    """

    payment_method: Literal["cash", "loan", "lease"]
    purchase_cost: float
    fuel_cost: float
    maintenance_cost: float
    insurance_cost: float
    tax_cost: float
    residual_value: float
    total_cost: float
    net_cost: float
    cost_per_year: float
    cost_per_month: float
    financing_cost: float | None = None
    """Loan financing cost or total lease payments.  None unless strictly positive."""


# ═══════════════════════════════════════════════════════════════════════════
# Comparison run
# ═══════════════════════════════════════════════════════════════════════════

class VehicleResult(BaseModel):
    """Engine output for one vehicle in a comparison."""

    name: str
    costs: CostBreakdown
    loan: LoanResult | None = None
    """Populated only for loan-financed vehicles."""


class ComparisonResult(BaseModel):
    """All vehicles of a scenario, in input order."""

    vehicles: list[VehicleResult]
    annual_distance: float

    cheapest_vehicle: str | None
    """Name of the vehicle with the lowest net cost."""

    most_expensive_vehicle: str | None
    savings: float
    """Net cost of the most expensive vehicle minus the cheapest."""
