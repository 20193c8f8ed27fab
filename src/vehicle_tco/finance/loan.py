"""Installment loan engine: payment, totals, APR, amortization schedule.

Key formulas (r = annual_rate_pct / 100 / 12, n = term_months):
  base payment  = P × r × (1+r)^n / ((1+r)^n − 1)      (P / n when r = 0)
  installment   = base payment + monthly fee
  total payment = installment × n + origination fee
  total interest = (base payment × n − P) + origination fee + monthly fee × n
"""

from __future__ import annotations

from vehicle_tco.config.loan import LoanTerms, SolverConfig
from vehicle_tco.errors import NonConvergenceError
from vehicle_tco.finance.apr import solve_effective_rate
from vehicle_tco.models.results import AmortizationRow, LoanResult


def compute_base_payment(principal: float, annual_rate_pct: float, term_months: int) -> float:
    """Principal + interest payment per month (no fees)."""
    if annual_rate_pct == 0:
        return principal / term_months

    monthly_rate = annual_rate_pct / 100 / 12
    factor = (1 + monthly_rate) ** term_months
    return principal * monthly_rate * factor / (factor - 1)


def build_amortization_schedule(
    principal: float,
    annual_rate_pct: float,
    term_months: int,
    base_payment: float,
    monthly_fee: float = 0.0,
) -> list[AmortizationRow]:
    """Month-by-month ledger.

    The final month retires whatever balance is left so the principal
    column sums back to ``principal`` and the closing balance is exactly 0.
    """
    monthly_rate = annual_rate_pct / 100 / 12
    installment = base_payment + monthly_fee
    balance = principal
    rows: list[AmortizationRow] = []

    for month in range(1, term_months + 1):
        interest = balance * monthly_rate
        principal_part = base_payment - interest
        if month == term_months or principal_part > balance:
            principal_part = balance  # don't overshoot
        balance = max(balance - principal_part, 0.0)

        rows.append(AmortizationRow(
            month=month,
            payment=installment,
            principal=principal_part,
            interest=interest,
            monthly_fee=monthly_fee,
            remaining_balance=balance,
        ))

    return rows


def amortize(terms: LoanTerms, solver: SolverConfig | None = None) -> LoanResult:
    """Compute payment, totals, effective rate and schedule for ``terms``.

    Raises
    ------
    NonConvergenceError
        Only when ``solver.strict`` is set and the APR solve is unreliable.
    """
    solver = solver or SolverConfig()
    n = terms.term_months

    base_payment = compute_base_payment(terms.principal, terms.annual_rate_pct, n)
    installment = base_payment + terms.monthly_fee

    total_payment = installment * n + terms.origination_fee
    base_interest = base_payment * n - terms.principal
    total_fees = terms.origination_fee + terms.monthly_fee * n

    effective_rate = solve_effective_rate(
        monthly_payment=installment,
        term_months=n,
        disbursed=terms.principal - terms.origination_fee,
        guess=terms.annual_rate_pct / 100,
        config=solver,
    )
    if solver.strict and not effective_rate.converged:
        raise NonConvergenceError(effective_rate)

    schedule = build_amortization_schedule(
        terms.principal, terms.annual_rate_pct, n, base_payment, terms.monthly_fee,
    )

    return LoanResult(
        monthly_payment=installment,
        total_payment=total_payment,
        total_interest=base_interest + total_fees,
        total_fees=total_fees,
        effective_rate=effective_rate,
        amortization_schedule=schedule,
    )
