"""Loan terms and APR solver settings."""

from pydantic import BaseModel, Field, model_validator


class LoanTerms(BaseModel):
    """Inputs to one amortizing installment loan.

    ``annual_rate_pct`` is a percentage (5.0 means 5 %), matching how
    lenders quote nominal rates.  Fees are in currency units.
    """

    principal: float = Field(default=20_000.0, ge=0, description="Amount borrowed")
    annual_rate_pct: float = Field(
        default=5.0, ge=0,
        description="Nominal annual interest rate in percent",
    )
    term_months: int = Field(default=60, ge=1, description="Repayment period in months")
    monthly_fee: float = Field(default=0.0, ge=0, description="Fixed fee added to every installment")
    origination_fee: float = Field(
        default=0.0, ge=0,
        description="One-time fee deducted from the disbursed amount. "
                    "Must be smaller than the principal.",
    )

    @model_validator(mode="after")
    def _check_fees(self) -> "LoanTerms":
        if self.principal == 0:
            if self.origination_fee > 0 or self.monthly_fee > 0:
                raise ValueError("a zero-principal loan cannot carry fees")
        elif self.origination_fee >= self.principal:
            raise ValueError("origination_fee must be smaller than principal")
        return self


class SolverConfig(BaseModel):
    """Newton iteration settings for the effective-rate solve."""

    max_iterations: int = Field(default=50, ge=1, description="Iteration cap")
    tolerance: float = Field(
        default=1e-4, gt=0,
        description="Stop when |f(rate)| or the step size falls below this",
    )
    derivative_step: float = Field(
        default=1e-4, gt=0,
        description="h in the forward difference (f(rate + h) − f(rate)) / h",
    )
    derivative_guard: float = Field(
        default=1e-10, ge=0,
        description="Derivatives smaller than this in magnitude stop the solve "
                    "and mark the estimate unreliable.",
    )
    strict: bool = Field(
        default=False,
        description="Raise NonConvergenceError instead of returning an unreliable estimate.",
    )
