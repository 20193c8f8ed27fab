"""Vehicle profile and payment-method variants."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, model_validator

from vehicle_tco.config.loan import LoanTerms

EnergyType = Literal["gasoline", "diesel", "electric", "hybrid"]


class CashPayment(BaseModel):
    """Vehicle bought outright."""

    method: Literal["cash"] = "cash"
    cash_payment: float = Field(default=0.0, ge=0, description="Amount paid in cash")


class LoanPayment(BaseModel):
    """Vehicle bought with an installment loan (optionally with a down payment)."""

    method: Literal["loan"] = "loan"
    cash_payment: float = Field(default=0.0, ge=0, description="Down payment in cash")
    loan_amount: float = Field(default=20_000.0, gt=0, description="Amount financed")
    term_months: int | None = Field(
        default=None, ge=1, description="Loan repayment period (months); None = ownership period",
    )
    annual_rate_pct: float = Field(default=0.0, ge=0, description="Nominal annual rate (%)")
    monthly_fee: float = Field(default=0.0, ge=0, description="Monthly loan fee")
    origination_fee: float = Field(default=0.0, ge=0, description="One-time start fee")

    @model_validator(mode="after")
    def _check_origination_fee(self) -> "LoanPayment":
        if self.origination_fee >= self.loan_amount:
            raise ValueError("origination_fee must be smaller than loan_amount")
        return self

    def resolved_term_months(self, ownership_years: int) -> int:
        return self.term_months or ownership_years * 12

    def to_loan_terms(self, ownership_years: int) -> LoanTerms:
        """Loan terms for the engine; a missing term runs over the ownership period."""
        return LoanTerms(
            principal=self.loan_amount,
            annual_rate_pct=self.annual_rate_pct,
            term_months=self.resolved_term_months(ownership_years),
            monthly_fee=self.monthly_fee,
            origination_fee=self.origination_fee,
        )


class LeasePayment(BaseModel):
    """Vehicle leased; nothing is owned at the end of the period."""

    method: Literal["lease"] = "lease"
    monthly_payment: float = Field(default=300.0, ge=0, description="Monthly lease payment")


PaymentMethod = Annotated[
    Union[CashPayment, LoanPayment, LeasePayment],
    Field(discriminator="method"),
]


class VehicleProfile(BaseModel):
    """One vehicle under comparison."""

    name: str = Field(default="Compact Sedan", description="Human label")
    purchase_price: float = Field(default=25_000.0, ge=0, description="Sticker price")
    energy_type: EnergyType = Field(default="gasoline", description="Energy carrier")
    efficiency: float = Field(
        default=6.0, ge=0,
        description="Consumption per 100 km: liters for gasoline/diesel/hybrid, kWh for electric",
    )
    annual_maintenance: float = Field(default=500.0, ge=0)
    annual_insurance: float = Field(default=800.0, ge=0)
    annual_tax: float = Field(default=200.0, ge=0)
    ownership_years: int = Field(default=5, ge=1, description="Ownership period (full years)")
    payment: PaymentMethod = Field(default_factory=CashPayment)

    @property
    def payment_method(self) -> str:
        return self.payment.method
