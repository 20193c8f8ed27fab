"""Ownership-cost aggregation: one vehicle, one CostBreakdown.

Key formulas (years = ownership_years):
  annual fuel  = efficiency × annual_distance × unit_price / 100
  hybrid fuel  = same efficiency billed 70 % as gasoline + 30 % as electricity
  residual     = purchase_price × (1 − depreciation)^years   (0 when leased)
  total        = purchase + fuel + maintenance + insurance + tax + financing
  net          = total − residual

Purchase and financing depend on the payment method:
  cash   → purchase price, no financing
  loan   → purchase price, loan total interest (interest + fees)
  lease  → 0, lease payments over the ownership period
"""

from __future__ import annotations

from vehicle_tco.config.fuel import FuelPrices
from vehicle_tco.config.scenario import DEFAULT_ANNUAL_DISTANCE, CostModelConfig
from vehicle_tco.config.vehicle import (
    CashPayment,
    EnergyType,
    LeasePayment,
    LoanPayment,
    VehicleProfile,
)
from vehicle_tco.errors import InvalidInputError
from vehicle_tco.finance.loan import amortize
from vehicle_tco.models.results import CostBreakdown, LoanResult


def compute_annual_fuel_cost(
    energy_type: EnergyType,
    efficiency: float,
    annual_distance: float,
    fuel_prices: FuelPrices,
    hybrid_liquid_share: float = 0.70,
) -> float:
    """Energy cost for one year of driving.

    The hybrid split applies one stated consumption figure to both
    carriers; it is an estimate of mixed-mode driving, not a model of a
    vehicle with separate liquid and electric consumption ratings.
    """
    if energy_type == "gasoline":
        return efficiency * annual_distance * fuel_prices.gasoline / 100
    if energy_type == "diesel":
        return efficiency * annual_distance * fuel_prices.diesel / 100
    if energy_type == "electric":
        return efficiency * annual_distance * fuel_prices.electricity / 100

    liquid = efficiency * hybrid_liquid_share * annual_distance * fuel_prices.gasoline / 100
    electric = efficiency * (1 - hybrid_liquid_share) * annual_distance * fuel_prices.electricity / 100
    return liquid + electric


def compute_residual_value(
    purchase_price: float,
    ownership_years: int,
    depreciation_rate_annual: float = 0.10,
) -> float:
    """Value left after compounding depreciation over full years of ownership."""
    return purchase_price * (1 - depreciation_rate_annual) ** ownership_years


def compute_expenses(
    vehicle: VehicleProfile,
    fuel_prices: FuelPrices,
    annual_distance: float = DEFAULT_ANNUAL_DISTANCE,
    loan_result: LoanResult | None = None,
    cost_model: CostModelConfig | None = None,
) -> CostBreakdown:
    """Aggregate every cost category over the vehicle's ownership period.

    For a loan-financed vehicle, pass the ``amortize`` result as
    ``loan_result``; when omitted it is computed from the vehicle's own
    loan fields.
    """
    if annual_distance <= 0:
        raise InvalidInputError(f"annual_distance must be positive, got {annual_distance}")
    cost_model = cost_model or CostModelConfig()
    years = vehicle.ownership_years
    payment = vehicle.payment

    annual_fuel = compute_annual_fuel_cost(
        vehicle.energy_type, vehicle.efficiency, annual_distance,
        fuel_prices, cost_model.hybrid_liquid_share,
    )
    fuel_cost = annual_fuel * years
    maintenance_cost = vehicle.annual_maintenance * years
    insurance_cost = vehicle.annual_insurance * years
    tax_cost = vehicle.annual_tax * years

    if isinstance(payment, LeasePayment):
        purchase_cost = 0.0
        residual_value = 0.0
        financing_cost = payment.monthly_payment * years * 12
    else:
        purchase_cost = vehicle.purchase_price
        residual_value = compute_residual_value(
            vehicle.purchase_price, years, cost_model.depreciation_rate_annual,
        )
        financing_cost = 0.0
        if isinstance(payment, LoanPayment):
            if loan_result is None:
                loan_result = amortize(payment.to_loan_terms(years))
            financing_cost = loan_result.total_interest
        elif not isinstance(payment, CashPayment):
            raise InvalidInputError(f"unknown payment method: {payment!r}")

    total_cost = (
        purchase_cost
        + fuel_cost
        + maintenance_cost
        + insurance_cost
        + tax_cost
        + financing_cost
    )
    net_cost = total_cost - residual_value
    cost_per_year = net_cost / years

    return CostBreakdown(
        payment_method=payment.method,
        purchase_cost=purchase_cost,
        fuel_cost=fuel_cost,
        maintenance_cost=maintenance_cost,
        insurance_cost=insurance_cost,
        tax_cost=tax_cost,
        residual_value=residual_value,
        total_cost=total_cost,
        net_cost=net_cost,
        cost_per_year=cost_per_year,
        cost_per_month=cost_per_year / 12,
        financing_cost=financing_cost if financing_cost > 0 else None,
    )
