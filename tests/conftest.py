"""Shared test fixtures — sample vehicles matching scenarios/base_case.yaml."""

from __future__ import annotations

import pytest

from vehicle_tco.config import (
    CashPayment,
    FuelPrices,
    LeasePayment,
    LoanPayment,
    LoanTerms,
    Scenario,
    VehicleProfile,
)


@pytest.fixture
def fuel_prices() -> FuelPrices:
    return FuelPrices(gasoline=1.8, diesel=1.7, electricity=0.15)


@pytest.fixture
def cash_vehicle() -> VehicleProfile:
    return VehicleProfile(
        name="Petrol Hatchback",
        purchase_price=25_000,
        energy_type="gasoline",
        efficiency=6.0,
        annual_maintenance=500,
        annual_insurance=800,
        annual_tax=200,
        ownership_years=5,
        payment=CashPayment(cash_payment=25_000),
    )


@pytest.fixture
def loan_vehicle() -> VehicleProfile:
    return VehicleProfile(
        name="Electric Compact",
        purchase_price=38_000,
        energy_type="electric",
        efficiency=16.0,
        annual_maintenance=300,
        annual_insurance=950,
        annual_tax=150,
        ownership_years=5,
        payment=LoanPayment(
            cash_payment=8_000,
            loan_amount=30_000,
            term_months=60,
            annual_rate_pct=4.9,
            monthly_fee=9,
            origination_fee=300,
        ),
    )


@pytest.fixture
def lease_vehicle() -> VehicleProfile:
    return VehicleProfile(
        name="Hybrid Estate",
        purchase_price=34_000,
        energy_type="hybrid",
        efficiency=4.5,
        annual_maintenance=0,
        annual_insurance=900,
        annual_tax=180,
        ownership_years=3,
        payment=LeasePayment(monthly_payment=420),
    )


@pytest.fixture
def loan_with_fees() -> LoanTerms:
    return LoanTerms(
        principal=20_000,
        annual_rate_pct=5.0,
        term_months=60,
        monthly_fee=10,
        origination_fee=1_000,
    )


@pytest.fixture
def scenario(
    cash_vehicle: VehicleProfile,
    loan_vehicle: VehicleProfile,
    lease_vehicle: VehicleProfile,
    fuel_prices: FuelPrices,
) -> Scenario:
    return Scenario(
        vehicles=[cash_vehicle, loan_vehicle, lease_vehicle],
        fuel_prices=fuel_prices,
        annual_distance=15_000,
    )
