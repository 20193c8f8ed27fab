"""Comparison orchestrator: every vehicle of a scenario, end to end.

For each vehicle, in input order:
  loan payment → amortize(loan terms) → compute_expenses(..., loan_result)
  cash / lease → compute_expenses(...)

Each vehicle reads only its own inputs, so results are independent of
order and of the other vehicles.  Every call re-derives everything from
the scenario; nothing is cached between runs.

Entry point: ``run_comparison(scenario)``
"""

from __future__ import annotations

import logging

from vehicle_tco.config.fuel import FuelPrices
from vehicle_tco.config.loan import SolverConfig
from vehicle_tco.config.scenario import CostModelConfig, Scenario
from vehicle_tco.config.vehicle import LoanPayment, VehicleProfile
from vehicle_tco.engine.expenses import compute_expenses
from vehicle_tco.finance.loan import amortize
from vehicle_tco.models.results import ComparisonResult, VehicleResult

logger = logging.getLogger(__name__)


def evaluate_vehicle(
    vehicle: VehicleProfile,
    fuel_prices: FuelPrices,
    annual_distance: float,
    cost_model: CostModelConfig,
    solver: SolverConfig,
) -> VehicleResult:
    """Run the loan engine (when financed) and the cost aggregation for one vehicle."""
    loan = None
    if isinstance(vehicle.payment, LoanPayment):
        loan = amortize(vehicle.payment.to_loan_terms(vehicle.ownership_years), solver)

    costs = compute_expenses(vehicle, fuel_prices, annual_distance, loan, cost_model)
    logger.debug("%s: net cost %.2f over %d years", vehicle.name, costs.net_cost, vehicle.ownership_years)
    return VehicleResult(name=vehicle.name, costs=costs, loan=loan)


def run_comparison(scenario: Scenario) -> ComparisonResult:
    """Evaluate every vehicle and rank them by net cost."""
    results = [
        evaluate_vehicle(
            v, scenario.fuel_prices, scenario.annual_distance,
            scenario.cost_model, scenario.solver,
        )
        for v in scenario.vehicles
    ]

    if not results:
        return ComparisonResult(
            vehicles=[], annual_distance=scenario.annual_distance,
            cheapest_vehicle=None, most_expensive_vehicle=None, savings=0.0,
        )

    # min/max keep the first vehicle on ties
    cheapest = min(results, key=lambda r: r.costs.net_cost)
    priciest = max(results, key=lambda r: r.costs.net_cost)

    return ComparisonResult(
        vehicles=results,
        annual_distance=scenario.annual_distance,
        cheapest_vehicle=cheapest.name,
        most_expensive_vehicle=priciest.name,
        savings=priciest.costs.net_cost - cheapest.costs.net_cost,
    )
