"""Tests for the comparison orchestrator and YAML scenarios."""

from pathlib import Path

import pytest

from vehicle_tco.config import LoanPayment, Scenario, SolverConfig, VehicleProfile, load_scenario
from vehicle_tco.engine.expenses import compute_expenses
from vehicle_tco.engine.orchestrator import run_comparison
from vehicle_tco.errors import NonConvergenceError

BASE_CASE = Path(__file__).parent.parent / "scenarios" / "base_case.yaml"


class TestRunComparison:
    def test_results_keep_input_order(self, scenario: Scenario):
        result = run_comparison(scenario)
        assert [r.name for r in result.vehicles] == [v.name for v in scenario.vehicles]

    def test_loan_attached_only_for_loan_vehicles(self, scenario: Scenario):
        result = run_comparison(scenario)
        assert [r.loan is not None for r in result.vehicles] == [False, True, False]

    def test_matches_direct_aggregation(self, scenario: Scenario):
        result = run_comparison(scenario)
        for vehicle, r in zip(scenario.vehicles, result.vehicles):
            direct = compute_expenses(vehicle, scenario.fuel_prices, scenario.annual_distance)
            assert r.costs == direct

    def test_cheapest_and_savings(self, scenario: Scenario):
        result = run_comparison(scenario)
        net = {r.name: r.costs.net_cost for r in result.vehicles}

        assert result.cheapest_vehicle == min(net, key=net.get)
        assert result.most_expensive_vehicle == max(net, key=net.get)
        assert result.savings == pytest.approx(max(net.values()) - min(net.values()))

    def test_independent_of_other_vehicles(self, scenario: Scenario):
        alone = run_comparison(scenario.model_copy(update={"vehicles": scenario.vehicles[1:2]}))
        together = run_comparison(scenario)
        assert alone.vehicles[0] == together.vehicles[1]

    def test_recomputes_on_fuel_price_change(self, scenario: Scenario):
        before = run_comparison(scenario)
        pricier = scenario.model_copy(
            update={"fuel_prices": scenario.fuel_prices.model_copy(update={"gasoline": 2.5})},
        )
        after = run_comparison(pricier)
        assert after.vehicles[0].costs.fuel_cost > before.vehicles[0].costs.fuel_cost
        assert after.vehicles[1].costs == before.vehicles[1].costs  # electric unaffected

    def test_empty_scenario(self):
        result = run_comparison(Scenario(vehicles=[]))
        assert result.vehicles == []
        assert result.cheapest_vehicle is None
        assert result.savings == 0

    def test_strict_solver_propagates(self):
        vehicle = VehicleProfile(
            payment=LoanPayment(loan_amount=20_000, origination_fee=1_000, monthly_fee=10),
        )
        scenario = Scenario(vehicles=[vehicle], solver=SolverConfig(max_iterations=1, strict=True))
        with pytest.raises(NonConvergenceError):
            run_comparison(scenario)

    def test_unreliable_rate_surfaces_in_result(self):
        vehicle = VehicleProfile(
            payment=LoanPayment(loan_amount=20_000, origination_fee=1_000, monthly_fee=10),
        )
        result = run_comparison(Scenario(vehicles=[vehicle], solver=SolverConfig(max_iterations=1)))
        assert result.vehicles[0].loan.effective_rate.status == "unreliable"

    def test_loan_without_term_or_rate_uses_ownership_period_at_zero_rate(self):
        vehicle = VehicleProfile(
            purchase_price=20_000, ownership_years=3,
            payment={"method": "loan", "loan_amount": 20_000},
        )
        loan = run_comparison(Scenario(vehicles=[vehicle])).vehicles[0].loan

        assert len(loan.amortization_schedule) == 36
        assert loan.monthly_payment == pytest.approx(20_000 / 36)
        assert loan.total_interest == pytest.approx(0, abs=1e-6)
        assert loan.effective_interest_rate == pytest.approx(0, abs=0.01)

    def test_explicit_loan_term_wins_over_ownership_period(self):
        vehicle = VehicleProfile(
            ownership_years=3,
            payment=LoanPayment(loan_amount=20_000, term_months=48, annual_rate_pct=4),
        )
        loan = run_comparison(Scenario(vehicles=[vehicle])).vehicles[0].loan
        assert len(loan.amortization_schedule) == 48


class TestYamlScenario:
    def test_base_case_loads(self):
        scenario = load_scenario(BASE_CASE)
        assert len(scenario.vehicles) == 3
        assert [v.payment_method for v in scenario.vehicles] == ["cash", "loan", "lease"]
        assert scenario.annual_distance == 15_000

    def test_base_case_runs(self):
        result = run_comparison(load_scenario(BASE_CASE))
        cash = result.vehicles[0].costs
        assert cash.total_cost == pytest.approx(40_600)
        assert result.vehicles[1].loan.effective_rate.converged
