"""Tests for one-at-a-time sensitivity sweeps on net cost."""

import pytest

from vehicle_tco.config import Scenario
from vehicle_tco.errors import InvalidInputError
from vehicle_tco.finance.sensitivity import DEFAULT_SWEEPS, run_sensitivity


class TestRunSensitivity:
    def test_base_net_cost(self, scenario: Scenario):
        result = run_sensitivity(scenario, 0)
        assert result.vehicle_name == "Petrol Hatchback"
        assert result.base_net_cost == pytest.approx(40_600 - 25_000 * 0.9 ** 5, abs=0.01)

    def test_one_bar_per_sweep(self, scenario: Scenario):
        result = run_sensitivity(scenario, 0)
        assert len(result.bars) == len(DEFAULT_SWEEPS)

    def test_sorted_by_swing(self, scenario: Scenario):
        bars = run_sensitivity(scenario, 0).bars
        swings = [b.delta_net_cost for b in bars]
        assert swings == sorted(swings, reverse=True)

    def test_gasoline_swing(self, scenario: Scenario):
        """±20% on an 8 100 fuel bill moves net cost by 3 240 end to end."""
        bars = {b.param_path: b for b in run_sensitivity(scenario, 0).bars}
        assert bars["fuel_prices.gasoline"].delta_net_cost == pytest.approx(3_240, abs=0.01)
        assert bars["fuel_prices.electricity"].delta_net_cost == 0

    def test_depreciation_dominates_for_cash_car(self, scenario: Scenario):
        bars = run_sensitivity(scenario, 0).bars
        assert bars[0].param_path == "cost_model.depreciation_rate_annual"

    def test_vehicle_path_targets_selected_vehicle(self, scenario: Scenario):
        sweeps = [("Maintenance", "vehicle.annual_maintenance", -0.5, 0.5)]
        bar = run_sensitivity(scenario, 1, sweeps).bars[0]
        assert bar.base_value == 300
        assert bar.delta_net_cost == pytest.approx(300 * 5)

    def test_input_scenario_untouched(self, scenario: Scenario):
        before = scenario.model_dump()
        run_sensitivity(scenario, 0)
        assert scenario.model_dump() == before

    def test_unknown_path_rejected(self, scenario: Scenario):
        with pytest.raises(InvalidInputError):
            run_sensitivity(scenario, 0, [("Bogus", "fuel_prices.hydrogen", -0.1, 0.1)])

    def test_vehicle_index_out_of_range(self, scenario: Scenario):
        with pytest.raises(InvalidInputError):
            run_sensitivity(scenario, 7)
