"""Sensitivity / tornado analysis on net cost.

Vary one input at a time, recompute the vehicle from scratch, and measure
how far its net cost moves.  Bars come back sorted by swing, so the
assumptions that matter most for the comparison are on top.

Default sweep set:
  - fuel_prices.gasoline ± 20%
  - fuel_prices.diesel ± 20%
  - fuel_prices.electricity ± 20%
  - annual_distance ± 25%
  - cost_model.depreciation_rate_annual ± 30%
  - vehicle.annual_maintenance ± 20%
"""

from __future__ import annotations

from dataclasses import dataclass, field

from vehicle_tco.config.scenario import Scenario
from vehicle_tco.engine.orchestrator import evaluate_vehicle
from vehicle_tco.errors import InvalidInputError


@dataclass(frozen=True)
class TornadoBar:
    """One bar in the tornado chart."""

    param_name: str
    param_path: str
    """Dot-path into Scenario; ``vehicle.`` paths address the swept vehicle."""

    base_value: float
    low_value: float
    high_value: float
    net_cost_at_low: float
    net_cost_at_high: float
    delta_net_cost: float
    """abs(net_cost_at_high − net_cost_at_low), the total swing width."""


@dataclass
class SensitivityResult:
    """Complete sensitivity analysis output for one vehicle."""

    vehicle_name: str
    base_net_cost: float
    bars: list[TornadoBar] = field(default_factory=list)


DEFAULT_SWEEPS: list[tuple[str, str, float, float]] = [
    ("Gasoline price", "fuel_prices.gasoline", -0.20, 0.20),
    ("Diesel price", "fuel_prices.diesel", -0.20, 0.20),
    ("Electricity price", "fuel_prices.electricity", -0.20, 0.20),
    ("Annual distance", "annual_distance", -0.25, 0.25),
    ("Depreciation rate", "cost_model.depreciation_rate_annual", -0.30, 0.30),
    ("Maintenance", "vehicle.annual_maintenance", -0.20, 0.20),
]


def _with_value(scenario: Scenario, vehicle_index: int, path: str, value: float) -> Scenario:
    """Copy of ``scenario`` with one field replaced (validated on the way in)."""
    data = scenario.model_dump()
    parts = path.split(".")
    if parts[0] == "vehicle":
        target = data["vehicles"][vehicle_index]
        parts = parts[1:]
    else:
        target = data
    for part in parts[:-1]:
        target = target[part]
    if parts[-1] not in target:
        raise InvalidInputError(f"unknown sweep path: {path}")
    target[parts[-1]] = value
    return Scenario(**data)


def _get_value(scenario: Scenario, vehicle_index: int, path: str) -> float:
    parts = path.split(".")
    current: object = scenario
    if parts[0] == "vehicle":
        current = scenario.vehicles[vehicle_index]
        parts = parts[1:]
    for part in parts:
        current = getattr(current, part)
    return float(current)


def _net_cost(scenario: Scenario, vehicle_index: int) -> float:
    result = evaluate_vehicle(
        scenario.vehicles[vehicle_index], scenario.fuel_prices,
        scenario.annual_distance, scenario.cost_model, scenario.solver,
    )
    return result.costs.net_cost


def run_sensitivity(
    scenario: Scenario,
    vehicle_index: int = 0,
    sweeps: list[tuple[str, str, float, float]] | None = None,
) -> SensitivityResult:
    """Run one-at-a-time sweeps for ``scenario.vehicles[vehicle_index]``.

    Parameters
    ----------
    scenario : Scenario
        Base scenario.
    vehicle_index : int
        Which vehicle to analyse.
    sweeps : list[tuple[name, path, low_pct, high_pct]] | None
        Parameter sweeps. None = use DEFAULT_SWEEPS.
    """
    if not 0 <= vehicle_index < len(scenario.vehicles):
        raise InvalidInputError(f"vehicle_index {vehicle_index} out of range")
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS

    base_net = _net_cost(scenario, vehicle_index)
    bars: list[TornadoBar] = []

    for name, path, low_pct, high_pct in sweeps:
        try:
            base_val = _get_value(scenario, vehicle_index, path)
        except AttributeError:
            raise InvalidInputError(f"unknown sweep path: {path}") from None

        low_val = base_val * (1 + low_pct)
        high_val = base_val * (1 + high_pct)
        net_low = _net_cost(_with_value(scenario, vehicle_index, path, low_val), vehicle_index)
        net_high = _net_cost(_with_value(scenario, vehicle_index, path, high_val), vehicle_index)

        bars.append(TornadoBar(
            param_name=name,
            param_path=path,
            base_value=round(base_val, 4),
            low_value=round(low_val, 4),
            high_value=round(high_val, 4),
            net_cost_at_low=round(net_low, 2),
            net_cost_at_high=round(net_high, 2),
            delta_net_cost=round(abs(net_high - net_low), 2),
        ))

    bars.sort(key=lambda b: b.delta_net_cost, reverse=True)

    return SensitivityResult(
        vehicle_name=scenario.vehicles[vehicle_index].name,
        base_net_cost=round(base_net, 2),
        bars=bars,
    )
