"""Engine: cost aggregation and comparison runs."""

from vehicle_tco.engine.expenses import (
    compute_annual_fuel_cost,
    compute_expenses,
    compute_residual_value,
)
from vehicle_tco.engine.orchestrator import evaluate_vehicle, run_comparison

__all__ = [
    "compute_annual_fuel_cost",
    "compute_expenses",
    "compute_residual_value",
    "evaluate_vehicle",
    "run_comparison",
]
