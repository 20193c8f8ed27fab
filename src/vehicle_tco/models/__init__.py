"""Result models — engine output contracts."""

from vehicle_tco.models.results import (
    AmortizationRow,
    ComparisonResult,
    CostBreakdown,
    EffectiveRate,
    LoanResult,
    VehicleResult,
)

__all__ = [
    "AmortizationRow",
    "ComparisonResult",
    "CostBreakdown",
    "EffectiveRate",
    "LoanResult",
    "VehicleResult",
]
