"""Configuration models — all engine inputs."""

from vehicle_tco.config.fuel import FuelPrices
from vehicle_tco.config.loan import LoanTerms, SolverConfig
from vehicle_tco.config.vehicle import (
    CashPayment,
    EnergyType,
    LeasePayment,
    LoanPayment,
    VehicleProfile,
)
from vehicle_tco.config.scenario import (
    DEFAULT_ANNUAL_DISTANCE,
    CostModelConfig,
    Scenario,
    load_scenario,
)

__all__ = [
    "FuelPrices",
    "LoanTerms",
    "SolverConfig",
    "CashPayment",
    "LoanPayment",
    "LeasePayment",
    "EnergyType",
    "VehicleProfile",
    "CostModelConfig",
    "Scenario",
    "DEFAULT_ANNUAL_DISTANCE",
    "load_scenario",
]
