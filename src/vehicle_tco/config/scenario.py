"""Top-level scenario: every vehicle plus the shared assumptions."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from vehicle_tco.config.fuel import FuelPrices
from vehicle_tco.config.loan import SolverConfig
from vehicle_tco.config.vehicle import VehicleProfile

DEFAULT_ANNUAL_DISTANCE = 15_000.0


class CostModelConfig(BaseModel):
    """Modeling constants for depreciation and the hybrid fuel split."""

    depreciation_rate_annual: float = Field(
        default=0.10, ge=0, lt=1.0,
        description="Compounding value loss per full year of ownership",
    )
    hybrid_liquid_share: float = Field(
        default=0.70, ge=0, le=1.0,
        description="Share of a hybrid's stated consumption billed as gasoline; "
                    "the remainder is billed as electricity.",
    )


class Scenario(BaseModel):
    """Complete input bundle for one comparison run."""

    vehicles: list[VehicleProfile] = Field(default_factory=lambda: [VehicleProfile()])
    fuel_prices: FuelPrices = Field(default_factory=FuelPrices)
    annual_distance: float = Field(
        default=DEFAULT_ANNUAL_DISTANCE, gt=0,
        description="Distance driven per year (km)",
    )
    cost_model: CostModelConfig = Field(default_factory=CostModelConfig)
    solver: SolverConfig = Field(default_factory=SolverConfig)


def load_scenario(path: str | Path) -> Scenario:
    """Read a YAML scenario file."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    return Scenario(**data)
