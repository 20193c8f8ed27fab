"""Energy prices shared by every vehicle in a comparison."""

from pydantic import BaseModel, Field


class FuelPrices(BaseModel):
    """Per-unit prices for the three energy carriers."""

    gasoline: float = Field(default=1.8, ge=0, description="Gasoline price per liter")
    diesel: float = Field(default=1.8, ge=0, description="Diesel price per liter")
    electricity: float = Field(default=0.15, ge=0, description="Electricity price per kWh")
