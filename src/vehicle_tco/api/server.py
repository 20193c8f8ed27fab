"""FastAPI server — HTTP access to the loan engine and cost comparison.

Run with:
    uvicorn vehicle_tco.api.server:app --reload --port 8000

Or:
    python -m vehicle_tco.api.server

Endpoints:
    GET  /health             — liveness probe
    GET  /                   — welcome message
    GET  /schema             — JSON Schema for Scenario inputs
    GET  /scenario/defaults  — complete default scenario as JSON
    POST /loan               — payment, APR and amortization for one loan
    POST /compare            — cost comparison (partial or full Scenario)
    POST /sensitivity        — one-at-a-time sweeps → tornado data
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, ValidationError

from vehicle_tco.api.narrative import generate_comparison_narrative
from vehicle_tco.config.loan import LoanTerms, SolverConfig
from vehicle_tco.config.scenario import Scenario
from vehicle_tco.engine.orchestrator import run_comparison
from vehicle_tco.errors import InvalidInputError, NonConvergenceError
from vehicle_tco.finance.loan import amortize
from vehicle_tco.finance.sensitivity import run_sensitivity
from vehicle_tco.models.results import ComparisonResult, LoanResult
from vehicle_tco.reporting.tables import ComparisonTable, tables_for
from vehicle_tco.settings import get_settings

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title=get_settings().app_name,
    version="1.0",
    description=(
        "Compare the total cost of ownership of several vehicles bought with "
        "cash, an installment loan, or a lease."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class LoanRequest(BaseModel):
    """Request body for /loan."""
    terms: LoanTerms
    solver: SolverConfig = Field(default_factory=SolverConfig)


class CompareRequest(BaseModel):
    """Request body for /compare. All fields optional; defaults fill the rest."""
    scenario: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full Scenario JSON. Missing fields use defaults. "
                    "Example: {'annual_distance': 20000, 'fuel_prices': {'gasoline': 2.0}}",
    )


class SensitivityRequest(BaseModel):
    """Request body for /sensitivity."""
    scenario: dict[str, Any] = Field(default_factory=dict)
    vehicle_index: int = Field(default=0, ge=0)
    sweep_params: list[dict[str, Any]] | None = Field(
        default=None,
        description="Optional override of sweep parameters. "
                    "Format: [{'name': 'Gasoline', 'path': 'fuel_prices.gasoline', 'low_pct': -0.2, 'high_pct': 0.2}]",
    )


class CompareResponse(BaseModel):
    """Response from /compare."""
    result: ComparisonResult
    cost_table: ComparisonTable
    loan_table: ComparisonTable | None = None
    narrative: str = ""


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def get_default_scenario() -> dict[str, Any]:
    return Scenario().model_dump()


def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


def _build_scenario(overrides: dict[str, Any]) -> Scenario:
    """Build a Scenario from partial overrides merged onto defaults.

    Raises HTTP 422 when the merged scenario fails validation.
    """
    defaults = get_default_scenario()
    _deep_merge(defaults, overrides)
    try:
        return Scenario(**defaults)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False),
        ) from exc


def _non_convergence(exc: NonConvergenceError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"error": str(exc), "effective_rate": exc.rate.model_dump()},
    )


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    return {
        "name": get_settings().app_name,
        "version": "1.0",
        "docs": "GET /docs (interactive Swagger UI)",
        "start_here": "GET /scenario/defaults, then POST /compare",
    }


@app.get("/schema")
def get_schema():
    """Full JSON Schema for Scenario: all input parameters with types, defaults, constraints."""
    return Scenario.model_json_schema()


@app.get("/scenario/defaults")
def get_defaults():
    """Complete default Scenario as JSON. Use as a starting point for modifications."""
    return get_default_scenario()


@app.post("/loan", response_model=LoanResult)
def calculate_loan(req: LoanRequest):
    """Monthly payment, totals, effective rate and amortization schedule."""
    try:
        return amortize(req.terms, req.solver)
    except NonConvergenceError as exc:
        raise _non_convergence(exc) from exc


@app.post("/compare", response_model=CompareResponse)
def compare(req: CompareRequest):
    """Compare every vehicle of the scenario by net cost of ownership.

    Example minimal request:
    ```json
    {"scenario": {"vehicles": [{"name": "EV", "energy_type": "electric", "efficiency": 16}]}}
    ```
    """
    scenario = _build_scenario(req.scenario)
    try:
        result = run_comparison(scenario)
    except NonConvergenceError as exc:
        raise _non_convergence(exc) from exc

    tables = tables_for(scenario.vehicles, result)
    return CompareResponse(
        result=result,
        cost_table=tables["costs"],
        loan_table=tables["loans"],
        narrative=generate_comparison_narrative(result),
    )


@app.post("/sensitivity")
def sensitivity(req: SensitivityRequest):
    """Vary one assumption at a time and rank them by net-cost swing."""
    scenario = _build_scenario(req.scenario)

    sweeps = None
    if req.sweep_params:
        sweeps = [
            (sp.get("name", sp["path"]), sp["path"], sp.get("low_pct", -0.2), sp.get("high_pct", 0.2))
            for sp in req.sweep_params
        ]

    try:
        result = run_sensitivity(scenario, req.vehicle_index, sweeps)
    except (InvalidInputError, ValidationError) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return {
        "vehicle_name": result.vehicle_name,
        "base_net_cost": result.base_net_cost,
        "tornado_bars": [
            {
                "param_name": bar.param_name,
                "param_path": bar.param_path,
                "base_value": bar.base_value,
                "low_value": bar.low_value,
                "high_value": bar.high_value,
                "net_cost_at_low": bar.net_cost_at_low,
                "net_cost_at_high": bar.net_cost_at_high,
                "delta_net_cost": bar.delta_net_cost,
            }
            for bar in result.bars
        ],
    }


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting %s on %s:%d", settings.app_name, settings.host, settings.port)
    uvicorn.run(
        "vehicle_tco.api.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    main()
