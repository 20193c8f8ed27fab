"""Effective annual rate (APR) solve.

The effective rate ρ is the annual rate at which the present value of
every installment, discounted monthly at ρ/12, equals the amount the
borrower actually receives:

  f(ρ) = Σ_{m=1..n} payment / (1 + ρ/12)^m − (principal − origination_fee)

Solved with Newton's method using a forward-difference derivative,
starting from the nominal rate.  The solve never raises: when the
derivative goes flat, a value turns non-finite, or the iteration cap is
hit, the last estimate comes back flagged ``unreliable``.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from vehicle_tco.config.loan import SolverConfig
from vehicle_tco.models.results import EffectiveRate

logger = logging.getLogger(__name__)


def present_value_gap(
    annual_rate: float,
    monthly_payment: float,
    term_months: int,
    disbursed: float,
) -> float:
    """f(ρ): PV of ``term_months`` payments at ``annual_rate`` minus ``disbursed``."""
    months = np.arange(1, term_months + 1)
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        pv = np.sum(monthly_payment / (1 + annual_rate / 12) ** months)
    return float(pv) - disbursed


def solve_effective_rate(
    monthly_payment: float,
    term_months: int,
    disbursed: float,
    guess: float,
    config: SolverConfig | None = None,
) -> EffectiveRate:
    """Solve f(ρ) = 0 for the annual effective rate.

    Parameters
    ----------
    monthly_payment : float
        Full installment including the monthly fee.
    term_months : int
        Number of installments.
    disbursed : float
        Principal net of the origination fee.
    guess : float
        Starting point as a fraction (0.05 for 5 %), normally the nominal rate.
    config : SolverConfig | None
        Tolerances and iteration cap.  None = defaults.

    Returns
    -------
    EffectiveRate
        Rate in percent, flagged ``converged`` or ``unreliable``.
    """
    cfg = config or SolverConfig()
    h = cfg.derivative_step

    def f(rate: float) -> float:
        return present_value_gap(rate, monthly_payment, term_months, disbursed)

    rate = guess
    for iteration in range(cfg.max_iterations):
        value = f(rate)
        if not math.isfinite(value):
            return _unreliable(rate, iteration, "non_finite")
        if abs(value) < cfg.tolerance:
            return EffectiveRate(rate_pct=rate * 100, status="converged", iterations=iteration)

        derivative = (f(rate + h) - value) / h
        if not math.isfinite(derivative):
            return _unreliable(rate, iteration, "non_finite")
        if abs(derivative) < cfg.derivative_guard:
            return _unreliable(rate, iteration, "flat_derivative")

        next_rate = rate - value / derivative
        if abs(next_rate - rate) < cfg.tolerance:
            return EffectiveRate(rate_pct=next_rate * 100, status="converged", iterations=iteration + 1)
        rate = next_rate

    return _unreliable(rate, cfg.max_iterations, "iteration_cap")


def _unreliable(rate: float, iterations: int, reason: str) -> EffectiveRate:
    logger.warning(
        "Effective rate solve stopped (%s) after %d iterations; last estimate %.6f",
        reason, iterations, rate,
    )
    return EffectiveRate(
        rate_pct=rate * 100,
        status="unreliable",
        iterations=iterations,
        reason=reason,
    )
