"""Exception types raised by the engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vehicle_tco.models.results import EffectiveRate


class TCOError(Exception):
    """Base class for engine errors."""


class InvalidInputError(TCOError, ValueError):
    """Input that slipped past the config models violates a numeric contract."""


class NonConvergenceError(TCOError):
    """The effective-rate solve produced an unreliable estimate in strict mode."""

    def __init__(self, rate: EffectiveRate):
        self.rate = rate
        super().__init__(
            f"effective rate did not converge ({rate.reason}) after "
            f"{rate.iterations} iterations; last estimate {rate.rate_pct:.4f}%"
        )
