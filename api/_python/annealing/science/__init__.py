"""
Annealing Science Layer.

Pure physical model without any knowledge of firing modes or overrides.

Modules:
- rates: Anneal soak duration, inverse-square cooling rates, heating bands
"""

from .rates import (
    AnnealingRateCalculator,
    CoolingModel,
    anneal_cooling_rate,
    final_cooling_rate,
    heating_rate,
    soak_hours,
)

__all__ = [
    "AnnealingRateCalculator",
    "CoolingModel",
    "anneal_cooling_rate",
    "final_cooling_rate",
    "heating_rate",
    "soak_hours",
]
