"""
Anneal soak and cooling rate calculations.

Physical basis:
- Safe cooling rate through the annealing range falls with the square of
  thickness (thermal gradient across the piece grows linearly, stress with
  its square). Doubling the effective thickness quarters the rate.
- Reference: 25mm (~1") slab cools at 15°C/h (27°F/h) from anneal to strain
  point and 27°C/h (~49°F/h) below the strain point, which matches the
  Bullseye thick-slab annealing chart.
- Soak time grows with thickness so the core can equalize at the anneal
  temperature (~1h per 6mm).

Key principles:
- Effective thickness = physical thickness x shape multiplier
- Brand factor scales the rate (borosilicate tolerates more, lead glass less)
- Conservativeness lengthens the soak and slows both cooling rates
"""

from dataclasses import dataclass

REFERENCE_THICKNESS_MM = 25.0

# Anneal -> strain point
RATE1_BASE_F = 27.0  # 15°C/h at the reference thickness
RATE1_MAX_F = 300.0

# Strain point -> unload
RATE2_BASE_F = 48.6  # 27°C/h at the reference thickness
RATE2_MAX_F = 400.0

# Soak bands (effective mm)
THIN_SOAK_LIMIT_MM = 6.5  # Single 1/4" layer
THIN_SOAK_HOURS = 0.5
LINEAR_SOAK_LIMIT_MM = 50.0
SOAK_HOURS_PER_MM = 0.16

# Heating ramp bands: (effective thickness above, °F/hour)
HEATING_RATE_DEFAULT_F = 400.0
HEATING_RATE_BANDS: list[tuple[float, float]] = [
    (50.0, 100.0),
    (25.0, 200.0),
]


@dataclass(frozen=True)
class CoolingModel:
    """Soak and cooling parameters for one resolved configuration."""

    soak_hours: float
    rate1: float  # °F/hour, anneal -> strain point
    rate2: float  # °F/hour, strain point -> unload


def soak_hours(effective_mm: float, safety_factor: float = 1.0) -> float:
    """
    Anneal soak duration in hours.

    Banded on effective thickness:
    - up to 6.5mm: 0.5h flat
    - up to 50mm: 0.16h per mm (6mm ~ 1h, 25mm = 4h)
    - above 50mm: grows with the square of thickness from 8h at 50mm

    The step at 6.5mm (0.5h to ~1.04h) is intentional: a single 1/4" layer
    soaks for the flat half hour, anything thicker joins the per-mm band.
    Soak time never decreases with thickness.

    Result is multiplied by the safety factor.
    """
    if effective_mm <= THIN_SOAK_LIMIT_MM:
        base = THIN_SOAK_HOURS
    elif effective_mm <= LINEAR_SOAK_LIMIT_MM:
        base = SOAK_HOURS_PER_MM * effective_mm
    else:
        limit_hours = SOAK_HOURS_PER_MM * LINEAR_SOAK_LIMIT_MM
        base = limit_hours * (effective_mm / LINEAR_SOAK_LIMIT_MM) ** 2
    return base * safety_factor


def _inverse_square_rate(
    base_rate: float,
    max_rate: float,
    effective_mm: float,
    brand_factor: float,
    safety_factor: float,
) -> float:
    rate = base_rate * (REFERENCE_THICKNESS_MM / effective_mm) ** 2
    rate = rate * brand_factor / safety_factor
    return min(rate, max_rate)


def anneal_cooling_rate(
    effective_mm: float, brand_factor: float = 1.0, safety_factor: float = 1.0
) -> float:
    """Rate 1: anneal temperature down to the strain point (°F/hour)."""
    return _inverse_square_rate(
        RATE1_BASE_F, RATE1_MAX_F, effective_mm, brand_factor, safety_factor
    )


def final_cooling_rate(
    effective_mm: float, brand_factor: float = 1.0, safety_factor: float = 1.0
) -> float:
    """Rate 2: strain point down to unload temperature (°F/hour)."""
    return _inverse_square_rate(
        RATE2_BASE_F, RATE2_MAX_F, effective_mm, brand_factor, safety_factor
    )


def heating_rate(effective_mm: float) -> float:
    """Default ramp-up rate (°F/hour). Thick work heats slower."""
    for threshold, rate in HEATING_RATE_BANDS:
        if effective_mm > threshold:
            return rate
    return HEATING_RATE_DEFAULT_F


class AnnealingRateCalculator:
    """
    Compute soak time and cooling rates for a piece of glass.

    Thin pieces hit the rate caps; the inverse-square law only governs once
    the piece is thick enough for the cap not to bind.
    """

    def __init__(
        self,
        effective_mm: float,
        brand_factor: float = 1.0,
        safety_factor: float = 1.0,
    ):
        """
        Initialize calculator.

        Args:
            effective_mm: Physical thickness x shape multiplier, in mm
            brand_factor: Glass family cooling-rate multiplier
            safety_factor: Conservativeness multiplier (>1 is slower)
        """
        self.effective_mm = effective_mm
        self.brand_factor = brand_factor
        self.safety_factor = safety_factor

    @property
    def soak_hours(self) -> float:
        return soak_hours(self.effective_mm, self.safety_factor)

    @property
    def rate1(self) -> float:
        return anneal_cooling_rate(
            self.effective_mm, self.brand_factor, self.safety_factor
        )

    @property
    def rate2(self) -> float:
        return final_cooling_rate(
            self.effective_mm, self.brand_factor, self.safety_factor
        )

    @property
    def heating_rate(self) -> float:
        return heating_rate(self.effective_mm)

    def cooling_model(self) -> CoolingModel:
        return CoolingModel(
            soak_hours=self.soak_hours, rate1=self.rate1, rate2=self.rate2
        )
