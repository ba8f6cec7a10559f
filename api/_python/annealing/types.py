"""
Data structures for annealing schedule generation.

Temperatures inside the engine are always Fahrenheit; anything carried on a
ScheduleRequest or Waypoint is in the caller's unit system.
"""

from dataclasses import dataclass, field
from typing import Literal

# =============================================================================
# Enumerations
# =============================================================================

GlassType = Literal[
    "bullseye_coe90",
    "oceanside_coe96",
    "effetre_coe104",
    "borosilicate_coe33",
    "satake_coe110",
    "custom",  # Anneal/strain must come from the caller (or fall back)
]

ScheduleMode = Literal["anneal_only", "slump", "tack_fuse", "full_fuse", "cast"]

UnitSystem = Literal["imperial", "metric"]  # inches/°F or centimeters/°C

# Geometry heat-retention multiplier. See SHAPE_FACTORS in materials.py.
ShapeFactor = Literal["slab", "uneven", "hollow_deep"]

# Safety margin. See CONSERVATIVENESS_FACTORS in materials.py.
Conservativeness = Literal["fast", "standard", "cautious"]

SegmentType = Literal[
    "off",  # Kiln idle (start point)
    "heat",  # Heating ramp
    "soak",  # Anneal soak
    "cool",  # Controlled or crash cooling
    "process",  # Ramp to process temperature (and mold dry hold)
    "process_hold",  # Timed hold at process temperature
    "process_hold_indefinite",  # Operator-controlled hold, zero schedule time
]


class ScheduleValidationError(ValueError):
    """Raised when a request cannot produce a physically valid schedule."""


# =============================================================================
# Materials
# =============================================================================


@dataclass(frozen=True)
class GlassMaterial:
    """Annealing properties of a glass family (temperatures in °F)."""

    name: str  # Display name, e.g. "Bullseye (COE 90)"
    anneal_temp: float | None
    strain_point: float | None
    brand_factor: float = 1.0  # Cooling-rate multiplier (1.0 = standard soft glass)
    slump_temp: float | None = None
    tack_fuse_temp: float | None = None
    full_fuse_temp: float | None = None
    cast_temp: float | None = None

    def process_temp(self, mode: ScheduleMode) -> float | None:
        """Material's own target temperature for a firing mode, if known."""
        return {
            "anneal_only": None,
            "slump": self.slump_temp,
            "tack_fuse": self.tack_fuse_temp,
            "full_fuse": self.full_fuse_temp,
            "cast": self.cast_temp,
        }[mode]


# =============================================================================
# Request / Response
# =============================================================================


@dataclass
class ScheduleRequest:
    """Input from the schedule form. Overrides are in the caller's units."""

    glass_type: GlassType
    thickness: float  # Centimeters (metric) or inches (imperial)
    mode: ScheduleMode = "anneal_only"
    units: UnitSystem = "imperial"
    shape: ShapeFactor = "slab"
    conservativeness: Conservativeness = "standard"

    # Material overrides
    custom_anneal: float | None = None
    custom_strain: float | None = None

    # Process overrides (ignored for anneal_only)
    process_temp: float | None = None
    process_hold_minutes: float | None = None
    process_ramp: float | None = None  # Degrees per hour
    process_hold_indefinite: bool = False

    # Mold dry (cast only)
    mold_dry_hours: float | None = None
    mold_dry_temp: float | None = None


@dataclass(frozen=True)
class Waypoint:
    """Single point of the schedule curve."""

    time: float  # Cumulative hours from start
    temp: float  # In the request's unit system
    segment_type: SegmentType
    label: str | None = None


@dataclass
class ScheduleResult:
    """Output to the frontend."""

    points: list[Waypoint] = field(default_factory=list)
    ramp_segment_instructions: str = ""  # Segment/ramp-rate controllers (Paragon style)
    cumulative_step_instructions: str = ""  # Cumulative-time controllers (Digitry style)

    @property
    def total_hours(self) -> float:
        """Elapsed hours from start to unload."""
        return self.points[-1].time if self.points else 0.0

    @property
    def peak_temp(self) -> float:
        """Highest temperature reached, in display units."""
        return max((p.temp for p in self.points), default=0.0)
