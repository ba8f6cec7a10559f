"""
Default and override resolution.

Turns a ScheduleRequest into fully resolved Fahrenheit scalars. Priority,
highest first:
1. Explicit caller override (converted from display units)
2. Fixed fallback for Custom glass (900°F anneal / 700°F strain)
3. Material's own per-mode process temperature
4. Anneal temperature + per-mode offset
Hold durations fall back to a per-mode default; the ramp rate falls back to
the thickness-banded heating rate from the science layer.
"""

import math
from dataclasses import dataclass
from typing import get_args

from annealing.materials import get_material, get_safety_factor, get_shape_multiplier
from annealing.science.rates import AnnealingRateCalculator, CoolingModel
from annealing.types import (
    Conservativeness,
    ScheduleMode,
    ScheduleRequest,
    ScheduleValidationError,
    ShapeFactor,
    UnitSystem,
)
from annealing.units import check_units, rate_to_f, temp_to_f, thickness_to_mm

UNLOAD_TEMP_F = 150.0  # Safe to open the kiln

CUSTOM_ANNEAL_FALLBACK_F = 900.0
CUSTOM_STRAIN_FALLBACK_F = 700.0

# Used when the material has no target of its own for the mode
PROCESS_TEMP_OFFSETS: dict[ScheduleMode, float] = {
    "slump": 325.0,
    "tack_fuse": 400.0,
    "full_fuse": 550.0,
    "cast": 600.0,
}

DEFAULT_HOLD_MINUTES: dict[ScheduleMode, float] = {
    "slump": 20.0,
    "tack_fuse": 10.0,
    "full_fuse": 15.0,
    "cast": 30.0,  # Base; castings often need more
}

MOLD_DRY_TEMP_DEFAULT_F = 250.0

# Largest effective thickness (after the shape multiplier) the model accepts
MAX_EFFECTIVE_THICKNESS_MM = 1000.0

SCHEDULE_MODES: tuple[str, ...] = get_args(ScheduleMode)


@dataclass(frozen=True)
class ResolvedFiring:
    """Every scalar the sequencer needs. Temperatures °F, rates °F/hour."""

    mode: ScheduleMode
    units: UnitSystem
    shape: ShapeFactor
    conservativeness: Conservativeness
    safety_factor: float
    effective_mm: float

    anneal_temp: float
    strain_point: float
    unload_temp: float

    process_temp: float  # Equal to anneal_temp for anneal_only
    process_hold_hours: float
    hold_indefinite: bool
    ramp_rate: float

    cooling: CoolingModel

    mold_dry_temp: float | None = None  # None when no mold dry is scheduled
    mold_dry_hours: float = 0.0

    @property
    def has_process(self) -> bool:
        return self.mode != "anneal_only"

    @property
    def has_mold_dry(self) -> bool:
        return self.mold_dry_temp is not None


def _finite(value: float | None, field_name: str) -> float | None:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ScheduleValidationError(f"{field_name} must be a number") from None
    if not math.isfinite(number):
        raise ScheduleValidationError(f"{field_name} must be a finite number")
    return number


def parse_thickness(thickness: float) -> float:
    """Reject anything that is not a finite, positive number."""
    value = _finite(thickness, "thickness")
    if value is None or value <= 0:
        raise ScheduleValidationError("thickness must be a positive number")
    return value


def check_effective_thickness(effective_mm: float) -> float:
    if not math.isfinite(effective_mm) or effective_mm > MAX_EFFECTIVE_THICKNESS_MM:
        raise ScheduleValidationError(
            f"effective thickness must not exceed {MAX_EFFECTIVE_THICKNESS_MM:g}mm"
        )
    return effective_mm


def resolve_anneal_strain(request: ScheduleRequest) -> tuple[float, float]:
    """Resolve anneal and strain point temperatures in °F."""
    material = get_material(request.glass_type)
    custom_anneal = _finite(request.custom_anneal, "custom_anneal")
    custom_strain = _finite(request.custom_strain, "custom_strain")

    anneal = material.anneal_temp
    strain = material.strain_point
    if custom_anneal is not None:
        anneal = temp_to_f(custom_anneal, request.units)
    if custom_strain is not None:
        strain = temp_to_f(custom_strain, request.units)

    # Custom glass (or any library gap) never propagates None
    if anneal is None:
        anneal = CUSTOM_ANNEAL_FALLBACK_F
    if strain is None:
        strain = CUSTOM_STRAIN_FALLBACK_F
    return float(anneal), float(strain)


def resolve_process_temp(request: ScheduleRequest, anneal_temp: float) -> float:
    """Resolve the peak temperature in °F (anneal temp for anneal_only)."""
    if request.mode == "anneal_only":
        return anneal_temp

    override = _finite(request.process_temp, "process_temp")
    if override is not None:
        return temp_to_f(override, request.units)

    material_temp = get_material(request.glass_type).process_temp(request.mode)
    if material_temp is not None:
        return float(material_temp)
    return anneal_temp + PROCESS_TEMP_OFFSETS[request.mode]


def resolve_hold_hours(request: ScheduleRequest) -> float:
    """Resolve the process hold in hours. Indefinite holds take no schedule time."""
    if request.mode == "anneal_only" or request.process_hold_indefinite:
        return 0.0

    minutes = _finite(request.process_hold_minutes, "process_hold_minutes")
    if minutes is None:
        minutes = DEFAULT_HOLD_MINUTES[request.mode]
    elif minutes < 0:
        raise ScheduleValidationError("process_hold_minutes cannot be negative")
    return minutes / 60


def resolve_ramp_rate(request: ScheduleRequest, default_rate: float) -> float:
    override = _finite(request.process_ramp, "process_ramp")
    if override is None:
        return default_rate
    if override <= 0:
        raise ScheduleValidationError("process_ramp must be a positive rate")
    return rate_to_f(override, request.units)


def resolve_mold_dry(request: ScheduleRequest) -> tuple[float | None, float]:
    """Return (temperature °F, hours); temperature is None when not scheduled."""
    hours = _finite(request.mold_dry_hours, "mold_dry_hours")
    if hours is not None and hours < 0:
        raise ScheduleValidationError("mold_dry_hours cannot be negative")
    if request.mode != "cast" or not hours:
        return None, 0.0

    temp = _finite(request.mold_dry_temp, "mold_dry_temp")
    if temp is None:
        return MOLD_DRY_TEMP_DEFAULT_F, hours
    return temp_to_f(temp, request.units), hours


def _check_ordering(resolved: ResolvedFiring) -> None:
    """Temperatures must step down in order, or time would run backwards."""
    values = [
        resolved.anneal_temp,
        resolved.strain_point,
        resolved.process_temp,
        resolved.ramp_rate,
    ]
    if resolved.has_mold_dry:
        values.append(resolved.mold_dry_temp)
    if not all(math.isfinite(value) for value in values):
        raise ScheduleValidationError("temperatures and rates must be finite in °F")

    if resolved.strain_point < resolved.unload_temp:
        raise ScheduleValidationError(
            "strain point must be at or above the unload temperature"
        )
    if resolved.anneal_temp < resolved.strain_point:
        raise ScheduleValidationError(
            "anneal temperature must be at or above the strain point"
        )
    if resolved.process_temp < resolved.anneal_temp:
        raise ScheduleValidationError(
            "process temperature must be at or above the anneal temperature"
        )
    if resolved.has_mold_dry and not (
        resolved.unload_temp <= resolved.mold_dry_temp <= resolved.process_temp
    ):
        raise ScheduleValidationError(
            "mold dry temperature must lie between unload and process temperature"
        )


def resolve_firing(request: ScheduleRequest) -> ResolvedFiring:
    """
    Resolve a request into engine scalars.

    Raises:
        ScheduleValidationError: For invalid input. Nothing is computed
            from a request that fails validation.
    """
    thickness = parse_thickness(request.thickness)
    units = check_units(request.units)
    if request.mode not in SCHEDULE_MODES:
        raise ScheduleValidationError(f"Unknown schedule mode: {request.mode}")

    material = get_material(request.glass_type)
    shape_multiplier = get_shape_multiplier(request.shape)
    safety_factor = get_safety_factor(request.conservativeness)

    effective_mm = check_effective_thickness(
        thickness_to_mm(thickness, units) * shape_multiplier
    )
    calculator = AnnealingRateCalculator(
        effective_mm,
        brand_factor=material.brand_factor,
        safety_factor=safety_factor,
    )

    anneal_temp, strain_point = resolve_anneal_strain(request)
    mold_dry_temp, mold_dry_hours = resolve_mold_dry(request)

    resolved = ResolvedFiring(
        mode=request.mode,
        units=units,
        shape=request.shape,
        conservativeness=request.conservativeness,
        safety_factor=safety_factor,
        effective_mm=effective_mm,
        anneal_temp=anneal_temp,
        strain_point=strain_point,
        unload_temp=UNLOAD_TEMP_F,
        process_temp=resolve_process_temp(request, anneal_temp),
        process_hold_hours=resolve_hold_hours(request),
        hold_indefinite=request.mode != "anneal_only"
        and bool(request.process_hold_indefinite),
        ramp_rate=resolve_ramp_rate(request, calculator.heating_rate),
        cooling=calculator.cooling_model(),
        mold_dry_temp=mold_dry_temp,
        mold_dry_hours=mold_dry_hours,
    )
    _check_ordering(resolved)
    return resolved
