"""
Unit conversion and time formatting.

The engine works in Fahrenheit, °F/hour and millimeters. Conversions to the
caller's unit system happen only when values are rendered.
"""

from annealing.types import ScheduleValidationError, UnitSystem

MM_PER_INCH = 25.4
MM_PER_CM = 10.0

TEMP_SUFFIX: dict[UnitSystem, str] = {"imperial": "°F", "metric": "°C"}
RATE_SUFFIX: dict[UnitSystem, str] = {"imperial": "°F/hr", "metric": "°C/hr"}


def check_units(units: UnitSystem) -> UnitSystem:
    if not isinstance(units, str) or units not in TEMP_SUFFIX:
        raise ScheduleValidationError(f"Unknown unit system: {units}")
    return units


def c_to_f(temp: float) -> float:
    return temp * 9 / 5 + 32


def f_to_c(temp: float) -> float:
    return (temp - 32) * 5 / 9


def temp_to_f(temp: float, units: UnitSystem) -> float:
    """Convert an absolute temperature in display units to °F."""
    return c_to_f(temp) if units == "metric" else temp


def temp_from_f(temp_f: float, units: UnitSystem) -> float:
    """Convert an absolute °F temperature to display units."""
    return f_to_c(temp_f) if units == "metric" else temp_f


def rate_to_f(rate: float, units: UnitSystem) -> float:
    """Convert a rate (degrees/hour) to °F/hour. Rates carry no offset."""
    return rate * 9 / 5 if units == "metric" else rate


def rate_from_f(rate_f: float, units: UnitSystem) -> float:
    return rate_f * 5 / 9 if units == "metric" else rate_f


def thickness_to_mm(thickness: float, units: UnitSystem) -> float:
    """Convert thickness (cm for metric, inches for imperial) to mm."""
    return thickness * (MM_PER_CM if units == "metric" else MM_PER_INCH)


def thickness_from_mm(thickness_mm: float, units: UnitSystem) -> float:
    return thickness_mm / (MM_PER_CM if units == "metric" else MM_PER_INCH)


def format_duration(total_minutes: int) -> str:
    """Format minutes as "HH:MM" (hours are not wrapped at 24)."""
    hours, minutes = divmod(max(total_minutes, 0), 60)
    return f"{hours:02d}:{minutes:02d}"


def format_hours(hours: float) -> str:
    """Format fractional hours as "HH:MM", rounded to the nearest minute."""
    return format_duration(round(hours * 60))
