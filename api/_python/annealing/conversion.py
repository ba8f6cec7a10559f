"""
Switching a request between unit systems.

Mirrors the form's unit toggle: thickness and every temperature/rate override
are re-expressed in the new system. Hold and mold dry durations are unit-free.
"""

from dataclasses import replace

from annealing.types import ScheduleRequest, UnitSystem
from annealing.units import (
    check_units,
    rate_from_f,
    rate_to_f,
    temp_from_f,
    temp_to_f,
    thickness_from_mm,
    thickness_to_mm,
)


def _convert_temp(value, source: UnitSystem, target: UnitSystem):
    if value is None:
        return None
    return temp_from_f(temp_to_f(value, source), target)


def _convert_rate(value, source: UnitSystem, target: UnitSystem):
    if value is None:
        return None
    return rate_from_f(rate_to_f(value, source), target)


def convert_request(request: ScheduleRequest, units: UnitSystem) -> ScheduleRequest:
    """Return a copy of the request expressed in another unit system."""
    target = check_units(units)
    source = check_units(request.units)
    if source == target:
        return replace(request)

    return replace(
        request,
        units=target,
        thickness=thickness_from_mm(thickness_to_mm(request.thickness, source), target),
        custom_anneal=_convert_temp(request.custom_anneal, source, target),
        custom_strain=_convert_temp(request.custom_strain, source, target),
        process_temp=_convert_temp(request.process_temp, source, target),
        mold_dry_temp=_convert_temp(request.mold_dry_temp, source, target),
        process_ramp=_convert_rate(request.process_ramp, source, target),
    )
