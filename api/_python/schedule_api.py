"""
JSON payload handling for schedule generation.

Shared by the HTTP function (api/schedule/generate.py) and the command-line
script (generate_schedule.py):
1. validate_request - check a decoded JSON body, return an error message
2. build_request - turn a validated body into a ScheduleRequest
3. result_to_dict - serialize a ScheduleResult for the frontend
"""

import math
from dataclasses import asdict
from typing import Any, get_args

from annealing.materials import GLASS_LIBRARY, get_shape_multiplier
from annealing.scheduling.resolver import MAX_EFFECTIVE_THICKNESS_MM
from annealing.types import (
    Conservativeness,
    ScheduleMode,
    ScheduleRequest,
    ScheduleResult,
    ShapeFactor,
    UnitSystem,
)
from annealing.units import thickness_to_mm

CHOICE_FIELDS: dict[str, tuple[str, ...]] = {
    "mode": get_args(ScheduleMode),
    "units": get_args(UnitSystem),
    "shape": get_args(ShapeFactor),
    "conservativeness": get_args(Conservativeness),
}

OPTIONAL_NUMBER_FIELDS = [
    "custom_anneal",
    "custom_strain",
    "process_temp",
    "process_hold_minutes",
    "process_ramp",
    "mold_dry_hours",
    "mold_dry_temp",
]


def is_number(value: Any) -> bool:
    """True for finite ints/floats (bools are not numbers here)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def validate_request(data: dict) -> str | None:
    """Validate request data, return error message or None if valid."""
    if not isinstance(data, dict):
        return "Request body must be a JSON object"

    for field in ("glass_type", "thickness"):
        if field not in data:
            return f"Missing required field: {field}"

    glass_type = data["glass_type"]
    if not isinstance(glass_type, str) or glass_type not in GLASS_LIBRARY:
        return f"Unknown glass type: {glass_type}"

    thickness = data["thickness"]
    if not is_number(thickness) or thickness <= 0:
        return "thickness must be a positive number"

    for field, choices in CHOICE_FIELDS.items():
        if field in data and data[field] not in choices:
            return f"Invalid {field}: {data[field]} (expected one of {', '.join(choices)})"

    effective_mm = thickness_to_mm(
        thickness, data.get("units", "imperial")
    ) * get_shape_multiplier(data.get("shape", "slab"))
    if effective_mm > MAX_EFFECTIVE_THICKNESS_MM:
        return f"effective thickness must not exceed {MAX_EFFECTIVE_THICKNESS_MM:g}mm"

    for field in OPTIONAL_NUMBER_FIELDS:
        value = data.get(field)
        if value is not None and not is_number(value):
            return f"{field} must be a number"

    # The form requires both temperatures for custom glass
    if data["glass_type"] == "custom":
        if data.get("custom_anneal") is None or data.get("custom_strain") is None:
            return "Custom glass requires custom_anneal and custom_strain"

    indefinite = data.get("process_hold_indefinite", False)
    if not isinstance(indefinite, bool):
        return "process_hold_indefinite must be true or false"

    return None


def build_request(data: dict) -> ScheduleRequest:
    """Build a ScheduleRequest from a validated JSON body."""
    return ScheduleRequest(
        glass_type=data["glass_type"],
        thickness=data["thickness"],
        mode=data.get("mode", "anneal_only"),
        units=data.get("units", "imperial"),
        shape=data.get("shape", "slab"),
        conservativeness=data.get("conservativeness", "standard"),
        custom_anneal=data.get("custom_anneal"),
        custom_strain=data.get("custom_strain"),
        process_temp=data.get("process_temp"),
        process_hold_minutes=data.get("process_hold_minutes"),
        process_ramp=data.get("process_ramp"),
        mold_dry_hours=data.get("mold_dry_hours"),
        mold_dry_temp=data.get("mold_dry_temp"),
        process_hold_indefinite=data.get("process_hold_indefinite", False),
    )


def result_to_dict(result: ScheduleResult) -> dict[str, Any]:
    """Serialize a schedule, adding the summary fields the UI displays."""
    return {
        "points": [asdict(point) for point in result.points],
        "ramp_segment_instructions": result.ramp_segment_instructions,
        "cumulative_step_instructions": result.cumulative_step_instructions,
        "total_hours": round(result.total_hours, 2),
        "peak_temp": round(result.peak_temp),
    }
