"""
Glass Firing & Annealing Schedule Generation

Builds kiln schedules (ramp, process hold, anneal soak, two-stage cool) from
glass properties and geometry using an inverse-square thickness model.

Main entry point: ScheduleGenerator / compute_schedule
"""

from .conversion import convert_request
from .materials import CONSERVATIVENESS_FACTORS, GLASS_LIBRARY, SHAPE_FACTORS
from .scheduler import ScheduleGenerator, compute_schedule
from .types import (
    Conservativeness,
    GlassMaterial,
    GlassType,
    ScheduleMode,
    ScheduleRequest,
    ScheduleResult,
    ScheduleValidationError,
    SegmentType,
    ShapeFactor,
    UnitSystem,
    Waypoint,
)

__all__ = [
    # Types
    "GlassType",
    "GlassMaterial",
    "ScheduleMode",
    "UnitSystem",
    "ShapeFactor",
    "Conservativeness",
    "SegmentType",
    "ScheduleRequest",
    "ScheduleResult",
    "ScheduleValidationError",
    "Waypoint",
    # Tables
    "GLASS_LIBRARY",
    "SHAPE_FACTORS",
    "CONSERVATIVENESS_FACTORS",
    # Scheduler
    "ScheduleGenerator",
    "compute_schedule",
    "convert_request",
]
