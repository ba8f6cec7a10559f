"""
Annealing schedule generation.

Architecture:
1. Resolver turns the request into Fahrenheit scalars (scheduling/resolver)
2. Science layer supplies soak and cooling rates (science/rates)
3. Sequencer lays out segments and folds them into waypoints
4. Instruction formatters render both controller conventions

Generation is pure: no I/O, no shared state, identical input gives
identical output.
"""

from .instructions import (
    format_cumulative_step_instructions,
    format_ramp_segment_instructions,
)
from .scheduling.resolver import resolve_firing
from .scheduling.sequencer import build_segments, fold_segments
from .types import (
    Conservativeness,
    GlassType,
    ScheduleMode,
    ScheduleRequest,
    ScheduleResult,
    ShapeFactor,
    UnitSystem,
)


class ScheduleGenerator:
    """Firing/annealing schedule generator."""

    def generate_schedule(self, request: ScheduleRequest) -> ScheduleResult:
        """
        Generate a complete schedule for one piece of glass.

        Args:
            request: ScheduleRequest with glass, geometry, mode and overrides

        Returns:
            ScheduleResult with waypoints and controller instructions

        Raises:
            ScheduleValidationError: If the request is invalid
        """
        firing = resolve_firing(request)
        segments = build_segments(firing)
        points = fold_segments(segments, firing.unload_temp, firing.units)

        return ScheduleResult(
            points=points,
            ramp_segment_instructions=format_ramp_segment_instructions(
                firing, segments
            ),
            cumulative_step_instructions=format_cumulative_step_instructions(
                firing, points
            ),
        )


def compute_schedule(
    glass_type: GlassType,
    thickness: float,
    mode: ScheduleMode = "anneal_only",
    units: UnitSystem = "imperial",
    shape: ShapeFactor = "slab",
    conservativeness: Conservativeness = "standard",
    custom_anneal: float | None = None,
    custom_strain: float | None = None,
    process_temp: float | None = None,
    process_hold_minutes: float | None = None,
    process_ramp: float | None = None,
    mold_dry_hours: float | None = None,
    mold_dry_temp: float | None = None,
    process_hold_indefinite: bool = False,
) -> ScheduleResult:
    """Convenience function to generate a schedule from keyword arguments."""
    request = ScheduleRequest(
        glass_type=glass_type,
        thickness=thickness,
        mode=mode,
        units=units,
        shape=shape,
        conservativeness=conservativeness,
        custom_anneal=custom_anneal,
        custom_strain=custom_strain,
        process_temp=process_temp,
        process_hold_minutes=process_hold_minutes,
        process_ramp=process_ramp,
        mold_dry_hours=mold_dry_hours,
        mold_dry_temp=mold_dry_temp,
        process_hold_indefinite=process_hold_indefinite,
    )
    return ScheduleGenerator().generate_schedule(request)
