"""
Kiln controller instruction text.

Two controller conventions are supported:
- Ramp/segment controllers (Paragon style): each numbered segment is a rate,
  a target temperature and a hold time.
- Cumulative step controllers (Digitry style): each step is a target
  temperature reached at a cumulative elapsed time.

Values stay in °F until the moment they are written out.
"""

from annealing.scheduling.resolver import ResolvedFiring
from annealing.scheduling.sequencer import Segment
from annealing.types import Waypoint
from annealing.units import (
    RATE_SUFFIX,
    TEMP_SUFFIX,
    format_hours,
    rate_from_f,
    temp_from_f,
)

FULL_SPEED_RATE = "9999"  # Controller code for "as fast as possible"
INDEFINITE_HOLD = "HOLD"


def _model_line(firing: ResolvedFiring) -> str:
    return f"Logic: Physics Model v1 (Shape: {firing.shape}, Safety: {firing.safety_factor:g}x)"


def _controller_segments(
    segments: list[Segment],
) -> list[tuple[Segment, Segment | None]]:
    """Pair each ramp with the hold that follows it (if any)."""
    program: list[tuple[Segment, Segment | None]] = []
    for segment in segments:
        if segment.kind == "ramp":
            program.append((segment, None))
        elif program:
            program[-1] = (program[-1][0], segment)
    return program


def format_ramp_segment_instructions(
    firing: ResolvedFiring, segments: list[Segment]
) -> str:
    """
    Render the schedule as numbered RA/temperature/HLD segments.

    The crash cool to anneal uses the full-speed rate code, and an
    indefinite process hold is written as HOLD rather than a time.
    """
    units = firing.units
    temp_unit = TEMP_SUFFIX[units]

    lines = [
        "Make sure to verify these against your specific kiln manual.",
        f"ALL TEMPS IN {temp_unit}, RATES IN {RATE_SUFFIX[units]}",
        _model_line(firing),
    ]

    blocks = []
    for number, (ramp, hold) in enumerate(_controller_segments(segments), start=1):
        if ramp.full_speed:
            rate_text = FULL_SPEED_RATE
        else:
            rate_text = str(round(rate_from_f(ramp.rate, units)))

        if hold is None:
            hold_text = "00:00"
        elif hold.segment_type == "process_hold_indefinite":
            hold_text = f"{INDEFINITE_HOLD} (INDEFINITE HOLD)"
        else:
            hold_text = format_hours(hold.hours)

        blocks.append(
            f"SEG {number} ({ramp.program_name}):\n"
            f"  RA{number} : {rate_text}\n"
            f"  {temp_unit}{number} : {round(temp_from_f(ramp.target_temp, units))}\n"
            f"  HLD{number}: {hold_text}"
        )

    return "\n".join(lines) + "\n\n" + "\n\n".join(blocks)


def format_cumulative_step_instructions(
    firing: ResolvedFiring, points: list[Waypoint]
) -> str:
    """
    Render the waypoints as numbered steps with cumulative HH:MM times.

    Waypoint temperatures are already in display units. The start point is
    skipped; indefinite holds are marked (HOLD).
    """
    temp_unit = TEMP_SUFFIX[firing.units]
    text = "NOTE: Time is CUMULATIVE from start.\n"
    text += _model_line(firing) + "\n"
    text += f"TEMPS IN {temp_unit}\n\n"

    for step, point in enumerate(points[1:], start=1):
        time_text = format_hours(point.time)
        if point.segment_type == "process_hold_indefinite":
            time_text += f" ({INDEFINITE_HOLD})"
        text += (
            f"STEP {step}: {point.label}\n"
            f"  TEMP: {round(point.temp)}{temp_unit}\n"
            f"  TIME: {time_text}\n\n"
        )

    return text
