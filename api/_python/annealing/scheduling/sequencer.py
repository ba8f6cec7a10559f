"""
Segment sequencing.

A schedule is an ordered list of Segment descriptors (ramp or hold). Folding
the list from the unload temperature at t=0 yields the waypoint curve; the
same list drives the ramp/segment controller instructions.
"""

from dataclasses import dataclass
from typing import Literal

from annealing.scheduling.resolver import ResolvedFiring
from annealing.types import SegmentType, UnitSystem, Waypoint
from annealing.units import temp_from_f

# Process temperature down to anneal: the kiln is left to fall as fast as it
# can. Not derived from thickness.
CRASH_COOL_RATE_F = 1000.0

SegmentKind = Literal["ramp", "hold"]


@dataclass(frozen=True)
class Segment:
    """One ramp or hold of the schedule (temperatures °F)."""

    kind: SegmentKind
    target_temp: float
    label: str
    segment_type: SegmentType
    rate: float | None = None  # °F/hour, ramps only
    hours: float = 0.0  # Holds only
    program_name: str | None = None  # Controller segment name (ramps only)
    full_speed: bool = False  # Controller runs this ramp as fast as possible

    def duration_from(self, start_temp: float) -> float:
        """Hours taken by this segment when entered at start_temp."""
        if self.kind == "hold":
            return self.hours
        return abs(self.target_temp - start_temp) / self.rate


def _ramp(target, rate, label, segment_type, program_name, full_speed=False):
    return Segment(
        kind="ramp",
        target_temp=target,
        label=label,
        segment_type=segment_type,
        rate=rate,
        program_name=program_name,
        full_speed=full_speed,
    )


def _hold(target, hours, label, segment_type):
    return Segment(
        kind="hold",
        target_temp=target,
        label=label,
        segment_type=segment_type,
        hours=hours,
    )


def _process_segments(firing: ResolvedFiring) -> list[Segment]:
    segments = []

    if firing.has_mold_dry:
        segments.append(
            _ramp(
                firing.mold_dry_temp,
                firing.ramp_rate,
                "Mold Dry Reach",
                "heat",
                "Mold Dry",
            )
        )
        segments.append(
            _hold(
                firing.mold_dry_temp,
                firing.mold_dry_hours,
                "Mold Dry Hold",
                "process",
            )
        )

    reach_label = "Reach Cast" if firing.mode == "cast" else "Process Reach"
    segments.append(
        _ramp(
            firing.process_temp,
            firing.ramp_rate,
            reach_label,
            "process",
            "Process",
        )
    )

    if firing.hold_indefinite:
        segments.append(
            _hold(
                firing.process_temp,
                0.0,
                "Process Hold (Indefinite)",
                "process_hold_indefinite",
            )
        )
    else:
        segments.append(
            _hold(
                firing.process_temp,
                firing.process_hold_hours,
                "Process Complete",
                "process_hold",
            )
        )

    segments.append(
        _ramp(
            firing.anneal_temp,
            CRASH_COOL_RATE_F,
            "Cool to Anneal",
            "cool",
            "Cool to Anneal",
            full_speed=True,
        )
    )
    return segments


def build_segments(firing: ResolvedFiring) -> list[Segment]:
    """
    Build the ordered segment list for a resolved firing.

    anneal_only heats straight to the anneal temperature; every other mode
    runs (mold dry), process ramp, process hold and a crash cool first.
    The anneal soak and both cooling ramps are always appended.
    """
    if firing.has_process:
        segments = _process_segments(firing)
    else:
        segments = [
            _ramp(
                firing.anneal_temp,
                firing.ramp_rate,
                "Reach Soak",
                "heat",
                "Ramp to Soak",
            )
        ]

    segments.extend(
        [
            _hold(firing.anneal_temp, firing.cooling.soak_hours, "Anneal Soak", "soak"),
            _ramp(
                firing.strain_point,
                firing.cooling.rate1,
                "Strain Point",
                "cool",
                "Anneal -> Strain",
            ),
            _ramp(
                firing.unload_temp,
                firing.cooling.rate2,
                "Finished",
                "cool",
                "Strain -> Cool",
            ),
        ]
    )
    return segments


def fold_segments(
    segments: list[Segment], start_temp: float, units: UnitSystem = "imperial"
) -> list[Waypoint]:
    """
    Accumulate segments into waypoints, converting to display units.

    The first waypoint is the idle start at start_temp, t=0.
    """
    points = [Waypoint(0.0, temp_from_f(start_temp, units), "off", "Start")]
    current_time = 0.0
    current_temp = start_temp

    for segment in segments:
        current_time += segment.duration_from(current_temp)
        current_temp = segment.target_temp
        points.append(
            Waypoint(
                time=current_time,
                temp=temp_from_f(current_temp, units),
                segment_type=segment.segment_type,
                label=segment.label,
            )
        )

    return points


def generate_waypoints(firing: ResolvedFiring) -> list[Waypoint]:
    return fold_segments(build_segments(firing), firing.unload_temp, firing.units)
