"""
Shared helpers for annealing schedule tests.
"""

from annealing.types import ScheduleResult, Waypoint


def point_by_label(result: ScheduleResult, label: str) -> Waypoint:
    """Return the first waypoint with the given label."""
    for point in result.points:
        if point.label == label:
            return point
    raise AssertionError(f"No waypoint labeled {label!r}: {labels(result)}")


def labels(result: ScheduleResult) -> list[str | None]:
    return [point.label for point in result.points]


def segment_types(result: ScheduleResult) -> list[str]:
    return [point.segment_type for point in result.points]


def step_durations(result: ScheduleResult) -> list[float]:
    """Elapsed hours between consecutive waypoints."""
    times = [point.time for point in result.points]
    return [later - earlier for earlier, later in zip(times, times[1:])]
