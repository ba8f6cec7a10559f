"""
Tests for annealing schedule generation.

Uses pytest with proper assertions to verify schedule generation logic.
"""

import itertools
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from helpers import labels, point_by_label, segment_types, step_durations
from annealing.scheduler import compute_schedule
from annealing.types import ScheduleRequest, ScheduleValidationError
from annealing.units import f_to_c

GLASS_TYPES = [
    "bullseye_coe90",
    "oceanside_coe96",
    "effetre_coe104",
    "borosilicate_coe33",
    "satake_coe110",
    "custom",
]
MODES = ["anneal_only", "slump", "tack_fuse", "full_fuse", "cast"]
UNITS = ["imperial", "metric"]
THICKNESS = {"imperial": [0.125, 0.25, 1.0, 3.0], "metric": [0.3, 0.6, 2.5, 8.0]}


def all_requests():
    for glass, mode, units, shape in itertools.product(
        GLASS_TYPES, MODES, UNITS, ["slab", "uneven", "hollow_deep"]
    ):
        for thickness in THICKNESS[units]:
            yield ScheduleRequest(
                glass_type=glass,
                thickness=thickness,
                mode=mode,
                units=units,
                shape=shape,
            )


class TestScheduleInvariants:
    """Properties that hold for every valid request."""

    def test_time_starts_at_zero_and_never_decreases(self, generator):
        for request in all_requests():
            result = generator.generate_schedule(request)
            assert result.points[0].time == 0
            assert all(d >= 0 for d in step_durations(result)), request

    def test_starts_and_ends_at_unload_temperature(self, generator):
        for request in all_requests():
            result = generator.generate_schedule(request)
            unload = 150 if request.units == "imperial" else f_to_c(150)
            assert result.points[0].temp == pytest.approx(unload)
            assert result.points[-1].temp == pytest.approx(unload)
            assert result.points[0].segment_type == "off"

    def test_deterministic(self, generator, cast_request):
        first = generator.generate_schedule(cast_request)
        second = generator.generate_schedule(cast_request)
        assert first == second


class TestScheduleStructure:
    """Waypoint sequence per mode."""

    def test_anneal_only_waypoints(self, generator, bullseye_anneal_request):
        result = generator.generate_schedule(bullseye_anneal_request)
        assert labels(result) == ["Start", "Reach Soak", "Anneal Soak", "Strain Point", "Finished"]
        assert segment_types(result) == ["off", "heat", "soak", "cool", "cool"]

    def test_full_fuse_waypoints(self, generator, bullseye_full_fuse_request):
        result = generator.generate_schedule(bullseye_full_fuse_request)
        assert labels(result) == [
            "Start",
            "Process Reach",
            "Process Complete",
            "Cool to Anneal",
            "Anneal Soak",
            "Strain Point",
            "Finished",
        ]
        assert segment_types(result) == [
            "off",
            "process",
            "process_hold",
            "cool",
            "soak",
            "cool",
            "cool",
        ]

    def test_cast_reach_label(self, generator, cast_request):
        result = generator.generate_schedule(cast_request)
        assert "Reach Cast" in labels(result)
        assert "Process Reach" not in labels(result)

    def test_full_fuse_timings(self, generator, bullseye_full_fuse_request):
        """1/4" Bullseye full fuse at 400°F/h, 15 min hold, crash to 961°F."""
        result = generator.generate_schedule(bullseye_full_fuse_request)
        assert point_by_label(result, "Process Reach").time == pytest.approx(1340 / 400)
        assert point_by_label(result, "Process Complete").time == pytest.approx(3.35 + 0.25)
        assert point_by_label(result, "Cool to Anneal").time == pytest.approx(3.6 + 0.529)
        assert point_by_label(result, "Cool to Anneal").temp == 961

    def test_peak_and_total(self, generator, bullseye_full_fuse_request):
        result = generator.generate_schedule(bullseye_full_fuse_request)
        assert result.peak_temp == 1490
        assert result.total_hours == result.points[-1].time


class TestMoldDry:
    """Cast mode mold dry inserts exactly two waypoints."""

    def test_two_extra_waypoints(self, generator, cast_request):
        with_dry = generator.generate_schedule(cast_request)
        cast_request.mold_dry_hours = None
        without_dry = generator.generate_schedule(cast_request)

        assert len(with_dry.points) == len(without_dry.points) + 2
        assert labels(with_dry)[1:3] == ["Mold Dry Reach", "Mold Dry Hold"]
        assert segment_types(with_dry)[1:3] == ["heat", "process"]

    def test_dry_hold_added_to_total(self, generator, cast_request):
        """Ramping through the dry temperature costs nothing extra."""
        with_dry = generator.generate_schedule(cast_request)
        cast_request.mold_dry_hours = None
        without_dry = generator.generate_schedule(cast_request)

        assert with_dry.total_hours == pytest.approx(without_dry.total_hours + 2)

    def test_dry_hold_span(self, generator, cast_request):
        result = generator.generate_schedule(cast_request)
        reach = point_by_label(result, "Mold Dry Reach")
        hold = point_by_label(result, "Mold Dry Hold")
        assert reach.temp == hold.temp == 250
        assert hold.time - reach.time == pytest.approx(2)


class TestIndefiniteHold:
    """Indefinite holds are a marked point with no duration."""

    def test_zero_elapsed_time(self):
        indefinite = compute_schedule(
            "bullseye_coe90", 0.25, "full_fuse", process_hold_minutes=30, process_hold_indefinite=True
        )
        zero_hold = compute_schedule("bullseye_coe90", 0.25, "full_fuse", process_hold_minutes=0)
        assert indefinite.total_hours == pytest.approx(zero_hold.total_hours)

    def test_marked_waypoint(self):
        result = compute_schedule("oceanside_coe96", 0.5, "tack_fuse", process_hold_indefinite=True)
        hold = point_by_label(result, "Process Hold (Indefinite)")
        reach = point_by_label(result, "Process Reach")
        assert hold.segment_type == "process_hold_indefinite"
        assert hold.time == reach.time
        assert "process_hold" not in segment_types(result)


class TestConservativeness:
    """Caution lengthens the schedule."""

    def test_total_time_ordering(self):
        totals = [
            compute_schedule("bullseye_coe90", 1.0, "full_fuse", conservativeness=level).total_hours
            for level in ("fast", "standard", "cautious")
        ]
        assert totals[0] < totals[1] < totals[2]

    def test_soak_ordering(self):
        soaks = []
        for level in ("fast", "standard", "cautious"):
            result = compute_schedule("bullseye_coe90", 0.25, conservativeness=level)
            soaks.append(
                point_by_label(result, "Anneal Soak").time - point_by_label(result, "Reach Soak").time
            )
        assert soaks[0] <= soaks[1] <= soaks[2]


class TestComputeScheduleErrors:
    """Invalid input surfaces as ScheduleValidationError."""

    def test_zero_thickness(self):
        with pytest.raises(ScheduleValidationError):
            compute_schedule("bullseye_coe90", 0)

    def test_nan_thickness(self):
        with pytest.raises(ScheduleValidationError):
            compute_schedule("bullseye_coe90", float("nan"))

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            compute_schedule("bullseye_coe90", -1)
