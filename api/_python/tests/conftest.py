"""
Pytest fixtures for annealing schedule tests.
"""

import pytest

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from annealing.scheduler import ScheduleGenerator
from annealing.types import ScheduleRequest


@pytest.fixture
def generator():
    """Schedule generator instance."""
    return ScheduleGenerator()


@pytest.fixture
def bullseye_anneal_request():
    """Single 1/4" layer of Bullseye, anneal only."""
    return ScheduleRequest(
        glass_type="bullseye_coe90",
        thickness=0.25,
        mode="anneal_only",
        units="imperial",
    )


@pytest.fixture
def bullseye_full_fuse_request():
    """Two-layer Bullseye full fuse, 1/4" total."""
    return ScheduleRequest(
        glass_type="bullseye_coe90",
        thickness=0.25,
        mode="full_fuse",
        units="imperial",
    )


@pytest.fixture
def cast_request():
    """1" Bullseye casting with a 2 hour mold dry."""
    return ScheduleRequest(
        glass_type="bullseye_coe90",
        thickness=1.0,
        mode="cast",
        units="imperial",
        mold_dry_hours=2,
    )


@pytest.fixture
def metric_slump_request():
    """6mm Oceanside slump, entered in centimeters and Celsius."""
    return ScheduleRequest(
        glass_type="oceanside_coe96",
        thickness=0.6,
        mode="slump",
        units="metric",
        process_temp=660,
        process_ramp=150,
    )
