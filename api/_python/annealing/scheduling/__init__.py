"""
Practical Scheduling Layer.

Applies firing modes, material defaults and caller overrides on top of the
science layer, then lays out the ordered segments.

Modules:
- resolver: Default and override resolution into Fahrenheit scalars
- sequencer: Segment descriptors and their fold into waypoints
"""

from .resolver import ResolvedFiring, resolve_firing
from .sequencer import Segment, build_segments, fold_segments, generate_waypoints

__all__ = [
    "ResolvedFiring",
    "resolve_firing",
    "Segment",
    "build_segments",
    "fold_segments",
    "generate_waypoints",
]
