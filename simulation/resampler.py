"""
Purpose: Turn a decoded path into a fixed-cadence GPS trajectory.
What it does:
Walks consecutive vertex pairs (segments) and emits one sample per elapsed
second of travel at a constant speed, linearly interpolated inside the segment.
A final sample is always forced at the exact last vertex.

Timing per segment:
    segment_duration = distance / speed_mps
    steps_in_segment = round_half_up(segment_duration)

A segment whose travel time rounds to 0 emits nothing and does not advance
the clock. Intermediate vertices are only hit when a sample lands on them.

Rule: pure computation. No I/O, no shared state between calls.
"""

import math
from typing import List, Tuple

from .errors import InvalidSpeedError
from .geodesy import distance
from .models import GeoPoint, SimulationResult, SimulationStep


def kmh_to_mps(speed_kmh: float) -> float:
    """Convert km/h to m/s."""
    return speed_kmh * 1000 / 3600


def round_half_up(value: float) -> int:
    """
    Nearest integer, ties towards +infinity.
    Python's round() uses banker's rounding (round(2.5) == 2), which we don't want here.
    floor(value + 0.5) is off for 0.49999999999999994 (the sum rounds up to 1.0),
    checking the fractional part directly avoids that.
    """
    whole = math.floor(value)
    if value - whole >= 0.5:
        return int(whole) + 1
    return int(whole)


def _interpolate(start: GeoPoint, end: GeoPoint, fraction: float) -> Tuple[float, float]:
    #plain linear interpolation on lat/lng, not great-circle
    lat = start.lat + (end.lat - start.lat) * fraction
    lng = start.lng + (end.lng - start.lng) * fraction
    return lat, lng


def _walk_segment(
        start: GeoPoint,
        end: GeoPoint,
        speed_mps: float,
        elapsed_seconds: int,
) -> Tuple[List[SimulationStep], int]:
    """
    Emit the once-per-second samples that fall inside one segment.

    Takes the clock (elapsed_seconds) at the start of the segment and returns
    it advanced by the number of samples emitted, so the caller threads it
    into the next segment.
    """
    segment_duration = distance(start, end) / speed_mps
    steps_in_segment = round_half_up(segment_duration)

    steps: List[SimulationStep] = []
    for j in range(steps_in_segment):
        lat, lng = _interpolate(start, end, j / steps_in_segment)
        steps.append(
            SimulationStep(
                lat=lat,
                lng=lng,
                timestamp_ms=round_half_up(elapsed_seconds * 1000),
            )
        )
        elapsed_seconds += 1

    return steps, elapsed_seconds


def resample(path: List[GeoPoint], speed_mps: float) -> SimulationResult:
    """
    Resample `path` into one fix per second at constant `speed_mps`.

    Args:
        path: decoded vertices in travel order, at least one. A single vertex
            yields just the forced destination fix at t=0.
        speed_mps: speed in meters per second, must be > 0.
            Use kmh_to_mps() to convert a km/h figure.

    Returns:
        SimulationResult whose last step sits exactly on path[-1] and whose
        total_duration_seconds is the number of one-second advances made.
    """
    if not speed_mps > 0:
        raise InvalidSpeedError(f"speed_mps must be > 0, got {speed_mps}")
    if not path:
        raise ValueError("At least one point is required to resample a path.")

    steps: List[SimulationStep] = []
    elapsed_seconds = 0

    for start, end in zip(path, path[1:]):
        segment_steps, elapsed_seconds = _walk_segment(start, end, speed_mps, elapsed_seconds)
        steps.extend(segment_steps)

    # force the last fix onto the destination, interpolation never lands there
    destination = path[-1]
    steps.append(
        SimulationStep(
            lat=destination.lat,
            lng=destination.lng,
            timestamp_ms=round_half_up(elapsed_seconds * 1000),
        )
    )

    return SimulationResult(total_duration_seconds=elapsed_seconds, steps=steps)
