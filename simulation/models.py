"""
Purpose: Domain models for the route simulation.
What it does:
- GeoPoint (lat, lng in degrees)
- SimulationStep (one simulated GPS fix, timestamp relative to trip start)
- SimulationResult (total duration + ordered steps)

Rule: No HTTP calls, no resampling logic. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Union


@dataclass(frozen=True)
class GeoPoint:
    """
    Immutable lat/lng pair in degrees. No identity beyond its coordinates.
    """
    lat: float
    lng: float

    @classmethod
    def from_value(cls, value: Union[GeoPoint, Dict[str, Any], Sequence[float]]) -> GeoPoint:
        """
        Build a GeoPoint from the shapes a request body can carry:
        {"lat": .., "lng": ..} dicts or [lat, lng] pairs.
        """
        if isinstance(value, GeoPoint):
            return value
        if isinstance(value, dict):
            return cls(lat=float(value["lat"]), lng=float(value["lng"]))
        lat, lng = value
        return cls(lat=float(lat), lng=float(lng))

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class SimulationStep:
    """
    A single simulated fix. timestamp_ms is 0 at the first sample.
    """
    lat: float
    lng: float
    timestamp_ms: int

    def to_dict(self) -> Dict[str, Any]:
        return {"lat": self.lat, "lng": self.lng, "timestamp": self.timestamp_ms}


@dataclass
class SimulationResult:
    """
    Output of the resampler, handed to the caller as the response payload.
    """
    total_duration_seconds: int
    steps: List[SimulationStep] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalDurationSeconds": self.total_duration_seconds,
            "steps": [step.to_dict() for step in self.steps],
        }
