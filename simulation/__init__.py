"""
Simulation domain package.

Public API:
- Domain models: GeoPoint, SimulationStep, SimulationResult
- Core steps: distance, decode, resample
- Orchestration: RouteSimulationService
"""
from .models import GeoPoint, SimulationStep, SimulationResult
from .errors import (
    SimulationError,
    ValidationError,
    NoRouteFoundError,
    DecodeError,
    InvalidSpeedError,
)
from .geodesy import distance
from .polyline import decode
from .resampler import resample, kmh_to_mps
from .service import RouteSimulationService

__all__ = [
    "GeoPoint",
    "SimulationStep",
    "SimulationResult",
    "SimulationError",
    "ValidationError",
    "NoRouteFoundError",
    "DecodeError",
    "InvalidSpeedError",
    "distance",
    "decode",
    "resample",
    "kmh_to_mps",
    "RouteSimulationService",
]
