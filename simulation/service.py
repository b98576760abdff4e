"""
Purpose: Orchestrator for one route simulation (the "glue").
What it does:
Validates the request inputs, asks the routing collaborator for a route,
decodes the first route's overview polyline and resamples it at the
requested speed.

One outbound call per simulate(), no retries, no caching.
"""

import logging
import math
from typing import Any

from .errors import DecodeError, NoRouteFoundError, ValidationError
from .polyline import decode
from .resampler import kmh_to_mps, resample
from .models import SimulationResult

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "Parameters origin, destination and speedKmh are required."


def parse_speed_kmh(speed_kmh: Any) -> float:
    """
    Accepts numbers or numeric strings. Rejects booleans, NaN/inf and values <= 0.
    """
    if isinstance(speed_kmh, bool):
        raise ValidationError("speedKmh must be a number.")
    try:
        speed = float(speed_kmh)
    except (TypeError, ValueError):
        raise ValidationError("speedKmh must be a number.")

    if not math.isfinite(speed):
        raise ValidationError("speedKmh must be a finite number.")
    if speed <= 0:
        raise ValidationError("speedKmh must be greater than zero.")
    return speed


def validate_request(origin: Any, destination: Any, speed_kmh: Any) -> float:
    """
    Check the three request fields and return the speed in km/h.
    Runs before any collaborator is built, so bad input never costs an outbound call.
    """
    if not origin or not destination or not speed_kmh:
        raise ValidationError(REQUIRED_MESSAGE)
    return parse_speed_kmh(speed_kmh)


class RouteSimulationService:
    """
    Coordinates collaborator -> decoder -> resampler for a single request.
    The directions client only needs a fetch_routes(origin, destination) method.
    """
    def __init__(self, directions_client):
        self.directions_client = directions_client

    def simulate(self, origin: Any, destination: Any, speed_kmh: Any) -> SimulationResult:
        """
        Simulate a device driving origin -> destination at speed_kmh.

        Raises:
            ValidationError: missing/falsy input or non-positive speed (no outbound call made).
            NoRouteFoundError: the collaborator returned zero routes.
            DecodeError: the returned route has no usable encoded path.
            CollaboratorError: propagated from the directions client.
        """
        speed_mps = kmh_to_mps(validate_request(origin, destination, speed_kmh))

        routes = self.directions_client.fetch_routes(origin, destination)
        if not routes:
            logger.debug(f"No route found from {origin!r} to {destination!r}")
            raise NoRouteFoundError("No route found.")

        try:
            encoded = routes[0]["overview_polyline"]["points"]
        except (KeyError, IndexError, TypeError) as e:
            raise DecodeError("Route has no overview polyline.") from e

        path = decode(encoded)
        if not path:
            raise DecodeError("Route geometry is empty.")

        result = resample(path, speed_mps)

        logger.debug(f"Simulated route {origin!r} -> {destination!r}")
        logger.info(
            f"Simulated route: {len(path)} vertices, {len(result.steps)} steps, {result.total_duration_seconds}s"
        )
        return result
