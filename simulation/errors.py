"""
Purpose: Error taxonomy for the simulation pipeline.
What it does:
Each error maps to one outcome at the HTTP boundary:
- ValidationError   -> 400
- NoRouteFoundError -> 404
- DecodeError       -> 500

InvalidSpeedError is a precondition failure of the resampler itself.
It only surfaces when resample() is called directly with a bad speed.
"""


class SimulationError(Exception):
    """Base class for errors reported back to the caller of a simulation."""
    pass


class ValidationError(SimulationError):
    """Missing or invalid request input (origin, destination, speedKmh)."""
    pass


class NoRouteFoundError(SimulationError):
    """The routing collaborator returned an empty route set."""
    pass


class DecodeError(SimulationError):
    """Malformed encoded path returned by the routing collaborator."""
    pass


class InvalidSpeedError(ValueError):
    """Raised when the resampler receives a speed <= 0."""
    pass
