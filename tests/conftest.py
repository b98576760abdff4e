import os

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "gps_backend.settings")
django.setup()

from simulation.models import GeoPoint


class MockDirections:
    """
    Stands in for routing.DirectionsClient. Returns canned routes and records every call.
    """
    def __init__(self, routes=None, error=None):
        self.routes = routes if routes is not None else []
        self.error = error
        self.calls = []

    def fetch_routes(self, origin, destination):
        self.calls.append((origin, destination))
        if self.error is not None:
            raise self.error
        return self.routes


# (0,0) -> (0,0.001): ~111.19 m along the equator
EQUATOR_POLYLINE = "???gE"

# Google's reference polyline: (38.5,-120.2) -> (40.7,-120.95) -> (43.252,-126.453)
REFERENCE_POLYLINE = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"


def route_with(encoded):
    return {"overview_polyline": {"points": encoded}, "summary": "test route"}


@pytest.fixture
def equator_path():
    return [GeoPoint(0.0, 0.0), GeoPoint(0.0, 0.001)]


@pytest.fixture
def city_path():
    # a few blocks with a short zig-zag in the middle
    return [
        GeoPoint(-23.561414, -46.655881),
        GeoPoint(-23.561800, -46.656400),
        GeoPoint(-23.561810, -46.656405),
        GeoPoint(-23.563100, -46.657900),
        GeoPoint(-23.565000, -46.658200),
        GeoPoint(-23.567300, -46.661000),
    ]


@pytest.fixture
def equator_directions():
    return MockDirections(routes=[route_with(EQUATOR_POLYLINE)])
