#Purpose: Great-circle distance between two GeoPoints.
#Spherical earth (haversine), not ellipsoidal. No input validation:
#out-of-range degrees give a defined but meaningless number.

import math

from .models import GeoPoint

EARTH_RADIUS_M = 6_371_000


def distance(a: GeoPoint, b: GeoPoint) -> float:
    """Haversine distance in meters. Symmetric, 0 for coincident points."""
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    delta_lat = math.radians(b.lat - a.lat)
    delta_lng = math.radians(b.lng - a.lng)

    h = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(delta_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_M * c
