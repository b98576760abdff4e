"""
Purpose: Decode the compact polyline encoding returned by the routing service.
What it does:
Turns an encoded path string into an ordered list of GeoPoints.

Encoding (precision 5):
- each value is a signed delta from the previous vertex, starting at (0, 0)
- deltas are zig-zag encoded, then split into 5-bit groups, low bits first
- every group but the last has the 0x20 continuation bit set
- each group is offset by 63 to land on a printable ASCII character

We only ever decode. Encoding happens inside the routing service.
"""

from typing import List, Tuple

from .errors import DecodeError
from .models import GeoPoint

PRECISION = 1e5

# printable range used by the encoding: chr(63) .. chr(63 + 63)
_MIN_CHAR = 63
_MAX_CHAR = 63 + 0x3F


def _read_value(encoded: str, index: int) -> Tuple[int, int]:
    """
    Read one zig-zag encoded signed integer starting at `index`.
    Returns (value, next_index).
    """
    result = 0
    shift = 0

    while True:
        if index >= len(encoded):
            raise DecodeError(f"Truncated polyline: input ended inside a value at position {index}")

        code = ord(encoded[index])
        if code < _MIN_CHAR or code > _MAX_CHAR:
            raise DecodeError(f"Invalid polyline character {encoded[index]!r} at position {index}")

        chunk = code - _MIN_CHAR
        index += 1
        result |= (chunk & 0x1F) << shift
        shift += 5

        if chunk < 0x20: #continuation bit clear -> last group of this value
            break

    if result & 1:
        return ~(result >> 1), index
    return result >> 1, index


def decode(encoded: str) -> List[GeoPoint]:
    """
    Decode `encoded` into GeoPoints in travel order.

    Raises:
        DecodeError: truncated group, latitude without a longitude,
            or a character outside the encoding alphabet.
    """
    points: List[GeoPoint] = []
    index = 0
    lat = 0
    lng = 0

    while index < len(encoded):
        delta_lat, index = _read_value(encoded, index)
        if index >= len(encoded):
            raise DecodeError("Truncated polyline: latitude without a matching longitude")
        delta_lng, index = _read_value(encoded, index)

        lat += delta_lat
        lng += delta_lng
        points.append(GeoPoint(lat=lat / PRECISION, lng=lng / PRECISION))

    return points
