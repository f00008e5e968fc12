from __future__ import annotations

import math
from typing import Sequence

from src.domain.models import GeoPoint, Stop

EARTH_RADIUS_KM = 6371.0


def haversine_distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in kilometers (mean Earth radius 6371 km)."""

    d_lat = math.radians(b.lat - a.lat)
    d_lon = math.radians(b.lon - a.lon)

    s = (
        math.sin(d_lat / 2.0) ** 2
        + math.cos(math.radians(a.lat))
        * math.cos(math.radians(b.lat))
        * math.sin(d_lon / 2.0) ** 2
    )
    c = 2.0 * math.atan2(math.sqrt(s), math.sqrt(1.0 - s))
    return EARTH_RADIUS_KM * c


def tour_distance_km(stops: Sequence[Stop]) -> float:
    if len(stops) < 2:
        return 0.0
    total = 0.0
    for a, b in zip(stops, stops[1:]):
        total += haversine_distance_km(a.location, b.location)
    return float(total)


def is_placeholder_location(point: GeoPoint) -> bool:
    # Bins registered without an address default to [0, 0].
    return point.lat == 0.0 and point.lon == 0.0
