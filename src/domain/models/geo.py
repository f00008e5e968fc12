from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """WGS-84 position in decimal degrees.

    Out-of-range (and NaN) values are rejected here so that distance code
    downstream only ever sees finite coordinates.
    """

    lat: float
    lon: float

    def __post_init__(self) -> None:
        if not (-90.0 <= self.lat <= 90.0):
            raise ValueError(f"Invalid latitude: {self.lat}")
        if not (-180.0 <= self.lon <= 180.0):
            raise ValueError(f"Invalid longitude: {self.lon}")

    def to_lon_lat(self) -> list[float]:
        return [self.lon, self.lat]
