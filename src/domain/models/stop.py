from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class Stop:
    """One bin location as seen by the route optimizer."""

    id: str
    location: GeoPoint
    name: str | None = None

    @property
    def coordinate(self) -> tuple[float, float]:
        # GeoJSON order, as stored on bin records.
        return (self.location.lon, self.location.lat)

    @classmethod
    def from_coordinates(
        cls, id: str, coordinates: Sequence[float], name: str | None = None
    ) -> "Stop":
        lon, lat = coordinates
        return cls(id=id, location=GeoPoint(lat=float(lat), lon=float(lon)), name=name)
