from __future__ import annotations

from typing import Sequence

from src.domain.algorithms.geo_utils import haversine_distance_km, tour_distance_km
from src.domain.models import Stop, Tour


def optimize(stops: Sequence[Stop]) -> list[Stop]:
    """Order stops with a greedy nearest-neighbor walk.

    The walk starts at ``stops[0]`` and repeatedly moves to the closest
    unvisited stop by great-circle distance. Ties go to the stop that comes
    first in the input. This is a heuristic: the result is not guaranteed to
    be the shortest tour.
    """

    if not stops:
        return []

    visited = [False] * len(stops)
    visited[0] = True
    current = stops[0]
    tour = [current]

    for _ in range(len(stops) - 1):
        best_i = -1
        best_d = 0.0
        for i, candidate in enumerate(stops):
            if visited[i]:
                continue
            d = haversine_distance_km(current.location, candidate.location)
            if best_i < 0 or d < best_d:
                best_d = d
                best_i = i

        visited[best_i] = True
        current = stops[best_i]
        tour.append(current)

    return tour


def build_tour(stops: Sequence[Stop]) -> Tour:
    ordered = optimize(stops)
    return Tour(stops=tuple(ordered), total_distance_km=tour_distance_km(ordered))
