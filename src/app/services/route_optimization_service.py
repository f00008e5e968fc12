from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from src.app.ports.output import IRouteRepository
from src.domain.algorithms.geo_utils import is_placeholder_location
from src.domain.algorithms.nearest_neighbor import build_tour
from src.domain.exceptions import EmptyRoute, RouteNotFound, RouteNotOptimizable
from src.domain.models import CollectionRoute, Stop, Tour

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OptimizedRoute:
    route: CollectionRoute
    tour: Tour


@dataclass(slots=True)
class RouteOptimizationService:
    """Application service (use case) for reordering collection routes.

    The ordering itself lives in the domain; this layer loads the route,
    enforces the pending-only rule and persists the result.
    """

    route_repository: IRouteRepository

    def plan_tour(self, stops: Sequence[Stop]) -> Tour:
        return build_tour(stops)

    def optimize_route(self, route_id: str) -> OptimizedRoute:
        route = self.route_repository.get_route(route_id)
        if route is None:
            raise RouteNotFound(route_id)
        if not route.is_optimizable:
            raise RouteNotOptimizable(route_id, route.status.value)
        if not route.bin_ids:
            raise EmptyRoute(route_id)

        stops = self.route_repository.get_stops(route.bin_ids)
        if len(stops) < len(route.bin_ids):
            logger.warning(
                "Route %s references %d missing bin(s); dropped from the order",
                route_id,
                len(route.bin_ids) - len(stops),
            )
        if not stops:
            raise EmptyRoute(route_id)

        # [0, 0] is the default for bins without an address. They are still
        # ordered like any other point.
        placeholders = [s.id for s in stops if is_placeholder_location(s.location)]
        if placeholders:
            logger.warning(
                "Route %s has bins at the [0, 0] placeholder location: %s",
                route_id,
                ", ".join(placeholders),
            )

        tour = build_tour(stops)
        updated = self.route_repository.save_bin_order(
            route_id=route_id,
            bin_ids=tour.stop_ids,
            planned_distance_km=tour.total_distance_km,
        )
        logger.info(
            "Optimized route %s: %d stops, %.3f km",
            route_id,
            len(tour.stops),
            tour.total_distance_km,
        )
        return OptimizedRoute(route=updated, tour=tour)
