from __future__ import annotations

from fastapi import APIRouter, Depends

from src.adapters.api.dependencies import get_route_optimization_service
from src.adapters.api.schemas.routes import (
    CollectionRouteSchema,
    OptimizedRouteSchema,
    StopSchema,
    TourRequestSchema,
    TourSchema,
)
from src.app.services.route_optimization_service import RouteOptimizationService
from src.domain.models import CollectionRoute, Stop, Tour

router = APIRouter(tags=["routes"])


def _tour_to_schema(tour: Tour) -> TourSchema:
    return TourSchema(
        stops=[
            StopSchema(id=s.id, coordinates=s.coordinate, name=s.name)
            for s in tour.stops
        ],
        total_distance_km=tour.total_distance_km,
    )


def _route_to_schema(route: CollectionRoute) -> CollectionRouteSchema:
    return CollectionRouteSchema(
        route_id=route.route_id,
        route_code=route.route_code,
        route_name=route.route_name,
        status=route.status.value,
        priority=route.priority.value,
        bin_ids=list(route.bin_ids),
        planned_distance_km=route.planned_distance_km,
    )


@router.post("/tours", response_model=TourSchema)
def plan_tour(
    req: TourRequestSchema,
    service: RouteOptimizationService = Depends(get_route_optimization_service),
) -> TourSchema:
    stops = [Stop.from_coordinates(s.id, s.coordinates, name=s.name) for s in req.stops]
    return _tour_to_schema(service.plan_tour(stops))


@router.post("/routes/{route_id}/optimize", response_model=OptimizedRouteSchema)
def optimize_route(
    route_id: str,
    service: RouteOptimizationService = Depends(get_route_optimization_service),
) -> OptimizedRouteSchema:
    # Domain errors are mapped to 404/400 by the app-level handler.
    result = service.optimize_route(route_id)
    return OptimizedRouteSchema(
        route=_route_to_schema(result.route), tour=_tour_to_schema(result.tour)
    )
