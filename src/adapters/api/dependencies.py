from __future__ import annotations

import os

from src.adapters.persistence import DynamoDbRouteRepository, LocalJsonRouteRepository
from src.app.ports.output import IRouteRepository
from src.app.services.route_optimization_service import RouteOptimizationService


def get_route_repository() -> IRouteRepository:
    # DynamoDB when configured, otherwise a JSON file for local runs.
    if os.getenv("ROUTES_TABLE"):
        return DynamoDbRouteRepository()
    return LocalJsonRouteRepository()


def get_route_optimization_service() -> RouteOptimizationService:
    return RouteOptimizationService(route_repository=get_route_repository())
