from .route_repository import IRouteRepository

__all__ = ["IRouteRepository"]
