from .geo import GeoPoint
from .route import CollectionRoute, RoutePriority, RouteStatus, Tour
from .stop import Stop

__all__ = [
    "GeoPoint",
    "Stop",
    "CollectionRoute",
    "RoutePriority",
    "RouteStatus",
    "Tour",
]
