from .dynamodb_route_repository import DynamoDbRouteRepository
from .local_json_route_repository import LocalJsonRouteRepository

__all__ = [
    "DynamoDbRouteRepository",
    "LocalJsonRouteRepository",
]
