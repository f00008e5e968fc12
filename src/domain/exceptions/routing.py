class RouteOptimizationError(Exception):
    """Base exception for route optimization failures."""


class RouteNotFound(RouteOptimizationError):
    def __init__(self, route_id: str) -> None:
        super().__init__("Route not found")
        self.route_id = route_id


class RouteNotOptimizable(RouteOptimizationError):
    """Raised when a route has left the pending state."""

    def __init__(self, route_id: str, status: str) -> None:
        super().__init__("Can only optimize pending routes")
        self.route_id = route_id
        self.status = status


class EmptyRoute(RouteOptimizationError):
    def __init__(self, route_id: str) -> None:
        super().__init__("Route has no bins to optimize")
        self.route_id = route_id
