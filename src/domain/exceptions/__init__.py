from .routing import (
    EmptyRoute,
    RouteNotFound,
    RouteNotOptimizable,
    RouteOptimizationError,
)

__all__ = [
    "EmptyRoute",
    "RouteNotFound",
    "RouteNotOptimizable",
    "RouteOptimizationError",
]
