from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .stop import Stop


class RouteStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class RoutePriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


@dataclass(frozen=True, slots=True)
class CollectionRoute:
    """A collection route as stored by the platform (subset of fields)."""

    route_id: str
    route_code: str
    route_name: str
    status: RouteStatus = RouteStatus.PENDING
    priority: RoutePriority = RoutePriority.MEDIUM
    bin_ids: tuple[str, ...] = field(default_factory=tuple)
    # Greedy tour length at optimization time (open path). The distance
    # actually driven is recorded elsewhere when the run completes.
    planned_distance_km: float = 0.0

    @property
    def is_optimizable(self) -> bool:
        # Once a collector has started the run the order is frozen.
        return self.status is RouteStatus.PENDING


@dataclass(frozen=True, slots=True)
class Tour:
    stops: tuple[Stop, ...] = ()
    total_distance_km: float = 0.0

    @property
    def stop_ids(self) -> tuple[str, ...]:
        return tuple(s.id for s in self.stops)
