from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from src.domain.models import CollectionRoute, Stop


class IRouteRepository(ABC):
    """Port for loading collection routes and their bins."""

    @abstractmethod
    def get_route(self, route_id: str) -> CollectionRoute | None:
        raise NotImplementedError

    @abstractmethod
    def get_stops(self, bin_ids: Sequence[str]) -> list[Stop]:
        """Return stops in the order of ``bin_ids``.

        Ids without a bin record are skipped.
        """

    @abstractmethod
    def save_bin_order(
        self, *, route_id: str, bin_ids: Sequence[str], planned_distance_km: float
    ) -> CollectionRoute:
        """Persist the visiting order and tour length; return the updated route."""
