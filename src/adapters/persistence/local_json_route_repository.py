from __future__ import annotations

import json
import os
import tempfile
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from src.app.ports.output import IRouteRepository
from src.domain.exceptions import RouteNotFound
from src.domain.models import CollectionRoute, RoutePriority, RouteStatus, Stop

# Serializes read-modify-write cycles on the document within this process.
_WRITE_LOCK = threading.Lock()


def _route_from_row(row: dict[str, Any]) -> CollectionRoute:
    return CollectionRoute(
        route_id=str(row["route_id"]),
        route_code=str(row.get("route_code") or "").upper(),
        route_name=str(row.get("route_name") or "").strip(),
        status=RouteStatus(row.get("status") or "pending"),
        priority=RoutePriority(row.get("priority") or "medium"),
        bin_ids=tuple(str(b) for b in row.get("bin_ids") or ()),
        planned_distance_km=float(row.get("planned_distance_km") or 0.0),
    )


@dataclass(slots=True)
class LocalJsonRouteRepository(IRouteRepository):
    """Routes and bins kept in a single JSON document on disk.

    Layout::

        {
          "routes": [{"route_id": ..., "status": "pending", "bin_ids": [...]}],
          "bins": [{"bin_id": ..., "coordinates": [lon, lat], "address": ...}]
        }

    Env vars:
      - ROUTE_DATA_PATH: path to the JSON file (default: data/routes.json)
    """

    path: str | Path | None = None

    def _path(self) -> Path:
        value = self.path or os.getenv("ROUTE_DATA_PATH") or "data/routes.json"
        return Path(value)

    def _load(self) -> dict[str, Any]:
        p = self._path()
        if not p.exists():
            return {"routes": [], "bins": []}
        with p.open("r", encoding="utf-8") as fp:
            return json.load(fp)

    def _dump(self, doc: dict[str, Any]) -> None:
        p = self._path()
        p.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=p.parent, suffix=".tmp", delete=False
        ) as fp:
            json.dump(doc, fp, indent=2)
        os.replace(fp.name, p)

    def get_route(self, route_id: str) -> CollectionRoute | None:
        for row in self._load().get("routes", []):
            if str(row.get("route_id")) == route_id:
                return _route_from_row(row)
        return None

    def get_stops(self, bin_ids: Sequence[str]) -> list[Stop]:
        by_id: dict[str, Stop] = {}
        for row in self._load().get("bins", []):
            bin_id = str(row.get("bin_id") or "")
            coords = row.get("coordinates")
            if not bin_id or coords is None:
                continue
            by_id[bin_id] = Stop.from_coordinates(
                bin_id, coords, name=row.get("address")
            )
        return [by_id[bid] for bid in bin_ids if bid in by_id]

    def save_bin_order(
        self, *, route_id: str, bin_ids: Sequence[str], planned_distance_km: float
    ) -> CollectionRoute:
        with _WRITE_LOCK:
            doc = self._load()
            for row in doc.get("routes", []):
                if str(row.get("route_id")) == route_id:
                    row["bin_ids"] = list(bin_ids)
                    row["planned_distance_km"] = float(planned_distance_km)
                    self._dump(doc)
                    return _route_from_row(row)
        raise RouteNotFound(route_id)
