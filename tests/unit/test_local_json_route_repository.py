from __future__ import annotations

import json
import threading
from pathlib import Path

import pytest

from src.adapters.persistence.local_json_route_repository import (
    LocalJsonRouteRepository,
)
from src.domain.exceptions import RouteNotFound
from src.domain.models import RoutePriority, RouteStatus


def _write_doc(path: Path) -> None:
    doc = {
        "routes": [
            {
                "route_id": "r1",
                "route_code": "col-01",
                "route_name": " Colombo Fort ",
                "status": "pending",
                "priority": "high",
                "bin_ids": ["bin2", "bin1", "ghost"],
            }
        ],
        "bins": [
            {"bin_id": "bin1", "coordinates": [79.8612, 6.9271], "address": "Main St"},
            {"bin_id": "bin2", "coordinates": [79.8613, 6.9272]},
            {"bin_id": "nowhere"},
        ],
    }
    path.write_text(json.dumps(doc), encoding="utf-8")


def test_get_route_parses_fields(tmp_path: Path) -> None:
    path = tmp_path / "routes.json"
    _write_doc(path)
    repo = LocalJsonRouteRepository(path=path)

    route = repo.get_route("r1")

    assert route is not None
    assert route.route_code == "COL-01"
    assert route.route_name == "Colombo Fort"
    assert route.status is RouteStatus.PENDING
    assert route.priority is RoutePriority.HIGH
    assert route.bin_ids == ("bin2", "bin1", "ghost")
    assert repo.get_route("r2") is None


def test_get_stops_keeps_requested_order_and_skips_unknown(tmp_path: Path) -> None:
    path = tmp_path / "routes.json"
    _write_doc(path)
    repo = LocalJsonRouteRepository(path=path)

    stops = repo.get_stops(["bin2", "ghost", "bin1", "nowhere"])

    assert [s.id for s in stops] == ["bin2", "bin1"]
    assert stops[1].coordinate == (79.8612, 6.9271)
    assert stops[1].name == "Main St"


def test_save_bin_order_writes_back(tmp_path: Path) -> None:
    path = tmp_path / "routes.json"
    _write_doc(path)
    repo = LocalJsonRouteRepository(path=path)

    updated = repo.save_bin_order(
        route_id="r1", bin_ids=["bin1", "bin2"], planned_distance_km=0.015
    )

    assert updated.bin_ids == ("bin1", "bin2")
    assert updated.planned_distance_km == 0.015
    stored = json.loads(path.read_text(encoding="utf-8"))["routes"][0]
    assert stored["bin_ids"] == ["bin1", "bin2"]
    assert stored["planned_distance_km"] == 0.015


def test_save_bin_order_for_unknown_route_raises(tmp_path: Path) -> None:
    repo = LocalJsonRouteRepository(path=tmp_path / "missing.json")

    assert repo.get_route("r1") is None
    with pytest.raises(RouteNotFound):
        repo.save_bin_order(route_id="r1", bin_ids=[], planned_distance_km=0.0)


def test_concurrent_saves_keep_every_route_and_a_readable_file(tmp_path: Path) -> None:
    path = tmp_path / "routes.json"
    route_ids = [f"r{i}" for i in range(8)]
    doc = {
        "routes": [{"route_id": rid, "bin_ids": ["old"]} for rid in route_ids],
        "bins": [],
    }
    path.write_text(json.dumps(doc), encoding="utf-8")
    repo = LocalJsonRouteRepository(path=path)
    errors: list[Exception] = []

    def _save_repeatedly(route_id: str) -> None:
        try:
            for n in range(30):
                repo.save_bin_order(
                    route_id=route_id,
                    bin_ids=[f"{route_id}-bin{n}"],
                    planned_distance_km=float(n),
                )
                repo.get_route(route_id)
        except Exception as exc:
            errors.append(exc)

    threads = [
        threading.Thread(target=_save_repeatedly, args=(rid,)) for rid in route_ids
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    stored = {r["route_id"]: r for r in json.loads(path.read_text("utf-8"))["routes"]}
    for rid in route_ids:
        assert stored[rid]["bin_ids"] == [f"{rid}-bin29"]
        assert stored[rid]["planned_distance_km"] == 29.0
    assert list(tmp_path.glob("*.tmp")) == []
