from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Sequence

from src.adapters.aws import dynamodb_client
from src.app.ports.output import IRouteRepository
from src.domain.exceptions import RouteNotFound
from src.domain.models import CollectionRoute, RoutePriority, RouteStatus, Stop

_BATCH_GET_LIMIT = 100


def _route_from_item(item: dict[str, Any]) -> CollectionRoute:
    return CollectionRoute(
        route_id=item["route_id"]["S"],
        route_code=item.get("route_code", {}).get("S", ""),
        route_name=item.get("route_name", {}).get("S", ""),
        status=RouteStatus(item.get("status", {}).get("S", "pending")),
        priority=RoutePriority(item.get("priority", {}).get("S", "medium")),
        bin_ids=tuple(v["S"] for v in item.get("bin_ids", {}).get("L", [])),
        planned_distance_km=float(item.get("planned_distance_km", {}).get("N", "0")),
    )


def _stop_from_item(item: dict[str, Any]) -> Stop | None:
    lon = item.get("lon", {}).get("N")
    lat = item.get("lat", {}).get("N")
    if lon is None or lat is None:
        return None
    return Stop.from_coordinates(
        item["bin_id"]["S"],
        (float(lon), float(lat)),
        name=item.get("address", {}).get("S"),
    )


@dataclass(slots=True)
class DynamoDbRouteRepository(IRouteRepository):
    """Reads routes and bin locations from DynamoDB.

    Env vars:
      - ROUTES_TABLE (default: binroute-routes)
      - BINS_TABLE (default: binroute-bins)
      - ENDPOINT_URL (preferred for LocalStack)
      - AWS_REGION
    """

    routes_table: str | None = None
    bins_table: str | None = None

    def _routes(self) -> str:
        return self.routes_table or os.getenv("ROUTES_TABLE") or "binroute-routes"

    def _bins(self) -> str:
        return self.bins_table or os.getenv("BINS_TABLE") or "binroute-bins"

    def get_route(self, route_id: str) -> CollectionRoute | None:
        resp = dynamodb_client().get_item(
            TableName=self._routes(),
            Key={"route_id": {"S": route_id}},
            ConsistentRead=True,
        )
        item = resp.get("Item")
        if not item:
            return None
        return _route_from_item(item)

    def get_stops(self, bin_ids: Sequence[str]) -> list[Stop]:
        ddb = dynamodb_client()
        table = self._bins()
        unique_ids = list(dict.fromkeys(bin_ids))

        found: dict[str, Stop] = {}
        for start in range(0, len(unique_ids), _BATCH_GET_LIMIT):
            keys: list[dict[str, Any]] = [
                {"bin_id": {"S": bid}}
                for bid in unique_ids[start : start + _BATCH_GET_LIMIT]
            ]
            while keys:
                resp = ddb.batch_get_item(RequestItems={table: {"Keys": keys}})
                for item in resp.get("Responses", {}).get(table, []):
                    stop = _stop_from_item(item)
                    if stop is not None:
                        found[stop.id] = stop
                keys = resp.get("UnprocessedKeys", {}).get(table, {}).get("Keys", [])

        # batch_get_item does not preserve key order.
        return [found[bid] for bid in bin_ids if bid in found]

    def save_bin_order(
        self, *, route_id: str, bin_ids: Sequence[str], planned_distance_km: float
    ) -> CollectionRoute:
        ddb = dynamodb_client()
        try:
            resp = ddb.update_item(
                TableName=self._routes(),
                Key={"route_id": {"S": route_id}},
                UpdateExpression="SET bin_ids = :b, planned_distance_km = :d",
                ConditionExpression="attribute_exists(route_id)",
                ExpressionAttributeValues={
                    ":b": {"L": [{"S": bid} for bid in bin_ids]},
                    ":d": {"N": repr(float(planned_distance_km))},
                },
                ReturnValues="ALL_NEW",
            )
        except ddb.exceptions.ConditionalCheckFailedException as exc:
            raise RouteNotFound(route_id) from exc
        return _route_from_item(resp["Attributes"])
