from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

Longitude = Annotated[float, Field(ge=-180.0, le=180.0, allow_inf_nan=False)]
Latitude = Annotated[float, Field(ge=-90.0, le=90.0, allow_inf_nan=False)]


class StopSchema(BaseModel):
    id: str = Field(..., min_length=1)
    coordinates: tuple[Longitude, Latitude] = Field(
        ..., description="[longitude, latitude] in decimal degrees"
    )
    name: str | None = None


class TourRequestSchema(BaseModel):
    stops: list[StopSchema] = []


class TourSchema(BaseModel):
    stops: list[StopSchema] = []
    total_distance_km: float = 0.0


class CollectionRouteSchema(BaseModel):
    route_id: str
    route_code: str
    route_name: str
    status: str
    priority: str
    bin_ids: list[str] = []
    planned_distance_km: float = 0.0


class OptimizedRouteSchema(BaseModel):
    route: CollectionRouteSchema
    tour: TourSchema
    message: str = "Route optimized successfully"
