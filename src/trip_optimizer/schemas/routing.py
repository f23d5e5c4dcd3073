"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.domain import VehicleType, Waypoint


class WaypointModel(BaseModel):
    id: str = Field(..., min_length=1)
    name: str
    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lng: float = Field(..., ge=-180, le=180, allow_inf_nan=False)
    address: Optional[str] = None

    def to_domain(self) -> Waypoint:
        return Waypoint(
            id=self.id,
            name=self.name,
            latitude=self.lat,
            longitude=self.lng,
            address=self.address,
        )


class OptimizationRequest(BaseModel):
    vehicle_type: VehicleType = VehicleType.CAR
    waypoints: List[WaypointModel] = Field(..., description="Stops in the order the user entered them.")


class RouteModel(BaseModel):
    path: List[int]
    waypoint_ids: List[str]
    total_distance_km: float
    estimated_time_min: float
    distance_display: str
    time_display: str


class OptimizationResponse(BaseModel):
    vehicle_type: VehicleType
    strategy: str
    original_route: RouteModel
    optimized_route: RouteModel
    savings_distance_km: float
    savings_time_min: float
    savings_percentage: float
    summary: str


class VehicleModel(BaseModel):
    vehicle_type: VehicleType
    speed_kmh: float
