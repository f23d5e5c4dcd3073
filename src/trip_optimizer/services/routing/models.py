"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ...models.domain import VehicleType

Tour = Tuple[int, ...]


@dataclass(slots=True, frozen=True)
class RouteResult:
    path: Tour
    total_distance_km: float
    estimated_time_min: float


@dataclass(slots=True, frozen=True)
class OptimizationResult:
    original_route: RouteResult
    optimized_route: RouteResult
    savings_distance_km: float
    savings_time_min: float
    savings_percentage: float
    vehicle_type: VehicleType
    strategy: str
