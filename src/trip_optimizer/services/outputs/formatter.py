"""Display helpers and serializers for optimization results."""

from __future__ import annotations

import csv
import io
import math
from typing import Sequence

from ...models.domain import Waypoint
from ..geospatial import waypoint_distance_km
from ..routing.models import OptimizationResult, RouteResult


def format_distance(km: float) -> str:
    if km < 1:
        return f"{round(km * 1000)} m"
    return f"{km:.1f} km"


def format_time(minutes: float) -> str:
    if minutes < 60:
        return f"{round(minutes)} min"
    hours = math.floor(minutes / 60)
    mins = round(minutes % 60)
    return f"{hours}h {mins}m"


def _route_to_json(route: RouteResult, waypoints: Sequence[Waypoint]) -> dict:
    return {
        "path": list(route.path),
        "waypoint_ids": [waypoints[index].id for index in route.path],
        "total_distance_km": route.total_distance_km,
        "estimated_time_min": route.estimated_time_min,
        "distance_display": format_distance(route.total_distance_km),
        "time_display": format_time(route.estimated_time_min),
    }


def optimization_result_to_json(result: OptimizationResult, waypoints: Sequence[Waypoint]) -> dict:
    return {
        "vehicle_type": result.vehicle_type.value,
        "strategy": result.strategy,
        "original_route": _route_to_json(result.original_route, waypoints),
        "optimized_route": _route_to_json(result.optimized_route, waypoints),
        "savings_distance_km": result.savings_distance_km,
        "savings_time_min": result.savings_time_min,
        "savings_percentage": result.savings_percentage,
        "summary": (
            f"{format_distance(result.savings_distance_km)} less · "
            f"{format_time(result.savings_time_min)} faster"
        ),
    }


def optimization_result_to_csv(
    result: OptimizationResult,
    waypoints: Sequence[Waypoint],
) -> str:
    """One row per stop of each route, including the leg distance from the previous stop.

    The first stop's leg is the closing leg from the last stop, since routes
    are round trips.
    """

    buffer = io.StringIO()
    fieldnames = [
        "route",
        "sequence",
        "waypoint_id",
        "waypoint_name",
        "latitude",
        "longitude",
        "distance_from_prev_km",
        "total_distance_km",
        "estimated_time_min",
    ]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for label, route in (("original", result.original_route), ("optimized", result.optimized_route)):
        path = route.path
        for sequence, index in enumerate(path, start=1):
            previous = path[sequence - 2]
            waypoint = waypoints[index]
            writer.writerow(
                {
                    "route": label,
                    "sequence": sequence,
                    "waypoint_id": waypoint.id,
                    "waypoint_name": waypoint.name,
                    "latitude": waypoint.latitude,
                    "longitude": waypoint.longitude,
                    "distance_from_prev_km": waypoint_distance_km(waypoints[previous], waypoint),
                    "total_distance_km": route.total_distance_km,
                    "estimated_time_min": route.estimated_time_min,
                }
            )
    return buffer.getvalue()
