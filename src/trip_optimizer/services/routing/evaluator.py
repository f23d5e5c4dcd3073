"""Route cost evaluation.

``tour_distance`` is the only cost function used to compare tours, so every
strategy ranks candidates the same way.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ...models.domain import VEHICLE_SPEEDS, VehicleType
from .models import RouteResult


def tour_distance(tour: Sequence[int], matrix: np.ndarray) -> float:
    """Total length of the closed cycle through ``tour``.

    Consecutive legs are summed and the closing leg back to the first stop is
    added when the tour has more than one stop. Empty and single-stop tours
    cost 0.
    """

    total = 0.0
    for i in range(len(tour) - 1):
        total += float(matrix[tour[i], tour[i + 1]])
    if len(tour) > 1:
        total += float(matrix[tour[-1], tour[0]])
    return total


def speed_for(vehicle_type: VehicleType | str) -> float:
    try:
        return VEHICLE_SPEEDS[VehicleType(vehicle_type)]
    except (ValueError, KeyError) as exc:
        raise ValueError(f"Unknown vehicle type '{vehicle_type}'.") from exc


def estimate_time_minutes(distance_km: float, speed_kmh: float) -> float:
    """Travel time in minutes for ``distance_km`` at a constant ``speed_kmh``."""

    if speed_kmh <= 0:
        raise ValueError(f"Speed must be positive, got {speed_kmh}.")
    return distance_km / speed_kmh * 60


def evaluate_route(tour: Sequence[int], matrix: np.ndarray, speed_kmh: float) -> RouteResult:
    distance = tour_distance(tour, matrix)
    return RouteResult(
        path=tuple(int(index) for index in tour),
        total_distance_km=distance,
        estimated_time_min=estimate_time_minutes(distance, speed_kmh),
    )


def compute_savings(original: RouteResult, optimized: RouteResult) -> tuple[float, float, float]:
    """Return ``(distance_km, time_min, percentage)`` saved by ``optimized``.

    Each value is floored at zero so a route that did not improve never
    reports a negative saving. The percentage is 0 when the original route has
    zero length.
    """

    savings_distance = original.total_distance_km - optimized.total_distance_km
    savings_time = original.estimated_time_min - optimized.estimated_time_min
    if original.total_distance_km > 0:
        percentage = savings_distance / original.total_distance_km * 100
    else:
        percentage = 0.0
    return (
        max(0.0, savings_distance),
        max(0.0, savings_time),
        min(100.0, max(0.0, percentage)),
    )
