"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from ..models.domain import Waypoint

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula.

    Non-finite coordinates give NaN instead of raising.
    """

    if not all(math.isfinite(value) for value in (lat1, lon1, lat2, lon2)):
        return float("nan")

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # rounding can push a just past 1 for near-antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def waypoint_distance_km(a: Waypoint, b: Waypoint) -> float:
    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)


def build_distance_matrix(waypoints: Sequence[Waypoint]) -> np.ndarray:
    """Return the symmetric, read-only n x n haversine distance matrix for ``waypoints``.

    Only the upper triangle is computed; each value is mirrored so that
    ``matrix[i, j] == matrix[j, i]`` holds exactly. The diagonal is zero.
    """

    size = len(waypoints)
    matrix = np.zeros((size, size), dtype=np.float64)
    for i in range(size):
        for j in range(i + 1, size):
            distance = waypoint_distance_km(waypoints[i], waypoints[j])
            matrix[i, j] = distance
            matrix[j, i] = distance
    matrix.setflags(write=False)
    return matrix
