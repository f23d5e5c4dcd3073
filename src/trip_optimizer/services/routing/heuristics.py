"""Nearest neighbor tour construction."""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from .evaluator import tour_distance
from .models import Tour

logger = logging.getLogger(__name__)


def nearest_neighbor_tour(matrix: np.ndarray, start: int = 0) -> Tour:
    """Build a tour by always moving to the closest unvisited stop.

    Ties go to the lowest index because candidates are scanned in ascending
    order and only a strictly shorter leg replaces the current pick.
    """

    size = len(matrix)
    if size == 0:
        return ()

    visited = [False] * size
    visited[start] = True
    path = [start]

    while len(path) < size:
        current = path[-1]
        nearest_index = -1
        nearest_distance = float("inf")
        for candidate in range(size):
            if not visited[candidate] and matrix[current, candidate] < nearest_distance:
                nearest_distance = float(matrix[current, candidate])
                nearest_index = candidate
        if nearest_index == -1:
            # no comparable leg (NaN or infinite distances); take the lowest unvisited stop
            nearest_index = visited.index(False)
        visited[nearest_index] = True
        path.append(nearest_index)

    return tuple(path)


def rotate_to_anchor(tour: Tour, anchor: int = 0) -> Tour:
    """Rotate a closed tour so it begins at ``anchor``; the cycle cost is unchanged."""

    if anchor not in tour:
        return tour
    offset = tour.index(anchor)
    return tour[offset:] + tour[:offset]


def best_nearest_neighbor_tour(matrix: np.ndarray, starts: Iterable[int]) -> Tour:
    """Run the nearest neighbor constructor from each start and keep the cheapest tour.

    The earliest start wins ties. The returned tour is rotated to begin at
    index 0.
    """

    best_tour: Tour = ()
    best_distance = float("inf")
    for start in starts:
        tour = nearest_neighbor_tour(matrix, start)
        distance = tour_distance(tour, matrix)
        logger.debug(f"Nearest neighbor from start {start}: {distance:.4f} km")
        if not best_tour or distance < best_distance:
            best_distance = distance
            best_tour = tour
    return rotate_to_anchor(best_tour)
