"""2-opt local search."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from .evaluator import tour_distance
from .models import Tour

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1e-4


def two_opt_swap(tour: Sequence[int], i: int, j: int) -> Tour:
    """Reverse the stops between positions ``i + 1`` and ``j`` inclusive."""

    return (*tour[: i + 1], *reversed(tour[i + 1 : j + 1]), *tour[j + 1 :])


def two_opt(tour: Sequence[int], matrix: np.ndarray, tolerance: float = DEFAULT_TOLERANCE) -> Tour:
    """Improve ``tour`` with first-improvement 2-opt until no move helps.

    A move is adopted only when it shortens the tour by more than
    ``tolerance``, and the scan restarts after each adopted move. The stop at
    position 0 never moves. Tours with fewer than 3 stops are returned as is.
    """

    best_tour: Tour = tuple(tour)
    if len(best_tour) < 3:
        return best_tour

    best_distance = tour_distance(best_tour, matrix)
    size = len(best_tour)
    moves = 0
    improved = True

    while improved:
        improved = False
        for i in range(size - 1):
            for j in range(i + 2, size):
                candidate = two_opt_swap(best_tour, i, j)
                distance = tour_distance(candidate, matrix)
                if distance < best_distance - tolerance:
                    best_tour = candidate
                    best_distance = distance
                    moves += 1
                    improved = True
                    break
            if improved:
                break

    logger.debug(f"2-opt applied {moves} moves, final distance {best_distance:.4f} km")
    return best_tour
