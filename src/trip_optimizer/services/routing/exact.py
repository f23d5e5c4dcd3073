"""Exhaustive search for small instances."""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

import numpy as np

from .evaluator import tour_distance
from .models import Tour

logger = logging.getLogger(__name__)


def tail_permutations(indices: Sequence[int]) -> Iterator[Tour]:
    """Yield every ordering of ``indices`` exactly once.

    Orderings come out grouped by their first element, taken in input order,
    so the enumeration is deterministic.
    """

    if len(indices) <= 1:
        yield tuple(indices)
        return
    for position, head in enumerate(indices):
        remaining = [*indices[:position], *indices[position + 1 :]]
        for rest in tail_permutations(remaining):
            yield (head, *rest)


def solve_exact(matrix: np.ndarray) -> Tour:
    """Return a minimum-cost tour starting at index 0.

    Index 0 is fixed as the start because rotations of a cycle cost the same;
    the remaining (n - 1)! orderings are all evaluated and the first one with
    the lowest cost is kept.
    """

    size = len(matrix)
    if size <= 2:
        return tuple(range(size))

    tail = list(range(1, size))
    best_tour: Tour = (0, *tail)
    best_distance = tour_distance(best_tour, matrix)
    evaluated = 0

    for permutation in tail_permutations(tail):
        candidate = (0, *permutation)
        distance = tour_distance(candidate, matrix)
        evaluated += 1
        if distance < best_distance:
            best_distance = distance
            best_tour = candidate

    logger.debug(f"Exact search evaluated {evaluated} tours for {size} stops, best={best_distance:.4f} km")
    return best_tour
