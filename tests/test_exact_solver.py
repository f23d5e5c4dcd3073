import itertools
import math

import numpy as np
import pytest

from src.trip_optimizer.services.routing.evaluator import tour_distance
from src.trip_optimizer.services.routing.exact import solve_exact, tail_permutations


def _random_matrix(size: int, seed: int) -> np.ndarray:
    rng = np.random.default_rng(seed)
    points = rng.uniform(0, 50, size=(size, 2))
    return np.linalg.norm(points[:, None, :] - points[None, :, :], axis=-1)


def _brute_force_minimum(matrix: np.ndarray) -> float:
    return min(tour_distance(order, matrix) for order in itertools.permutations(range(len(matrix))))


def test_tail_permutations_enumerates_each_ordering_once():
    orderings = list(tail_permutations([1, 2, 3, 4]))

    assert len(orderings) == math.factorial(4)
    assert len(set(orderings)) == len(orderings)
    assert orderings[0] == (1, 2, 3, 4)
    assert orderings[-1] == (4, 3, 2, 1)


def test_tail_permutations_base_cases():
    assert list(tail_permutations([])) == [()]
    assert list(tail_permutations([5])) == [(5,)]


@pytest.mark.parametrize("size", [0, 1, 2])
def test_solve_exact_trivial_sizes(size):
    matrix = _random_matrix(size, seed=1)
    assert solve_exact(matrix) == tuple(range(size))


@pytest.mark.parametrize("size", [3, 4, 5, 6, 7, 8])
def test_solve_exact_matches_brute_force_oracle(size):
    matrix = _random_matrix(size, seed=100 + size)

    tour = solve_exact(matrix)

    assert tour[0] == 0
    assert sorted(tour) == list(range(size))
    assert tour_distance(tour, matrix) == pytest.approx(_brute_force_minimum(matrix), abs=1e-9)


def test_solve_exact_keeps_first_minimum_on_ties():
    # every tour over four equidistant stops costs the same
    matrix = np.ones((4, 4)) - np.eye(4)
    assert solve_exact(matrix) == (0, 1, 2, 3)
