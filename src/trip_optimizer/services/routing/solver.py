"""Trip route optimization entry point."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from ...config import settings
from ...models.domain import VehicleType, Waypoint
from ..geospatial import build_distance_matrix
from .evaluator import compute_savings, evaluate_route, speed_for
from .exact import solve_exact
from .heuristics import best_nearest_neighbor_tour
from .models import OptimizationResult
from .two_opt import two_opt

logger = logging.getLogger(__name__)

STRATEGY_TRIVIAL = "trivial"
STRATEGY_EXACT = "exact"
STRATEGY_HEURISTIC = "nearest_neighbor+2opt"
STRATEGY_INPUT_ORDER = "input_order"


@dataclass(slots=True)
class SolverOptions:
    exact_solver_max_stops: int = field(default_factory=lambda: settings.exact_solver_max_stops)
    nearest_neighbor_starts: int = field(default_factory=lambda: settings.nearest_neighbor_starts)
    two_opt_tolerance: float = field(default_factory=lambda: settings.two_opt_tolerance)


def solve_tsp(
    waypoints: Sequence[Waypoint],
    vehicle_type: VehicleType | str,
    options: SolverOptions | None = None,
) -> OptimizationResult | None:
    """Compare the given visiting order with an optimized one.

    Returns ``None`` when fewer than two waypoints are supplied; there is no
    route to optimize and the caller decides how to report it.

    The distance matrix is built once and shared by every strategy. Up to
    ``exact_solver_max_stops`` waypoints are solved exactly, larger instances
    use nearest neighbor construction followed by 2-opt. If the heuristic tour
    is longer than the input order, the input order is reported as optimized
    with strategy ``input_order``.
    """

    if len(waypoints) < 2:
        logger.debug(f"Skipping optimization: {len(waypoints)} waypoint(s) supplied, need at least 2")
        return None

    options = options or SolverOptions()
    speed = speed_for(vehicle_type)
    matrix = build_distance_matrix(waypoints)
    size = len(waypoints)

    original = evaluate_route(range(size), matrix, speed)

    if size <= 2:
        strategy = STRATEGY_TRIVIAL
        optimized_tour = tuple(range(size))
    elif size <= options.exact_solver_max_stops:
        strategy = STRATEGY_EXACT
        optimized_tour = solve_exact(matrix)
    else:
        strategy = STRATEGY_HEURISTIC
        starts = range(min(size, options.nearest_neighbor_starts))
        initial_tour = best_nearest_neighbor_tour(matrix, starts)
        optimized_tour = two_opt(initial_tour, matrix, tolerance=options.two_opt_tolerance)

    optimized = evaluate_route(optimized_tour, matrix, speed)
    if optimized.total_distance_km > original.total_distance_km:
        logger.warning(
            f"Optimized tour ({optimized.total_distance_km:.3f} km) is longer than the input order "
            f"({original.total_distance_km:.3f} km); keeping the input order"
        )
        optimized = original
        strategy = STRATEGY_INPUT_ORDER

    savings_distance, savings_time, savings_percentage = compute_savings(original, optimized)

    logger.info(
        f"Optimized {size} waypoints with {strategy}: "
        f"{original.total_distance_km:.2f} km -> {optimized.total_distance_km:.2f} km "
        f"({savings_percentage:.1f}% saved)"
    )

    return OptimizationResult(
        original_route=original,
        optimized_route=optimized,
        savings_distance_km=savings_distance,
        savings_time_min=savings_time,
        savings_percentage=savings_percentage,
        vehicle_type=VehicleType(vehicle_type),
        strategy=strategy,
    )
