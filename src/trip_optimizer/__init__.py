"""Trip route optimization: compare a trip's entered order with the shortest round trip found."""

from .models.domain import VEHICLE_SPEEDS, VehicleType, Waypoint
from .services.routing import OptimizationResult, RouteResult, SolverOptions, solve_tsp

__all__ = [
    "VEHICLE_SPEEDS",
    "OptimizationResult",
    "RouteResult",
    "SolverOptions",
    "VehicleType",
    "Waypoint",
    "solve_tsp",
]
