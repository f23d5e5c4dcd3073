"""Route optimization kernel."""

from .models import OptimizationResult, RouteResult
from .solver import SolverOptions, solve_tsp

__all__ = ["OptimizationResult", "RouteResult", "SolverOptions", "solve_tsp"]
