"""Routing endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, HTTPException, Response, status

from ...models.domain import VEHICLE_SPEEDS, Waypoint
from ...schemas.routing import OptimizationRequest, OptimizationResponse, VehicleModel
from ...services.outputs.formatter import optimization_result_to_csv, optimization_result_to_json
from ...services.routing.models import OptimizationResult
from ...services.routing.solver import solve_tsp

router = APIRouter(prefix="/routes", tags=["routes"])


def _solve(payload: OptimizationRequest) -> tuple[OptimizationResult, list[Waypoint]]:
    waypoints = [waypoint.to_domain() for waypoint in payload.waypoints]
    try:
        result = solve_tsp(waypoints, payload.vehicle_type)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error optimizing route: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize route: {str(exc)}",
        ) from exc

    if result is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="At least 2 waypoints are required to optimize a route.",
        )
    return result, waypoints


@router.get("/vehicles", response_model=List[VehicleModel], status_code=status.HTTP_200_OK)
def list_vehicles() -> List[VehicleModel]:
    return [VehicleModel(vehicle_type=vehicle, speed_kmh=speed) for vehicle, speed in VEHICLE_SPEEDS.items()]


@router.post("/optimize", response_model=OptimizationResponse, status_code=status.HTTP_200_OK)
def optimize(payload: OptimizationRequest) -> OptimizationResponse:
    result, waypoints = _solve(payload)
    return OptimizationResponse(**optimization_result_to_json(result, waypoints))


@router.post("/optimize/csv", status_code=status.HTTP_200_OK)
def optimize_csv(payload: OptimizationRequest) -> Response:
    """Same optimization as ``/optimize``, returned as one CSV row per stop of each route."""
    result, waypoints = _solve(payload)
    return Response(
        content=optimization_result_to_csv(result, waypoints),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="route_comparison.csv"'},
    )
