import csv
import io

import pytest

from src.trip_optimizer.models.domain import VehicleType, Waypoint
from src.trip_optimizer.services.outputs.formatter import (
    format_distance,
    format_time,
    optimization_result_to_csv,
    optimization_result_to_json,
)
from src.trip_optimizer.services.routing.solver import solve_tsp


def _waypoints() -> list[Waypoint]:
    return [
        Waypoint(id="home", name="Home", latitude=21.50, longitude=39.20),
        Waypoint(id="office", name="Office", latitude=21.60, longitude=39.20),
        Waypoint(id="market", name="Market", latitude=21.52, longitude=39.21, address="Main St"),
        Waypoint(id="school", name="School", latitude=21.58, longitude=39.21),
    ]


@pytest.mark.parametrize(
    "km,expected",
    [(0.25, "250 m"), (0.9994, "999 m"), (1.0, "1.0 km"), (12.345, "12.3 km")],
)
def test_format_distance(km, expected):
    assert format_distance(km) == expected


@pytest.mark.parametrize(
    "minutes,expected",
    [(0.0, "0 min"), (45.4, "45 min"), (60.0, "1h 0m"), (135.0, "2h 15m")],
)
def test_format_time(minutes, expected):
    assert format_time(minutes) == expected


def test_optimization_result_to_json():
    waypoints = _waypoints()
    result = solve_tsp(waypoints, VehicleType.CAR)

    payload = optimization_result_to_json(result, waypoints)

    assert payload["vehicle_type"] == "car"
    assert payload["original_route"]["waypoint_ids"] == ["home", "office", "market", "school"]
    optimized_ids = payload["optimized_route"]["waypoint_ids"]
    assert optimized_ids[0] == "home"
    assert sorted(optimized_ids) == sorted(w.id for w in waypoints)
    assert payload["optimized_route"]["distance_display"].endswith("km")
    assert "less" in payload["summary"]


def test_optimization_result_to_csv():
    waypoints = _waypoints()
    result = solve_tsp(waypoints, VehicleType.BIKE)

    rows = list(csv.DictReader(io.StringIO(optimization_result_to_csv(result, waypoints))))

    assert len(rows) == 2 * len(waypoints)
    original_rows = [row for row in rows if row["route"] == "original"]
    assert [row["waypoint_id"] for row in original_rows] == ["home", "office", "market", "school"]
    legs = sum(float(row["distance_from_prev_km"]) for row in original_rows)
    assert legs == pytest.approx(result.original_route.total_distance_km)
