"""Domain model exports."""

from .domain import VEHICLE_SPEEDS, VehicleType, Waypoint

__all__ = ["VEHICLE_SPEEDS", "VehicleType", "Waypoint"]
