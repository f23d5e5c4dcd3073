"""Domain models for trip waypoints and vehicle classes."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class VehicleType(str, Enum):
    """Vehicle classes with a fixed average travel speed."""

    CAR = "car"
    BIKE = "bike"


# Average city speeds in km/h.
VEHICLE_SPEEDS: Mapping[VehicleType, float] = MappingProxyType(
    {
        VehicleType.CAR: 45.0,
        VehicleType.BIKE: 25.0,
    }
)


@dataclass(slots=True, frozen=True)
class Waypoint:
    """A stop on a trip, identified by id and located by coordinates in degrees."""

    id: str
    name: str
    latitude: float
    longitude: float
    address: Optional[str] = None
