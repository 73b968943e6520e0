"""Schemas package initialization."""

from elroute.schemas.trip import (
    RouteType,
    ReachabilityTier,
    Coordinate,
    Vehicle,
    TripRequest,
    ChargingStation,
    FerryRoute,
    DurationEstimate,
    ChargingPlan,
    MandatoryStop,
    TripEstimate,
    FerryReachability,
)
from elroute.schemas.api import (
    DurationRequest,
    ChargingPlanRequest,
    MandatoryStopRequest,
    MandatoryStopResponse,
    DepartureRequest,
    FerryReachabilityRequest,
    FerryReachabilityResponse,
    HealthResponse,
)

__all__ = [
    "RouteType",
    "ReachabilityTier",
    "Coordinate",
    "Vehicle",
    "TripRequest",
    "ChargingStation",
    "FerryRoute",
    "DurationEstimate",
    "ChargingPlan",
    "MandatoryStop",
    "TripEstimate",
    "FerryReachability",
    "DurationRequest",
    "ChargingPlanRequest",
    "MandatoryStopRequest",
    "MandatoryStopResponse",
    "DepartureRequest",
    "FerryReachabilityRequest",
    "FerryReachabilityResponse",
    "HealthResponse",
]
