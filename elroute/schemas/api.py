"""
Pydantic schemas for the trip API.
Request and response bodies for the /trips, /ferries and /vehicles endpoints.
"""

import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from elroute.schemas.trip import (
    ChargingStation,
    Coordinate,
    FerryReachability,
    MandatoryStop,
    RouteType,
    TripRequest,
)


class DurationRequest(BaseModel):
    """Request schema for POST /trips/duration."""
    model_config = ConfigDict(populate_by_name=True)

    from_location: str = Field(..., alias="from")
    to_location: str = Field(..., alias="to")
    via: Optional[str] = None
    route_type: RouteType = RouteType.FASTEST


class ChargingPlanRequest(BaseModel):
    """Request schema for POST /trips/charging-plan."""
    vehicle_id: str = Field(..., min_length=1)
    distance_km: float = Field(..., ge=0)
    battery_percentage: int = 80
    trailer_weight_kg: float = 0.0
    route_type: RouteType = RouteType.SHORTEST

    @field_validator("battery_percentage")
    @classmethod
    def clamp_battery(cls, v: int) -> int:
        return max(0, min(100, v))

    @field_validator("trailer_weight_kg")
    @classmethod
    def clamp_trailer(cls, v: float) -> float:
        return max(0.0, v)


class MandatoryStopRequest(BaseModel):
    """Request schema for POST /trips/mandatory-stop."""
    model_config = ConfigDict(populate_by_name=True)

    from_location: str = Field(..., alias="from")
    to_location: str = Field(..., alias="to")
    vehicle_id: str = Field(..., min_length=1)
    battery_percentage: int = 80
    trailer_weight_kg: float = 0.0
    route_type: RouteType = RouteType.SHORTEST
    stations: Optional[List[ChargingStation]] = Field(None, description="Station snapshot, catalog when omitted")

    @field_validator("battery_percentage")
    @classmethod
    def clamp_battery(cls, v: int) -> int:
        return max(0, min(100, v))

    @field_validator("trailer_weight_kg")
    @classmethod
    def clamp_trailer(cls, v: float) -> float:
        return max(0.0, v)


class MandatoryStopResponse(BaseModel):
    """Response schema for POST /trips/mandatory-stop."""
    charging_required: bool
    stop: Optional[MandatoryStop] = None


class DepartureRequest(TripRequest):
    """Request schema for POST /trips/departure."""
    vehicle_id: str = Field(..., min_length=1)
    stations: Optional[List[ChargingStation]] = Field(None, description="Station snapshot, catalog when omitted")


class FerryReachabilityRequest(BaseModel):
    """Request schema for POST /ferries/reachability."""
    destination: Optional[str] = Field(None, description="Destination hint")
    current_location: Optional[Coordinate] = None
    now: Optional[datetime.datetime] = Field(None, description="Defaults to server time")


class FerryReachabilityResponse(BaseModel):
    """Response schema for POST /ferries/reachability."""
    checked_at: datetime.datetime
    ferries: List[FerryReachability] = []


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
