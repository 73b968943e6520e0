"""
Pydantic schemas for the trip feasibility engine.
Value objects passed into and returned from the engine services.
"""

import datetime
import re
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


_HHMM = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class RouteType(str, Enum):
    """Route preference selected by the user."""
    FASTEST = "fastest"
    SHORTEST = "shortest"
    ECO = "eco"


def parse_route_type(value) -> Optional[RouteType]:
    """Coerce a RouteType or its string value; None when unrecognised."""
    if isinstance(value, RouteType):
        return value
    try:
        return RouteType(str(value).strip().lower())
    except ValueError:
        return None


class ReachabilityTier(str, Enum):
    """Discrete likelihood of catching a ferry departure."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Coordinate(BaseModel):
    """WGS-84 position."""
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class Vehicle(BaseModel):
    """Catalog vehicle. Reference data, never mutated."""
    model_config = ConfigDict(frozen=True)

    id: str
    brand: str = ""
    model: str = ""
    battery_capacity_kwh: float = Field(..., gt=0, description="Usable battery capacity")
    range_km: float = Field(..., gt=0, description="Declared (WLTP) range")
    consumption_kwh_per_100km: float = Field(..., gt=0)

    @property
    def display_name(self) -> str:
        return f"{self.brand} {self.model}".strip() or self.id


class TripRequest(BaseModel):
    """
    A single trip-planning request as typed into the route form.

    Battery percentage and trailer weight come from form fields that can be
    transiently out of range while edited, so they are clamped rather than
    rejected.
    """
    model_config = ConfigDict(populate_by_name=True)

    from_location: str = Field(..., alias="from", description="Origin as typed by the user")
    to_location: str = Field(..., alias="to", description="Destination as typed by the user")
    via: Optional[str] = None
    trailer_weight_kg: float = Field(0.0, description="Trailer weight, 0 for none")
    battery_percentage: int = Field(80, description="Battery level at departure (0-100)")
    route_type: RouteType = RouteType.FASTEST
    desired_arrival: Optional[datetime.datetime] = None

    @field_validator("battery_percentage")
    @classmethod
    def clamp_battery(cls, v: int) -> int:
        return max(0, min(100, v))

    @field_validator("trailer_weight_kg")
    @classmethod
    def clamp_trailer(cls, v: float) -> float:
        return max(0.0, v)


class ChargingStation(BaseModel):
    """Charging station snapshot supplied by the data layer."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    coordinate: Coordinate
    available: int = Field(0, ge=0, description="Free charging points right now")
    total: int = Field(0, ge=0)
    fast_charger: bool = False
    cost_per_unit: float = Field(0.0, ge=0, description="NOK per kWh")


class FerryRoute(BaseModel):
    """Ferry connection with its daily timetable."""
    model_config = ConfigDict(frozen=True)

    name: str
    from_port: str
    to_port: str
    from_coordinate: Coordinate
    to_coordinate: Coordinate = Field(..., description="Arrival port, reference only")
    scheduled_times: List[str] = Field(default_factory=list, description="Departures as HH:MM")
    duration_minutes: int = Field(..., ge=0)
    operator: Optional[str] = None

    @field_validator("scheduled_times")
    @classmethod
    def validate_times(cls, v: List[str]) -> List[str]:
        for value in v:
            if not _HHMM.match(value):
                raise ValueError(f"Scheduled time must be HH:MM, got {value!r}")
        return sorted(v)


# ==================== Engine Results ====================

class DurationEstimate(BaseModel):
    """Travel duration and distance for an origin/destination pair."""
    minutes: int = Field(..., ge=0)
    distance_km: float = Field(..., ge=0)
    corridor: Optional[str] = Field(None, description="Matched corridor override, None for fallback")


class ChargingPlan(BaseModel):
    """Whether charging is needed and how long it takes."""
    required: bool
    stops: int = Field(..., ge=0)
    minutes: int = Field(..., ge=0)
    effective_range_km: float = 0.0
    current_range_km: float = 0.0


class MandatoryStop(BaseModel):
    """The first station that must be visited before the critical floor."""
    station: ChargingStation
    distance_from_origin_km: float
    arrival_battery_percent: float
    energy_to_charge_kwh: float = Field(0.0, ge=0, description="Energy added up to the recharge target")
    charging_minutes: int = Field(0, ge=0)
    charging_cost: float = Field(0.0, ge=0, description="NOK")


class TripEstimate(BaseModel):
    """Full feasibility estimate for a trip."""
    distance_km: float
    travel_minutes: int
    charging_required: bool
    charging_stops: int
    charging_minutes: int
    mandatory_station: Optional[ChargingStation] = None
    arrival_battery_percent: float
    total_minutes: int
    recommended_departure: Optional[datetime.datetime] = None


class FerryReachability(BaseModel):
    """Reachability of the next two departures of a ferry route."""
    route: FerryRoute
    next_departure: datetime.datetime
    following_departure: datetime.datetime
    crossing_arrival: datetime.datetime = Field(..., description="Arrival at the far side for next_departure")
    travel_minutes_to_port: int
    distance_to_port_km: Optional[float] = None
    reachability_percent: int = Field(..., ge=0, le=100)
    tier: ReachabilityTier
