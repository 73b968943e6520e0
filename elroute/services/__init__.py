"""Services package initialization."""

from elroute.services.geo import distance_km, haversine_distance
from elroute.services.duration import estimate_duration, find_corridor, CORRIDORS, Corridor
from elroute.services.energy import (
    effective_range_km,
    usable_range_km,
    charging_plan,
    plan_charging,
)
from elroute.services.charging_stop import find_mandatory_charging_stop
from elroute.services.ferry import estimate_ferry_reachability
from elroute.services.itinerary import recommend_departure
from elroute.services.validation import validate_trip_request
from elroute.services.catalog import (
    KnownPlacesGeocoder,
    get_vehicle,
    list_vehicles,
    list_charging_stations,
    list_ferry_routes,
)

__all__ = [
    "distance_km",
    "haversine_distance",
    "estimate_duration",
    "find_corridor",
    "CORRIDORS",
    "Corridor",
    "effective_range_km",
    "usable_range_km",
    "charging_plan",
    "plan_charging",
    "find_mandatory_charging_stop",
    "estimate_ferry_reachability",
    "recommend_departure",
    "validate_trip_request",
    "KnownPlacesGeocoder",
    "get_vehicle",
    "list_vehicles",
    "list_charging_stations",
    "list_ferry_routes",
]
