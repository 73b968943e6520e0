"""
Mandatory charging stop selection.

Greedy nearest-within-reach: answers "where must I charge at least once",
not "what is the cheapest charging itinerary".
"""

import logging
import math
from typing import Iterable, Optional, Tuple

from elroute.config import get_settings
from elroute.core.exceptions import GeocodingFailure, NoReachableStation
from elroute.schemas.trip import ChargingStation, Coordinate, MandatoryStop, RouteType, Vehicle
from elroute.services.catalog import Geocoder
from elroute.services.energy import clamp_battery_percentage, effective_range_km
from elroute.services.geo import distance_km

logger = logging.getLogger(__name__)


def _resolve(geocoder: Geocoder, address: str) -> Coordinate:
    coordinate = geocoder.geocode(address)
    if coordinate is None:
        logger.warning("Geocoding failed for %r", address)
        raise GeocodingFailure(address)
    return coordinate


def _charging_estimate(
    vehicle: Vehicle,
    station: ChargingStation,
    effective_km: float,
    arrival_percent: float,
    remaining_km: float,
) -> Tuple[float, int, float]:
    """
    Energy, minutes and cost to charge at `station`.

    Charges enough for the remaining distance plus a margin, capped at the
    recharge target. Consumption is derated by the same factor as range.
    """
    settings = get_settings()
    capacity = vehicle.battery_capacity_kwh

    consumption = vehicle.consumption_kwh_per_100km * vehicle.range_km / effective_km
    needed_kwh = remaining_km / 100.0 * consumption * settings.charge_energy_margin
    target_kwh = min(capacity * settings.recharge_target_fraction, needed_kwh)
    energy = max(0.0, target_kwh - arrival_percent / 100.0 * capacity)

    if energy <= 0:
        return 0.0, 0, 0.0

    power = settings.fast_charger_power_kw if station.fast_charger else settings.normal_charger_power_kw
    minutes = math.ceil(energy / power * 60)
    return energy, minutes, energy * station.cost_per_unit


def find_mandatory_charging_stop(
    from_location: str,
    to_location: str,
    vehicle: Vehicle,
    battery_percentage: float,
    stations: Iterable[ChargingStation],
    geocoder: Geocoder,
    trailer_weight_kg: float = 0.0,
    route_type=RouteType.SHORTEST,
) -> Optional[MandatoryStop]:
    """
    Find the station that must be visited before the battery hits the
    critical floor.

    Args:
        from_location: Origin address
        to_location: Destination address
        vehicle: Catalog vehicle
        battery_percentage: Battery at departure (clamped to 0-100)
        stations: Read-only station snapshot
        geocoder: Collaborator resolving addresses to coordinates
        trailer_weight_kg: Trailer weight (0 for the conservative baseline)
        route_type: Route type for the range modifier

    Returns:
        MandatoryStop, or None when the destination is reachable without one

    Raises:
        GeocodingFailure: origin or destination could not be resolved
        NoReachableStation: no available station before the critical floor
    """
    settings = get_settings()

    origin = _resolve(geocoder, from_location)
    destination = _resolve(geocoder, to_location)

    battery = clamp_battery_percentage(battery_percentage)
    effective = effective_range_km(vehicle, max(0.0, trailer_weight_kg), route_type)
    current = effective * (battery / 100.0)
    usable_before_critical = current - effective * settings.critical_battery_floor

    trip_km = distance_km(origin, destination)
    if trip_km <= usable_before_critical:
        logger.debug(
            "%s -> %s (%.0f km) within %.0f km, no mandatory stop",
            from_location, to_location, trip_km, usable_before_critical,
        )
        return None

    best: Optional[ChargingStation] = None
    best_distance = float("inf")
    for station in stations:
        if station.available <= 0:
            continue
        d = distance_km(origin, station.coordinate)
        # strict < keeps the earlier station on ties
        if d <= usable_before_critical and d < best_distance:
            best = station
            best_distance = d

    if best is None:
        logger.warning(
            "No available station within %.0f km of %s", usable_before_critical, from_location,
        )
        raise NoReachableStation(usable_before_critical)

    arrival = max(
        settings.min_arrival_battery_percent,
        battery - (best_distance / effective) * 100.0,
    )
    energy, minutes, cost = _charging_estimate(
        vehicle, best, effective, arrival, remaining_km=max(0.0, trip_km - best_distance),
    )
    logger.debug(
        "Mandatory stop %s at %.1f km, arriving with %.0f%%, %.1f kWh in %d min",
        best.name, best_distance, arrival, energy, minutes,
    )

    return MandatoryStop(
        station=best,
        distance_from_origin_km=round(best_distance, 1),
        arrival_battery_percent=round(arrival, 1),
        energy_to_charge_kwh=round(energy, 1),
        charging_minutes=minutes,
        charging_cost=round(cost, 2),
    )
