"""
Energy model for EV trips.
Converts declared vehicle range into usable range and decides whether,
how often and how long the vehicle must charge.
"""

import logging
import math

from elroute.config import get_settings
from elroute.schemas.trip import ChargingPlan, RouteType, Vehicle, parse_route_type

logger = logging.getLogger(__name__)


def clamp_battery_percentage(battery_percentage: float) -> float:
    """Clamp a battery percentage into [0, 100]."""
    return max(0.0, min(100.0, float(battery_percentage)))


def _range_modifier(route_type) -> float:
    settings = get_settings()
    parsed = parse_route_type(route_type)
    if parsed is RouteType.FASTEST:
        return settings.fastest_range_modifier
    if parsed is RouteType.ECO:
        return settings.eco_range_modifier
    return settings.shortest_range_modifier


def effective_range_km(
    vehicle: Vehicle,
    trailer_weight_kg: float = 0.0,
    route_type=RouteType.SHORTEST,
) -> float:
    """
    Vehicle range after route-type, trailer and seasonal derating.

    The trailer penalty is binary: any trailer weight derates the same.
    """
    settings = get_settings()

    trailer_factor = settings.trailer_derating if trailer_weight_kg > 0 else 1.0

    return (
        vehicle.range_km
        * _range_modifier(route_type)
        * trailer_factor
        * settings.seasonal_derating
    )


def usable_range_km(
    vehicle: Vehicle,
    battery_percentage: float,
    trailer_weight_kg: float = 0.0,
    route_type=RouteType.SHORTEST,
) -> float:
    """Effective range scaled by the current battery level."""
    battery = clamp_battery_percentage(battery_percentage)
    return effective_range_km(vehicle, trailer_weight_kg, route_type) * (battery / 100.0)


def charging_plan(
    distance_km: float,
    effective_range_km: float,
    current_range_km: float,
    battery_percentage: float,
    route_type=RouteType.SHORTEST,
) -> ChargingPlan:
    """
    Decide whether charging is required and estimate the time it takes.

    Args:
        distance_km: Trip distance
        effective_range_km: Range at 100% battery after derating
        current_range_km: Range with the current battery level
        battery_percentage: Battery at departure (clamped to 0-100)
        route_type: Eco routes get a longer station-search buffer

    Returns:
        ChargingPlan with the number of stops and total charging minutes
    """
    settings = get_settings()
    battery = clamp_battery_percentage(battery_percentage)
    distance_km = max(0.0, distance_km)
    safe_range = current_range_km * settings.safety_buffer_factor

    if distance_km <= safe_range:
        if (
            battery < settings.safety_topup_battery_threshold
            and distance_km > settings.safety_topup_distance_km
        ):
            logger.debug("Low battery (%.0f%%) on a %.0f km trip, scheduling top-up", battery, distance_km)
            return ChargingPlan(
                required=True,
                stops=1,
                minutes=settings.safety_topup_minutes,
                effective_range_km=effective_range_km,
                current_range_km=current_range_km,
            )
        return ChargingPlan(
            required=False,
            stops=0,
            minutes=0,
            effective_range_km=effective_range_km,
            current_range_km=current_range_km,
        )

    if effective_range_km <= 0:
        raise ValueError("effective_range_km must be positive when charging is required")

    remaining = distance_km - safe_range
    # Each stop charges up to the recharge target of effective range
    range_per_stop = effective_range_km * settings.recharge_target_fraction
    stops = max(1, math.ceil(remaining / range_per_stop))

    if battery < 20:
        first_stop = settings.first_stop_minutes_critical
    elif battery < 50:
        first_stop = settings.first_stop_minutes_low
    else:
        first_stop = settings.first_stop_minutes_normal

    if parse_route_type(route_type) is RouteType.ECO:
        search_buffer = settings.station_search_minutes_eco
    else:
        search_buffer = settings.station_search_minutes

    minutes = first_stop + (stops - 1) * settings.additional_stop_minutes + stops * search_buffer

    return ChargingPlan(
        required=True,
        stops=stops,
        minutes=minutes,
        effective_range_km=effective_range_km,
        current_range_km=current_range_km,
    )


def plan_charging(
    vehicle: Vehicle,
    battery_percentage: float,
    trailer_weight_kg: float,
    distance_km: float,
    route_type=RouteType.SHORTEST,
) -> ChargingPlan:
    """Charging plan for a vehicle covering `distance_km`."""
    battery = clamp_battery_percentage(battery_percentage)
    trailer = max(0.0, trailer_weight_kg)

    effective = effective_range_km(vehicle, trailer, route_type)
    current = effective * (battery / 100.0)

    plan = charging_plan(distance_km, effective, current, battery, route_type)
    logger.debug(
        "Charging plan for %s: %.0f km, range %.0f/%.0f km -> %d stop(s), %d min",
        vehicle.id, distance_km, current, effective, plan.stops, plan.minutes,
    )
    return plan
