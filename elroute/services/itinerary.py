"""
Itinerary assembly: total trip time and recommended departure.
"""

import datetime
import logging
from typing import Iterable, Optional

from elroute.config import get_settings
from elroute.schemas.trip import ChargingPlan, ChargingStation, TripEstimate, TripRequest, Vehicle
from elroute.services.catalog import Geocoder
from elroute.services.charging_stop import find_mandatory_charging_stop
from elroute.services.duration import estimate_duration, route_time_multiplier
from elroute.services.energy import plan_charging

logger = logging.getLogger(__name__)


def arrival_battery_percent(distance_km: float, battery_percentage: float, plan: ChargingPlan) -> float:
    """
    Battery level expected at the destination.

    With charging, the last leg starts from the recharge target.
    """
    settings = get_settings()
    effective = plan.effective_range_km
    if effective <= 0:
        return 0.0

    safe_range = plan.current_range_km * settings.safety_buffer_factor
    if distance_km <= safe_range or plan.stops == 0:
        arrival = battery_percentage - distance_km / effective * 100.0
    else:
        range_per_stop = effective * settings.recharge_target_fraction
        last_leg = (distance_km - safe_range) - (plan.stops - 1) * range_per_stop
        arrival = settings.recharge_target_fraction * 100.0 - last_leg / effective * 100.0

    return round(max(0.0, arrival), 1)


def recommend_departure(
    trip_request: TripRequest,
    vehicle: Vehicle,
    geocoder: Optional[Geocoder] = None,
    stations: Optional[Iterable[ChargingStation]] = None,
) -> TripEstimate:
    """
    Combine travel time, charging time and fixed buffers into a trip estimate.

    Formula: total = travel + ferry_buffer + traffic_buffer + charging + weather_buffer
    The ferry and traffic buffers grow for long trips and follow the
    route-type time multiplier.

    Args:
        trip_request: Validated trip request
        vehicle: Catalog vehicle
        geocoder: Optional collaborator for the duration fallback and the
            mandatory stop
        stations: Optional station snapshot; with a geocoder, a trip that
            needs charging gets its mandatory station

    Returns:
        TripEstimate; recommended_departure is set only when the request
        has a desired arrival time

    Raises:
        GeocodingFailure, NoReachableStation: from the mandatory stop search
    """
    settings = get_settings()

    duration = estimate_duration(
        trip_request.from_location,
        trip_request.to_location,
        trip_request.route_type,
        geocoder=geocoder,
        via=trip_request.via,
    )
    plan = plan_charging(
        vehicle,
        trip_request.battery_percentage,
        trip_request.trailer_weight_kg,
        duration.distance_km,
        trip_request.route_type,
    )

    time_mult = route_time_multiplier(trip_request.route_type)
    long_trip = duration.distance_km > settings.long_trip_threshold_km
    ferry_buffer = settings.ferry_buffer_long if long_trip else settings.ferry_buffer_short
    traffic_buffer = settings.traffic_buffer_long if long_trip else settings.traffic_buffer_short
    ferry_buffer = int(round(ferry_buffer * time_mult))
    traffic_buffer = int(round(traffic_buffer * time_mult))

    total_minutes = (
        duration.minutes
        + ferry_buffer
        + traffic_buffer
        + plan.minutes
        + settings.weather_buffer
    )

    mandatory_station = None
    if plan.required and stations is not None and geocoder is not None:
        stop = find_mandatory_charging_stop(
            trip_request.from_location,
            trip_request.to_location,
            vehicle,
            trip_request.battery_percentage,
            stations,
            geocoder,
            trailer_weight_kg=trip_request.trailer_weight_kg,
            route_type=trip_request.route_type,
        )
        if stop is not None:
            mandatory_station = stop.station

    recommended = None
    if trip_request.desired_arrival is not None:
        recommended = trip_request.desired_arrival - datetime.timedelta(minutes=total_minutes)

    logger.info(
        "Trip %s -> %s: %.0f km, %d min driving, %d min total",
        trip_request.from_location, trip_request.to_location,
        duration.distance_km, duration.minutes, total_minutes,
    )

    return TripEstimate(
        distance_km=duration.distance_km,
        travel_minutes=duration.minutes,
        charging_required=plan.required,
        charging_stops=plan.stops,
        charging_minutes=plan.minutes,
        mandatory_station=mandatory_station,
        arrival_battery_percent=arrival_battery_percent(
            duration.distance_km, trip_request.battery_percentage, plan,
        ),
        total_minutes=total_minutes,
        recommended_departure=recommended,
    )
