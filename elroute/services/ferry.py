"""
Ferry reachability estimation.

Relevant ferries are picked by keyword, not geometry, and the chance of
catching a departure is reported in three fixed tiers. Travel times to the
ports are coarse, so a continuous probability would be false precision.
"""

import datetime
import logging
import re
from typing import Dict, Iterable, List, Optional, Tuple
from zoneinfo import ZoneInfo

from elroute.config import get_settings
from elroute.schemas.trip import Coordinate, FerryReachability, FerryRoute, ReachabilityTier
from elroute.services.geo import distance_km

logger = logging.getLogger(__name__)


# Destination keywords -> ferry route name. Checked in order.
FERRY_KEYWORDS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("kvalsvik", "nerlandsøy", "sunnmøre"), "Sulesund-Hareid"),
    (("ålesund", "bergen", "vestnes", "molde"), "Molde-Vestnes"),
    (("kristiansand", "stavanger", "mortavika"), "Mortavika-Arsvågen"),
    (("trondheim", "bodø", "flakk"), "Flakk-Rørvik"),
)

# Driving minutes to the departure port from the usual approach
PORT_TRAVEL_MINUTES: Dict[str, int] = {
    "molde": 25,
    "mortavika": 60,
    "flakk": 40,
    "sulesund": 15,
}


def _keyword_routes(hint: str) -> set:
    names = set()
    for keywords, route_name in FERRY_KEYWORDS:
        if any(k in hint for k in keywords):
            names.add(route_name.lower())
    return names


def _mentions(hint: str, port: str) -> bool:
    """Whole-word match, so "Tau" does not match "restaurant"."""
    return re.search(rf"\b{re.escape(port.lower())}\b", hint) is not None


def timetable_now(now: datetime.datetime) -> datetime.datetime:
    """
    `now` in the timetable zone. Naive values are taken as already local.
    """
    zone = ZoneInfo(get_settings().timetable_timezone)
    if now.tzinfo is None:
        return now.replace(tzinfo=zone)
    return now.astimezone(zone)


def select_ferry_routes(destination_hint: Optional[str], ferry_routes: Iterable[FerryRoute]) -> List[FerryRoute]:
    """Routes relevant to a destination hint, in timetable order."""
    if not destination_hint or not destination_hint.strip():
        return []
    hint = destination_hint.lower()
    by_keyword = _keyword_routes(hint)

    selected = []
    for route in ferry_routes:
        if (
            route.name.lower() in by_keyword
            or _mentions(hint, route.from_port)
            or _mentions(hint, route.to_port)
        ):
            selected.append(route)
    return selected


def next_departures(
    scheduled_times: List[str],
    now: datetime.datetime,
) -> Tuple[datetime.datetime, datetime.datetime]:
    """
    The next two departures at or after `now`, rolling over midnight.

    Raises:
        ValueError: the timetable is empty
    """
    if not scheduled_times:
        raise ValueError("Ferry route has no scheduled departures")

    times = sorted(datetime.time.fromisoformat(t) for t in scheduled_times)
    today = now.date()
    upcoming = []
    # Two days ahead guarantees two departures even with a single daily sailing
    for offset in range(3):
        day = today + datetime.timedelta(days=offset)
        for t in times:
            departure = datetime.datetime.combine(day, t, tzinfo=now.tzinfo)
            if departure >= now:
                upcoming.append(departure)
        if len(upcoming) >= 2:
            break
    return upcoming[0], upcoming[1]


def travel_minutes_to_port(current_location: Optional[Coordinate], port: str) -> int:
    settings = get_settings()
    if current_location is None:
        return settings.default_port_travel_minutes
    return PORT_TRAVEL_MINUTES.get(port.lower(), settings.default_port_travel_minutes)


def reachability_tier(minutes_until_departure: float, travel_minutes: int) -> Tuple[ReachabilityTier, int]:
    """Classify slack into a tier and its fixed percentage."""
    settings = get_settings()
    slack = minutes_until_departure - (travel_minutes + settings.boarding_margin_minutes)
    if slack <= 0:
        return ReachabilityTier.LOW, settings.low_reachability_percent
    if slack <= settings.medium_slack_minutes:
        return ReachabilityTier.MEDIUM, settings.medium_reachability_percent
    return ReachabilityTier.HIGH, settings.high_reachability_percent


def estimate_ferry_reachability(
    current_location: Optional[Coordinate],
    destination_hint: Optional[str],
    ferry_routes: Iterable[FerryRoute],
    now: datetime.datetime,
) -> List[FerryReachability]:
    """
    Estimate the chance of catching the next departure of each relevant ferry.

    Args:
        current_location: Current GPS position, None if unknown
        destination_hint: Free-text destination
        ferry_routes: Read-only timetable snapshot
        now: Current time; timetables are read in the timetable zone

    Returns:
        One FerryReachability per relevant route; empty for unknown hints
    """
    results: List[FerryReachability] = []
    now = timetable_now(now)

    for route in select_ferry_routes(destination_hint, ferry_routes):
        if not route.scheduled_times:
            logger.warning("Ferry route %s has no departures, skipping", route.name)
            continue

        next_departure, following_departure = next_departures(route.scheduled_times, now)
        travel = travel_minutes_to_port(current_location, route.from_port)
        # via UTC so a DST change between now and departure is counted
        minutes_until = (
            next_departure.astimezone(datetime.timezone.utc) - now.astimezone(datetime.timezone.utc)
        ).total_seconds() / 60
        tier, percent = reachability_tier(minutes_until, travel)

        port_distance = None
        if current_location is not None:
            port_distance = round(distance_km(current_location, route.from_coordinate), 1)

        results.append(FerryReachability(
            route=route,
            next_departure=next_departure,
            following_departure=following_departure,
            crossing_arrival=next_departure + datetime.timedelta(minutes=route.duration_minutes),
            travel_minutes_to_port=travel,
            distance_to_port_km=port_distance,
            reachability_percent=percent,
            tier=tier,
        ))

    logger.debug("%d ferry route(s) relevant for %r", len(results), destination_hint)
    return results
