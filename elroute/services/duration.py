"""
Travel duration estimation.

No road routing happens here. Known corridors carry hand-curated travel
times (ferry crossings, mountain passes); everything else falls back to a
coarse estimate that signals missing route knowledge rather than precision.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from elroute.config import get_settings
from elroute.schemas.trip import DurationEstimate, RouteType, parse_route_type
from elroute.services.catalog import Geocoder
from elroute.services.geo import distance_km

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Corridor:
    """Curated duration/distance for a named origin-destination pair."""
    name: str
    origins: Tuple[str, ...]
    destinations: Tuple[str, ...]
    minutes: int
    distance_km: float

    def matches(self, origin: str, destination: str) -> bool:
        """Substring match in either direction; inputs must be lower-cased."""
        forward = (
            any(k in origin for k in self.origins)
            and any(k in destination for k in self.destinations)
        )
        backward = (
            any(k in destination for k in self.origins)
            and any(k in origin for k in self.destinations)
        )
        return forward or backward


# Priority list: the first matching entry wins, so specific entries go first.
CORRIDORS: Tuple[Corridor, ...] = (
    # Two ferry crossings plus the mountain stretch over Stryn/Førde
    Corridor("Fureåsen/Ålesund-Bergen", ("fureåsen", "ålesund"), ("bergen",), 540, 480.0),
    # Molde-Vestnes ferry
    Corridor("Ålesund-Trondheim", ("ålesund",), ("trondheim",), 330, 290.0),
    Corridor("Ålesund-Molde", ("ålesund",), ("molde",), 95, 80.0),
    Corridor("Ålesund-Oslo", ("ålesund",), ("oslo",), 450, 540.0),
    # Mortavika-Arsvågen and Halhjem-Sandvikvåg ferries
    Corridor("Bergen-Stavanger", ("bergen",), ("stavanger",), 300, 210.0),
    # Hardangervidda / Hemsedal mountain passes
    Corridor("Oslo-Bergen", ("oslo",), ("bergen",), 420, 463.0),
    Corridor("Bergen-Trondheim", ("bergen",), ("trondheim",), 660, 690.0),
    Corridor("Oslo-Trondheim", ("oslo",), ("trondheim",), 450, 495.0),
    Corridor("Oslo-Stavanger", ("oslo",), ("stavanger",), 450, 540.0),
    Corridor("Oslo-Kristiansand", ("oslo",), ("kristiansand",), 260, 320.0),
    Corridor("Oslo-Lillehammer", ("oslo",), ("lillehammer",), 140, 180.0),
    Corridor("Oslo-Tromsø", ("oslo",), ("tromsø",), 1200, 1368.0),
)

# (time multiplier, distance multiplier)
ROUTE_MULTIPLIERS: Dict[RouteType, Tuple[float, float]] = {
    RouteType.FASTEST: (0.95, 1.02),
    RouteType.SHORTEST: (1.10, 0.95),
    RouteType.ECO: (1.05, 1.08),
}


def route_time_multiplier(route_type) -> float:
    """Time multiplier for a route type (1.0 when unknown)."""
    parsed = parse_route_type(route_type)
    return ROUTE_MULTIPLIERS.get(parsed, (1.0, 1.0))[0]


def find_corridor(
    origin: str,
    destination: str,
    corridors: Tuple[Corridor, ...] = CORRIDORS,
) -> Optional[Corridor]:
    """Return the first corridor matching the pair, or None."""
    origin = origin.lower().strip()
    destination = destination.lower().strip()
    if not origin or not destination:
        return None
    for corridor in corridors:
        if corridor.matches(origin, destination):
            return corridor
    return None


def _baseline(
    origin: str,
    destination: str,
    geocoder: Optional[Geocoder],
    corridors: Tuple[Corridor, ...],
) -> Tuple[float, float, Optional[str]]:
    """Unadjusted (minutes, distance_km, corridor name) for a single leg."""
    settings = get_settings()

    corridor = find_corridor(origin, destination, corridors)
    if corridor is not None:
        logger.debug("Corridor %s matched %r -> %r", corridor.name, origin, destination)
        return float(corridor.minutes), corridor.distance_km, corridor.name

    if geocoder is not None:
        start = geocoder.geocode(origin)
        end = geocoder.geocode(destination)
        if start is not None and end is not None:
            road_km = distance_km(start, end) * settings.fallback_road_factor
            minutes = road_km / settings.fallback_speed_kmh * 60
            logger.debug("Great-circle fallback for %r -> %r: %.1f km", origin, destination, road_km)
            return minutes, road_km, None
        logger.debug("Geocoding missed for %r -> %r, using generic baseline", origin, destination)

    return float(settings.generic_route_minutes), settings.generic_route_distance_km, None


def estimate_duration(
    from_location: str,
    to_location: str,
    route_type=RouteType.FASTEST,
    geocoder: Optional[Geocoder] = None,
    via: Optional[str] = None,
    corridors: Tuple[Corridor, ...] = CORRIDORS,
) -> DurationEstimate:
    """
    Estimate travel time and distance between two free-text places.

    Args:
        from_location: Origin as typed by the user
        to_location: Destination as typed by the user
        route_type: fastest, shortest or eco
        geocoder: Optional collaborator for the great-circle fallback
        via: Optional intermediate place; the trip becomes two legs
        corridors: Corridor priority list

    Returns:
        DurationEstimate with whole minutes and distance in km.
        Never raises: unknown pairs yield the generic baseline.
    """
    if via and via.strip():
        legs = [(from_location, via), (via, to_location)]
    else:
        legs = [(from_location, to_location)]

    minutes = 0.0
    distance = 0.0
    names = []
    for origin, destination in legs:
        leg_minutes, leg_distance, name = _baseline(origin, destination, geocoder, corridors)
        minutes += leg_minutes
        distance += leg_distance
        if name:
            names.append(name)

    time_mult, distance_mult = ROUTE_MULTIPLIERS.get(parse_route_type(route_type), (1.0, 1.0))

    return DurationEstimate(
        minutes=int(round(minutes * time_mult)),
        distance_km=round(distance * distance_mult, 1),
        corridor=" / ".join(names) if names else None,
    )
