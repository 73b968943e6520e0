"""
Great-circle geometry helpers.
"""

from math import asin, cos, radians, sin, sqrt

from elroute.schemas.trip import Coordinate

EARTH_RADIUS_KM = 6371.0


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Great-circle distance in kilometers between two lat/lng pairs.
    """
    phi1, phi2 = radians(lat1), radians(lat2)
    half_dphi = radians(lat2 - lat1) / 2
    half_dlambda = radians(lng2 - lng1) / 2

    h = sin(half_dphi) ** 2 + cos(phi1) * cos(phi2) * sin(half_dlambda) ** 2
    # float error can push h a hair above 1 for antipodal points
    return 2 * EARTH_RADIUS_KM * asin(min(1.0, sqrt(h)))


def distance_km(a: Coordinate, b: Coordinate) -> float:
    return haversine_distance(a.latitude, a.longitude, b.latitude, b.longitude)
