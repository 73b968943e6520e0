"""Core package: shared engine exceptions."""

from elroute.core.exceptions import GeocodingFailure, NoReachableStation, TripEngineError

__all__ = [
    "GeocodingFailure",
    "NoReachableStation",
    "TripEngineError",
]
