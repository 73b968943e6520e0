"""
Trip engine exceptions.

Both concrete errors must reach the caller; the engine never retries or
suppresses them.
"""

from typing import Optional


class TripEngineError(Exception):
    """Base class for errors raised by the trip feasibility engine."""


class GeocodingFailure(TripEngineError):
    """Raised when an address cannot be resolved to a coordinate."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"Could not resolve address: {address!r}")


class NoReachableStation(TripEngineError):
    """Raised when the battery would deplete before any available station."""

    def __init__(self, usable_before_critical_km: float, message: Optional[str] = None):
        self.usable_before_critical_km = usable_before_critical_km
        super().__init__(
            message
            or (
                "No available charging station within "
                f"{max(0.0, usable_before_critical_km):.0f} km; "
                "charge at origin before departing"
            )
        )
