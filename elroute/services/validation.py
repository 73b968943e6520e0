"""
Trip request validation.
"""

from typing import List

from elroute.schemas.trip import TripRequest


def validate_trip_request(request: TripRequest) -> List[str]:
    """
    Check a trip request for problems that make planning meaningless.

    Battery level and trailer weight are not checked: the schema clamps them.

    Returns:
        List of error messages, empty when the request is usable
    """
    errors: List[str] = []

    origin = (request.from_location or "").strip()
    destination = (request.to_location or "").strip()

    if not origin:
        errors.append("Origin is missing")
    if not destination:
        errors.append("Destination is missing")
    if origin and destination and origin.lower() == destination.lower():
        errors.append("Origin and destination cannot be the same")

    return errors
