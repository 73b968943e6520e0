"""
Ferries API endpoint.
Handles the ferry timetable and POST /api/v1/ferries/reachability.
"""

from datetime import datetime
from typing import List, Tuple

from fastapi import APIRouter, Depends

from elroute.api.deps import get_ferry_routes
from elroute.schemas.api import FerryReachabilityRequest, FerryReachabilityResponse
from elroute.schemas.trip import FerryRoute
from elroute.services.ferry import estimate_ferry_reachability, timetable_now

router = APIRouter(prefix="/ferries", tags=["Ferries"])


@router.get(
    "",
    response_model=List[FerryRoute],
    summary="List ferry routes",
)
async def get_ferries(
    ferry_routes: Tuple[FerryRoute, ...] = Depends(get_ferry_routes),
) -> List[FerryRoute]:
    """List ferry routes with their daily timetables."""
    return list(ferry_routes)


@router.post(
    "/reachability",
    response_model=FerryReachabilityResponse,
    summary="Estimate ferry reachability",
    description="Returns the next two departures and a reachability tier for each ferry relevant to the destination.",
)
async def post_reachability(
    request: FerryReachabilityRequest,
    ferry_routes: Tuple[FerryRoute, ...] = Depends(get_ferry_routes),
) -> FerryReachabilityResponse:
    """Estimate whether the next ferry departures can be reached."""
    now = timetable_now(request.now or datetime.now().astimezone())

    ferries = estimate_ferry_reachability(
        current_location=request.current_location,
        destination_hint=request.destination,
        ferry_routes=ferry_routes,
        now=now,
    )
    return FerryReachabilityResponse(checked_at=now, ferries=ferries)
