"""Health check endpoint."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from tripplanner.api.deps import get_trip_planner
from tripplanner.services.trip_planner import TripPlannerService

router = APIRouter()


@router.get("/health")
async def health(
    service: Annotated[TripPlannerService, Depends(get_trip_planner)],
) -> dict[str, Any]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always, with the providers that have credentials configured
    """
    return {
        "status": "ok",
        "mode": "mock",
        "providers_configured": service.credentials.configured(),
    }
