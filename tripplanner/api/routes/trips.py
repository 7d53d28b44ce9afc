"""Trip endpoints - POST /trips/plan, POST /advice."""

from typing import Annotated

from fastapi import APIRouter, Depends

from tripplanner.advice.generator import generate_recommendations, generate_saving_tips
from tripplanner.api.deps import get_trip_planner
from tripplanner.models.trip import AdviceRequest, AdviceResponse, TripPlan, TripRequest
from tripplanner.pricing.estimator import seasonal_multiplier
from tripplanner.services.trip_planner import TripPlannerService

router = APIRouter(tags=["trips"])


@router.post("/trips/plan", response_model=TripPlan)
async def plan_trip(
    request: TripRequest,
    service: Annotated[TripPlannerService, Depends(get_trip_planner)],
) -> TripPlan:
    """Quote every component of a trip and attach advice.

    Args:
        request: Trip parameters
        service: Trip planner service

    Returns:
        TripPlan with quotes, cost estimate, recommendations and saving tips
    """
    return await service.plan_trip(request)


@router.post("/advice", response_model=AdviceResponse)
async def advice(request: AdviceRequest) -> AdviceResponse:
    """Rule-based recommendations and saving tips (no quotes)."""
    return AdviceResponse(
        recommendations=generate_recommendations(
            request.destination,
            request.budget_type,
            request.month,
            request.duration,
            request.travelers,
        ),
        saving_tips=generate_saving_tips(
            request.budget_type,
            request.duration,
            seasonal_multiplier(request.month),
            request.destination,
        ),
    )
