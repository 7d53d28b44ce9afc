"""Quote endpoints - GET /quotes/{flights,hotels,activities}, GET /exchange-rates."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from tripplanner.api.deps import get_trip_planner
from tripplanner.models.common import BudgetTier
from tripplanner.models.quotes import ActivityQuote, FlightQuote, HotelQuote
from tripplanner.services.trip_planner import TripPlannerService

router = APIRouter(tags=["quotes"])

Planner = Annotated[TripPlannerService, Depends(get_trip_planner)]


@router.get("/quotes/flights", response_model=FlightQuote)
async def flight_quote(
    service: Planner,
    origin: Annotated[str, Query(min_length=1)],
    destination: Annotated[str, Query(min_length=1)],
    depart_date: date,
    return_date: date | None = None,
    passengers: Annotated[int, Query(ge=1)] = 1,
) -> FlightQuote:
    """Quote a flight for one passenger."""
    return await service.get_flight_prices(
        origin, destination, depart_date, return_date, passengers
    )


@router.get("/quotes/hotels", response_model=HotelQuote)
async def hotel_quote(
    service: Planner,
    destination: Annotated[str, Query(min_length=1)],
    check_in: date | None = None,
    check_out: date | None = None,
    guests: Annotated[int, Query(ge=1)] = 1,
    room_type: str = BudgetTier.standard.value,
) -> HotelQuote:
    """Quote a nightly hotel rate; unknown room types price as standard."""
    return await service.get_hotel_prices(destination, check_in, check_out, guests, room_type)


@router.get("/quotes/activities", response_model=ActivityQuote)
async def activity_quote(
    service: Planner,
    destination: Annotated[str, Query(min_length=1)],
    duration: Annotated[int, Query(ge=1, description="Trip length in days")],
    travelers: Annotated[int, Query(ge=1)] = 1,
    interests: Annotated[list[str] | None, Query()] = None,
) -> ActivityQuote:
    """Quote activities for the first interest category."""
    return await service.get_activity_prices(destination, duration, travelers, interests or [])


@router.get("/exchange-rates/{base_currency}")
async def exchange_rates(service: Planner, base_currency: str) -> dict[str, float]:
    """Exchange rates for a base currency (unknown bases get USD rates)."""
    return await service.get_exchange_rates(base_currency)
