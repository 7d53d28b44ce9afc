"""Trip planner facade: mock flight, hotel, activity and exchange-rate quotes.

Each lookup simulates provider latency, computes a fabricated quote from the
static tables, and converts any internal failure into a typed LookupFailed
subclass. Exchange-rate lookups raise the same way unless the service is
built with fx_fallback_on_error=True, in which case the failure is logged as
degraded and the identity table {"USD": 1.0} is returned.
"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from typing import TypeVar

from tripplanner.advice.generator import generate_recommendations, generate_saving_tips
from tripplanner.config import Settings
from tripplanner.errors import (
    ActivityLookupFailed,
    ExchangeRateLookupFailed,
    FlightLookupFailed,
    HotelLookupFailed,
    InvalidInput,
    LookupFailed,
)
from tripplanner.models.common import BudgetTier, ProviderCredentials
from tripplanner.models.quotes import ActivityQuote, FlightQuote, HotelQuote
from tripplanner.models.trip import CostBreakdown, TripPlan, TripRequest
from tripplanner.pricing.estimator import (
    FLIGHT_VARIATION,
    HOTEL_VARIATION,
    activity_average_price,
    destination_multiplier,
    estimate_price,
    seasonal_multiplier,
)
from tripplanner.pricing.flight_details import is_domestic_route, resolve_flight_details
from tripplanner.pricing.rng import RandomSource, make_random_source
from tripplanner.pricing.tables import (
    ACTIVITY_CANCELLATION_POLICY,
    ACTIVITY_CATALOG,
    BOOKING_CLASSES,
    DEFAULT_BAGGAGE,
    DEFAULT_BASE_CURRENCY,
    DEFAULT_ROUTE_PRICE,
    DOMESTIC_AIRLINES,
    EXCHANGE_RATES,
    FALLBACK_EXCHANGE_RATES,
    HOTEL_LOCATION,
    HOTEL_TIERS,
    INTERNATIONAL_AIRLINES,
    MAX_RECOMMENDED_ACTIVITIES,
    MAX_TOTAL_ACTIVITIES,
    ROUTE_PRICES,
    lookup_route,
)
from tripplanner.utils.logging import LookupLogger
from tripplanner.utils.metrics import LookupMetrics

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Draw thresholds: the flag is set when rng.random() exceeds the value
FLIGHT_AVAILABILITY_THRESHOLD = 0.2
REFUNDABLE_THRESHOLD = 0.5
HOTEL_AVAILABILITY_THRESHOLD = 0.15
BOOKING_REQUIRED_THRESHOLD = 0.3

# Groups larger than this get a discount
GROUP_DISCOUNT_THRESHOLD = 4


@dataclass(frozen=True)
class LatencyProfile:
    """Simulated provider latency per operation (milliseconds)."""

    flight_ms: int = 800
    hotel_ms: int = 600
    activity_ms: int = 400
    fx_ms: int = 0


def _coerce_date(value: date | str) -> date:
    """Accept a date, datetime or ISO date string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def _resolve_tier(room_type: BudgetTier | str) -> BudgetTier:
    """Map a room type to a tier; unknown types fall back to standard."""
    if isinstance(room_type, BudgetTier):
        return room_type
    try:
        return BudgetTier(room_type.strip().lower())
    except ValueError:
        return BudgetTier.standard


class TripPlannerService:
    """Mock quote provider facade."""

    def __init__(
        self,
        credentials: ProviderCredentials | None = None,
        *,
        rng: RandomSource | None = None,
        sleep_fn: Callable[[float], Awaitable[None]] | None = None,
        latency: LatencyProfile | None = None,
        fx_fallback_on_error: bool = False,
        metrics: LookupMetrics | None = None,
        lookup_logger: LookupLogger | None = None,
    ) -> None:
        """Initialize service.

        Args:
            credentials: Provider credentials (unused by the mock paths)
            rng: Random source (default: unseeded random.Random)
            sleep_fn: Injectable sleep function (default: asyncio.sleep)
            latency: Simulated latency per operation
            fx_fallback_on_error: Return {"USD": 1.0} instead of raising on
                exchange-rate failures
            metrics: Metrics recorder (optional, defaults to no-op)
            lookup_logger: Structured logger (optional, defaults to no-op)
        """
        self.credentials = credentials or ProviderCredentials()
        self._rng = rng or make_random_source()
        self._sleep = sleep_fn or asyncio.sleep
        self._latency = latency or LatencyProfile()
        self._fx_fallback_on_error = fx_fallback_on_error
        self._metrics = metrics or LookupMetrics()
        self._lookup_logger = lookup_logger or LookupLogger()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        metrics: LookupMetrics | None = None,
        lookup_logger: LookupLogger | None = None,
    ) -> "TripPlannerService":
        """Build a service from application settings."""
        return cls(
            settings.provider_credentials(),
            rng=make_random_source(settings.rng_seed),
            latency=LatencyProfile(
                flight_ms=settings.flight_latency_ms,
                hotel_ms=settings.hotel_latency_ms,
                activity_ms=settings.activity_latency_ms,
                fx_ms=settings.fx_latency_ms,
            ),
            fx_fallback_on_error=settings.fx_fallback_on_error,
            metrics=metrics,
            lookup_logger=lookup_logger,
        )

    async def _run(
        self,
        operation: str,
        delay_ms: int,
        compute: Callable[[], T],
        error_cls: type[LookupFailed],
        error_message: str,
        on_error: Callable[[Exception, float], T] | None = None,
    ) -> T:
        """Simulate latency, compute a result, and convert failures.

        When on_error is given, a failure is handed to it with the elapsed
        milliseconds and its return value is used instead of raising.
        """
        start_time = time.monotonic()
        try:
            if delay_ms > 0:
                await self._sleep(delay_ms / 1000)
            result = compute()
        except Exception as e:
            elapsed_ms = (time.monotonic() - start_time) * 1000
            if on_error is not None:
                return on_error(e, elapsed_ms)
            logger.exception("%s lookup failed", operation)
            self._metrics.inc_error(operation, type(e).__name__)
            self._metrics.record_latency(operation, "error", elapsed_ms)
            self._lookup_logger.log_lookup(
                operation, "error", elapsed_ms, error_reason=type(e).__name__
            )
            raise error_cls(error_message) from e

        elapsed_ms = (time.monotonic() - start_time) * 1000
        self._metrics.record_latency(operation, "success", elapsed_ms)
        self._lookup_logger.log_lookup(operation, "success", elapsed_ms)
        return result

    async def get_flight_prices(
        self,
        origin: str,
        destination: str,
        depart_date: date | str,
        return_date: date | str | None = None,
        passengers: int = 1,
    ) -> FlightQuote:
        """Quote a flight between two cities.

        Args:
            origin: Origin city name (any case)
            destination: Destination city name (any case)
            depart_date: Departure date; its month drives the seasonal multiplier
            return_date: Return date (accepted for provider parity, not priced)
            passengers: Passenger count (accepted for provider parity, not priced)

        Returns:
            FlightQuote for one passenger

        Raises:
            FlightLookupFailed: On any internal failure
        """

        def compute() -> FlightQuote:
            month = _coerce_date(depart_date).month - 1
            base_price = lookup_route(ROUTE_PRICES, origin, destination) or DEFAULT_ROUTE_PRICE
            price = estimate_price(
                base_price,
                FLIGHT_VARIATION,
                seasonal_multiplier(month),
                rng=self._rng,
            )

            is_domestic = is_domestic_route(origin, destination)
            airlines = DOMESTIC_AIRLINES if is_domestic else INTERNATIONAL_AIRLINES
            details = resolve_flight_details(origin, destination, is_domestic, self._rng)

            return FlightQuote(
                price=price,
                airline=self._rng.choice(airlines),
                duration=details.duration,
                stops=details.stops,
                availability=self._rng.random() > FLIGHT_AVAILABILITY_THRESHOLD,
                booking_class=self._rng.choice(BOOKING_CLASSES),
                baggage=DEFAULT_BAGGAGE,
                refundable=self._rng.random() > REFUNDABLE_THRESHOLD,
            )

        return await self._run(
            "flights",
            self._latency.flight_ms,
            compute,
            FlightLookupFailed,
            "Failed to fetch flight prices",
        )

    async def get_hotel_prices(
        self,
        destination: str,
        check_in: date | str | None = None,
        check_out: date | str | None = None,
        guests: int = 1,
        room_type: BudgetTier | str = BudgetTier.standard,
    ) -> HotelQuote:
        """Quote a nightly hotel rate; unknown room types price as standard.

        Raises:
            HotelLookupFailed: On any internal failure
        """

        def compute() -> HotelQuote:
            tier = _resolve_tier(room_type)
            hotel = HOTEL_TIERS[tier]
            price = estimate_price(
                hotel.base_price,
                HOTEL_VARIATION,
                destination_multiplier(destination),
                rng=self._rng,
            )

            return HotelQuote(
                price_per_night=price,
                hotel_name=hotel.name,
                rating=hotel.rating,
                amenities=list(hotel.amenities),
                availability=self._rng.random() > HOTEL_AVAILABILITY_THRESHOLD,
                cancellation=tier != BudgetTier.budget,
                breakfast="Breakfast" in hotel.amenities,
                wifi=True,
                location=HOTEL_LOCATION,
            )

        return await self._run(
            "hotels",
            self._latency.hotel_ms,
            compute,
            HotelLookupFailed,
            "Failed to fetch hotel prices",
        )

    async def get_activity_prices(
        self,
        destination: str,
        duration: int,
        travelers: int,
        interests: Sequence[str] = (),
    ) -> ActivityQuote:
        """Quote activities for the first interest category.

        Raises:
            ActivityLookupFailed: On any internal failure, including a
                non-positive duration
        """

        def compute() -> ActivityQuote:
            if duration < 1:
                raise InvalidInput(f"duration must be at least 1 day, got {duration}")

            category = interests[0].strip().lower() if interests else "default"
            catalog = ACTIVITY_CATALOG.get(category, ACTIVITY_CATALOG["default"])

            return ActivityQuote(
                average_price=activity_average_price(self._rng),
                recommended_activities=list(catalog[: min(duration, MAX_RECOMMENDED_ACTIVITIES)]),
                total_activities=min(duration * 2, MAX_TOTAL_ACTIVITIES),
                booking_required=self._rng.random() > BOOKING_REQUIRED_THRESHOLD,
                group_discount=travelers > GROUP_DISCOUNT_THRESHOLD,
                cancellation_policy=ACTIVITY_CANCELLATION_POLICY,
            )

        return await self._run(
            "activities",
            self._latency.activity_ms,
            compute,
            ActivityLookupFailed,
            "Failed to fetch activity prices",
        )

    async def get_exchange_rates(self, base_currency: str = DEFAULT_BASE_CURRENCY) -> dict[str, float]:
        """Exchange rates for a base currency; unknown bases get the USD table.

        Raises:
            ExchangeRateLookupFailed: On internal failure, unless the service
                was built with fx_fallback_on_error=True
        """

        def compute() -> dict[str, float]:
            code = base_currency.strip().upper()
            rates = EXCHANGE_RATES.get(code, EXCHANGE_RATES[DEFAULT_BASE_CURRENCY])
            return dict(rates)

        return await self._run(
            "exchange_rates",
            self._latency.fx_ms,
            compute,
            ExchangeRateLookupFailed,
            "Failed to fetch exchange rates",
            on_error=self._fx_fallback if self._fx_fallback_on_error else None,
        )

    def _fx_fallback(self, error: Exception, elapsed_ms: float) -> dict[str, float]:
        """Answer a failed exchange-rate lookup with the identity table."""
        reason = type(error).__name__
        logger.warning(
            "Exchange rate lookup degraded, using fallback table: %s",
            reason,
            extra={
                "structured": {
                    "operation": "exchange_rates",
                    "outcome": "degraded",
                    "error_reason": reason,
                }
            },
        )
        self._metrics.inc_fx_fallback()
        self._metrics.record_latency("exchange_rates", "degraded", elapsed_ms)
        self._lookup_logger.log_lookup("exchange_rates", "degraded", elapsed_ms, error_reason=reason)
        return dict(FALLBACK_EXCHANGE_RATES)

    async def plan_trip(self, request: TripRequest) -> TripPlan:
        """Run all four lookups concurrently and assemble a trip plan.

        The cost estimate covers flights for every traveler, one room for
        every night, and each recommended activity for every traveler. The
        first failed lookup cancels the others.

        Raises:
            LookupFailed: The first quote lookup that failed
        """
        duration = request.nights
        try:
            async with asyncio.TaskGroup() as tg:
                flight_task = tg.create_task(
                    self.get_flight_prices(
                        request.origin,
                        request.destination,
                        request.depart_date,
                        request.return_date,
                        request.travelers,
                    )
                )
                hotel_task = tg.create_task(
                    self.get_hotel_prices(
                        request.destination,
                        request.depart_date,
                        request.return_date,
                        request.travelers,
                        request.budget_type,
                    )
                )
                activities_task = tg.create_task(
                    self.get_activity_prices(
                        request.destination,
                        duration,
                        request.travelers,
                        request.interests,
                    )
                )
                rates_task = tg.create_task(self.get_exchange_rates(request.base_currency))
        except ExceptionGroup as eg:
            failures = [e for e in eg.exceptions if isinstance(e, LookupFailed)]
            if not failures:
                raise
            raise failures[0]

        flight = flight_task.result()
        hotel = hotel_task.result()
        activities = activities_task.result()
        rates = rates_task.result()

        flights_cost = flight.price * request.travelers
        lodging_cost = hotel.price_per_night * request.nights
        activities_cost = (
            activities.average_price * len(activities.recommended_activities) * request.travelers
        )
        cost = CostBreakdown(
            flights=flights_cost,
            lodging=lodging_cost,
            activities=activities_cost,
            total=flights_cost + lodging_cost + activities_cost,
        )

        return TripPlan(
            flight=flight,
            hotel=hotel,
            activities=activities,
            exchange_rates=rates,
            cost=cost,
            recommendations=generate_recommendations(
                request.destination,
                request.budget_type,
                request.month,
                duration,
                request.travelers,
            ),
            saving_tips=generate_saving_tips(
                request.budget_type,
                duration,
                seasonal_multiplier(request.month),
                request.destination,
            ),
        )
