"""Flight duration and stop-count resolution."""

from dataclasses import dataclass

from tripplanner.pricing.rng import RandomSource
from tripplanner.pricing.tables import (
    DEFAULT_DOMESTIC_HOURS,
    DEFAULT_INTERNATIONAL_HOURS,
    DOMESTIC_DURATIONS,
    INDIAN_CITIES,
    INTERNATIONAL_DURATIONS,
    lookup_route,
    normalize_place,
)

# ±15 minutes
DURATION_JITTER_HOURS = 0.25

MEDIUM_HAUL_HOURS = 5.0
LONG_HAUL_HOURS = 10.0


@dataclass(frozen=True)
class FlightDetails:
    """Resolved flight timing."""

    hours: float
    stops: int

    @property
    def duration(self) -> str:
        """Duration formatted as 'Hh Mm'."""
        return format_duration(self.hours)


def format_duration(hours: float) -> str:
    """Format fractional hours as 'Hh Mm' (minutes never reach 60)."""
    total_minutes = round(hours * 60)
    h, m = divmod(total_minutes, 60)
    return f"{h}h {m}m"


def is_domestic_route(origin: str, destination: str) -> bool:
    """A route is domestic when both endpoints are Indian cities."""
    return normalize_place(origin) in INDIAN_CITIES and normalize_place(destination) in INDIAN_CITIES


def base_duration_hours(origin: str, destination: str, is_domestic: bool) -> float:
    """Table block time for a route, with a per-category default."""
    if is_domestic:
        hours = lookup_route(DOMESTIC_DURATIONS, origin, destination)
        return hours if hours is not None else DEFAULT_DOMESTIC_HOURS

    hours = lookup_route(INTERNATIONAL_DURATIONS, origin, destination)
    return hours if hours is not None else DEFAULT_INTERNATIONAL_HOURS


def stop_count(hours: float, is_domestic: bool, rng: RandomSource) -> int:
    """Draw a stop count from the duration-bucket policy.

    Domestic: direct 80% of the time, otherwise one stop.
    International: under 5h one stop 70% of the time (else direct); 5-10h one
    stop or direct evenly; 10h and over one stop 70% of the time, else two.
    """
    r = rng.random()
    if is_domestic:
        return 1 if r > 0.8 else 0
    if hours < MEDIUM_HAUL_HOURS:
        return 0 if r > 0.7 else 1
    if hours < LONG_HAUL_HOURS:
        return 1 if r > 0.5 else 0
    return 1 if r > 0.3 else 2


def resolve_flight_details(
    origin: str,
    destination: str,
    is_domestic: bool,
    rng: RandomSource,
) -> FlightDetails:
    """Derive a plausible duration and stop count for a route.

    Args:
        origin: Origin city (any case)
        destination: Destination city (any case)
        is_domestic: Whether both endpoints are domestic
        rng: Random source for jitter and the stop policy

    Returns:
        FlightDetails with jittered duration and stop count
    """
    hours = base_duration_hours(origin, destination, is_domestic)
    hours += rng.uniform(-DURATION_JITTER_HOURS, DURATION_JITTER_HOURS)
    stops = stop_count(hours, is_domestic, rng)
    return FlightDetails(hours=hours, stops=stops)
