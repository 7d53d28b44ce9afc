"""Exception types for quote lookups."""


class TripPlannerError(Exception):
    """Base class for trip planner errors."""


class InvalidInput(TripPlannerError, ValueError):
    """Numeric or trip parameters cannot produce a quote."""


class LookupFailed(TripPlannerError):
    """A quote lookup failed; the caller must handle it."""

    operation = "lookup"


class FlightLookupFailed(LookupFailed):
    """Flight price lookup failed."""

    operation = "flights"


class HotelLookupFailed(LookupFailed):
    """Hotel price lookup failed."""

    operation = "hotels"


class ActivityLookupFailed(LookupFailed):
    """Activity price lookup failed."""

    operation = "activities"


class ExchangeRateLookupFailed(LookupFailed):
    """Exchange rate lookup failed."""

    operation = "exchange_rates"
