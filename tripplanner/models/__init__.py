"""Models package - re-exports for convenience."""

from tripplanner.models.common import BudgetTier, ProviderCredentials, QuoteModel
from tripplanner.models.quotes import ActivityQuote, FlightQuote, HotelQuote
from tripplanner.models.trip import (
    AdviceRequest,
    AdviceResponse,
    CostBreakdown,
    TripPlan,
    TripRequest,
)

__all__ = [
    # Common
    "BudgetTier",
    "ProviderCredentials",
    "QuoteModel",
    # Quotes
    "FlightQuote",
    "HotelQuote",
    "ActivityQuote",
    # Trip
    "TripRequest",
    "AdviceRequest",
    "AdviceResponse",
    "CostBreakdown",
    "TripPlan",
]
