"""Quote models - fabricated provider results."""

from pydantic import Field

from tripplanner.models.common import QuoteModel


class FlightQuote(QuoteModel):
    """Round-trip flight fare for one passenger."""

    price: int = Field(..., gt=0)
    airline: str = Field(..., min_length=1)
    duration: str = Field(..., pattern=r"^\d+h \d{1,2}m$")
    stops: int = Field(..., ge=0, le=2)
    availability: bool
    booking_class: str = Field(..., min_length=1)
    baggage: str = Field(..., min_length=1)
    refundable: bool


class HotelQuote(QuoteModel):
    """Nightly hotel rate for a room tier at a destination."""

    price_per_night: int = Field(..., gt=0)
    hotel_name: str = Field(..., min_length=1)
    rating: float = Field(..., ge=0, le=5)
    amenities: list[str] = Field(..., min_length=1)
    availability: bool
    cancellation: bool
    breakfast: bool
    wifi: bool
    location: str = Field(..., min_length=1)


class ActivityQuote(QuoteModel):
    """Average activity price and suggested activities."""

    average_price: int = Field(..., gt=0)
    recommended_activities: list[str] = Field(..., min_length=1)
    total_activities: int = Field(..., ge=0)
    booking_required: bool
    group_discount: bool
    cancellation_policy: str = Field(..., min_length=1)
