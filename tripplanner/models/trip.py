"""Trip models - whole-trip request, advice and cost estimate."""

from datetime import date
from typing import Annotated

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from tripplanner.models.common import BudgetTier, QuoteModel
from tripplanner.models.quotes import ActivityQuote, FlightQuote, HotelQuote


class TripRequest(BaseModel):
    """Parameters for planning a whole trip."""

    origin: Annotated[str, Field(min_length=1)]
    destination: Annotated[str, Field(min_length=1)]
    depart_date: date
    return_date: date
    travelers: Annotated[int, Field(ge=1)] = 1
    budget_type: BudgetTier = BudgetTier.standard
    interests: list[str] = Field(default_factory=list)
    base_currency: str = "USD"

    @field_validator("return_date")
    @classmethod
    def validate_return_after_depart(cls, v: date, info: ValidationInfo) -> date:
        """Ensure return_date > depart_date."""
        if "depart_date" in info.data and v <= info.data["depart_date"]:
            raise ValueError("return_date must be after depart_date")
        return v

    @property
    def nights(self) -> int:
        """Number of hotel nights."""
        return (self.return_date - self.depart_date).days

    @property
    def month(self) -> int:
        """Zero-based departure month (0 = January)."""
        return self.depart_date.month - 1


class AdviceRequest(BaseModel):
    """Inputs for the rule-based advice generator."""

    destination: str
    budget_type: BudgetTier
    month: Annotated[int, Field(ge=0, le=11, description="0-indexed, 0 = January")]
    duration: Annotated[int, Field(ge=1, description="Trip length in days")]
    travelers: Annotated[int, Field(ge=1)]


class AdviceResponse(BaseModel):
    """Recommendations and money-saving tips."""

    recommendations: list[str]
    saving_tips: list[str]


class CostBreakdown(QuoteModel):
    """Estimated trip cost by category, in the quote currency."""

    flights: int
    lodging: int
    activities: int
    total: int
    currency: str = "USD"


class TripPlan(QuoteModel):
    """Combined quotes, cost estimate and advice for a trip."""

    flight: FlightQuote
    hotel: HotelQuote
    activities: ActivityQuote
    exchange_rates: dict[str, float]
    cost: CostBreakdown
    recommendations: list[str]
    saving_tips: list[str]
