"""Common types and enums shared across all models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BudgetTier(str, Enum):
    """Trip budget tier (also the hotel room tier)."""

    budget = "budget"
    standard = "standard"
    luxury = "luxury"


class QuoteModel(BaseModel):
    """Immutable value object serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ProviderCredentials(BaseModel):
    """Credentials for external quote providers.

    Passed explicitly to the service at construction; the mock quote paths
    never read them.
    """

    model_config = ConfigDict(frozen=True)

    flight_provider_key: str = Field(default="", repr=False)
    hotel_provider_key: str = Field(default="", repr=False)
    activity_provider_key: str = Field(default="", repr=False)

    def configured(self) -> list[str]:
        """Names of providers that have a non-empty key."""
        keys = {
            "flight": self.flight_provider_key,
            "hotel": self.hotel_provider_key,
            "activity": self.activity_provider_key,
        }
        return [name for name, key in keys.items() if key]
