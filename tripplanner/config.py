"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from tripplanner.models.common import ProviderCredentials


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Provider credentials (unused by the mock quote paths)
    flight_provider_key: str = ""
    hotel_provider_key: str = ""
    activity_provider_key: str = ""

    # Simulated provider latency (milliseconds)
    flight_latency_ms: int = 800
    hotel_latency_ms: int = 600
    activity_latency_ms: int = 400
    fx_latency_ms: int = 0

    # Exchange-rate failures return {"USD": 1.0} instead of raising
    fx_fallback_on_error: bool = False

    # Fixed seed for reproducible quotes (None = system entropy)
    rng_seed: int | None = None

    def provider_credentials(self) -> ProviderCredentials:
        """Bundle provider keys for explicit injection into the service."""
        return ProviderCredentials(
            flight_provider_key=self.flight_provider_key,
            hotel_provider_key=self.hotel_provider_key,
            activity_provider_key=self.activity_provider_key,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
