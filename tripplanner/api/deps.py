"""FastAPI dependencies."""

from functools import lru_cache

from tripplanner.config import get_settings
from tripplanner.services.trip_planner import TripPlannerService
from tripplanner.utils.logging import StructuredLookupLogger
from tripplanner.utils.metrics import PrometheusLookupMetrics


@lru_cache
def get_trip_planner() -> TripPlannerService:
    """Get the process-wide trip planner service."""
    return TripPlannerService.from_settings(
        get_settings(),
        metrics=PrometheusLookupMetrics(),
        lookup_logger=StructuredLookupLogger(),
    )
