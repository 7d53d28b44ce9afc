"""Global pytest configuration."""

import os

# Disable simulated provider latency for tests before any imports
os.environ.setdefault("FLIGHT_LATENCY_MS", "0")
os.environ.setdefault("HOTEL_LATENCY_MS", "0")
os.environ.setdefault("ACTIVITY_LATENCY_MS", "0")
