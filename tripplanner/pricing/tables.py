"""Static rate and price tables for the mock quote providers.

Route tables hold each undirected city pair once; use ``lookup_route`` to
resolve a directed (origin, destination) pair, which tries the forward key
and then the reverse key.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeVar

from tripplanner.models.common import BudgetTier

V = TypeVar("V")

RouteKey = tuple[str, str]


def normalize_place(name: str) -> str:
    """Lowercase and trim a place name for table lookups."""
    return name.strip().lower()


def lookup_route(table: Mapping[RouteKey, V], origin: str, destination: str) -> V | None:
    """Look up a city pair, trying the forward key then the reverse key."""
    origin = normalize_place(origin)
    destination = normalize_place(destination)
    forward = table.get((origin, destination))
    if forward is not None:
        return forward
    return table.get((destination, origin))


# Round-trip economy base fares (USD)
DEFAULT_ROUTE_PRICE = 500

ROUTE_PRICES: dict[RouteKey, int] = {
    # New York
    ("new york", "paris"): 450,
    ("new york", "tokyo"): 800,
    ("new york", "london"): 400,
    ("new york", "dubai"): 600,
    ("new york", "mumbai"): 900,
    ("new york", "delhi"): 850,
    # London
    ("london", "paris"): 150,
    ("london", "tokyo"): 700,
    ("london", "dubai"): 350,
    ("london", "mumbai"): 500,
    ("london", "delhi"): 480,
    # Paris / Tokyo / Dubai
    ("paris", "tokyo"): 650,
    ("paris", "dubai"): 400,
    ("tokyo", "dubai"): 550,
    # Mumbai
    ("mumbai", "dubai"): 200,
    ("mumbai", "paris"): 550,
    ("mumbai", "tokyo"): 400,
    ("mumbai", "delhi"): 80,
    ("mumbai", "kolkata"): 120,
    ("mumbai", "goa"): 150,
    ("mumbai", "bangalore"): 100,
    ("mumbai", "chennai"): 110,
    ("mumbai", "hyderabad"): 90,
    # Delhi
    ("delhi", "dubai"): 180,
    ("delhi", "paris"): 520,
    ("delhi", "tokyo"): 380,
    ("delhi", "kolkata"): 100,
    ("delhi", "goa"): 130,
    ("delhi", "bangalore"): 120,
    ("delhi", "chennai"): 130,
    ("delhi", "hyderabad"): 70,
    # Kolkata
    ("kolkata", "goa"): 180,
    ("kolkata", "bangalore"): 140,
    ("kolkata", "chennai"): 150,
    ("kolkata", "hyderabad"): 120,
    ("kolkata", "dubai"): 250,
    ("kolkata", "singapore"): 300,
    ("kolkata", "imphal"): 100,
    # South India
    ("goa", "bangalore"): 160,
    ("goa", "chennai"): 170,
    ("goa", "hyderabad"): 140,
    ("bangalore", "chennai"): 50,
    ("bangalore", "hyderabad"): 60,
    ("bangalore", "dubai"): 220,
    ("chennai", "hyderabad"): 80,
}

# Block times in hours
DEFAULT_DOMESTIC_HOURS = 2.0
DEFAULT_INTERNATIONAL_HOURS = 8.0

DOMESTIC_DURATIONS: dict[RouteKey, float] = {
    ("mumbai", "delhi"): 2.5,
    ("mumbai", "kolkata"): 3.0,
    ("delhi", "kolkata"): 2.0,
    ("mumbai", "goa"): 1.5,
    ("delhi", "goa"): 2.5,
    ("kolkata", "goa"): 2.5,
    ("kolkata", "imphal"): 1.5,
    ("mumbai", "bangalore"): 2.0,
    ("delhi", "bangalore"): 2.5,
    ("mumbai", "chennai"): 2.5,
    ("delhi", "chennai"): 2.5,
    ("bangalore", "chennai"): 1.0,
    ("mumbai", "hyderabad"): 1.5,
    ("delhi", "hyderabad"): 2.0,
    ("bangalore", "hyderabad"): 1.0,
    ("chennai", "hyderabad"): 1.5,
}

INTERNATIONAL_DURATIONS: dict[RouteKey, float] = {
    ("mumbai", "dubai"): 3.5,
    ("delhi", "dubai"): 3.5,
    ("mumbai", "london"): 9.0,
    ("delhi", "london"): 8.5,
    ("mumbai", "paris"): 9.5,
    ("delhi", "paris"): 9.0,
    ("mumbai", "new york"): 15.0,
    ("delhi", "new york"): 14.5,
    ("london", "new york"): 8.0,
    ("paris", "new york"): 8.5,
    ("london", "paris"): 1.5,
    ("dubai", "london"): 7.0,
    ("dubai", "paris"): 7.5,
}

# Routes between two of these cities are domestic
INDIAN_CITIES: frozenset[str] = frozenset(
    {
        "mumbai",
        "delhi",
        "kolkata",
        "goa",
        "bangalore",
        "chennai",
        "hyderabad",
        "ahmedabad",
        "jaipur",
        "pune",
        "imphal",
        "guwahati",
        "shillong",
        "agartala",
        "aizawl",
        "dibrugarh",
        "silchar",
    }
)

DOMESTIC_AIRLINES: tuple[str, ...] = ("Indigo", "Air India", "SpiceJet", "Vistara", "GoAir")

INTERNATIONAL_AIRLINES: tuple[str, ...] = (
    "Emirates",
    "British Airways",
    "Lufthansa",
    "Air India",
    "Qatar Airways",
    "Singapore Airlines",
    "Thai Airways",
)

BOOKING_CLASSES: tuple[str, ...] = ("Economy", "Premium Economy", "Business")

DEFAULT_BAGGAGE = "20kg included"

# Zero-based months (0 = January): Jun-Sep and Dec
PEAK_MONTHS: frozenset[int] = frozenset({5, 6, 7, 8, 11})
PEAK_SEASON_MULTIPLIER = 1.3
OFF_PEAK_MULTIPLIER = 0.9

@dataclass(frozen=True)
class HotelTier:
    """Representative hotel for a room tier."""

    name: str
    rating: float
    amenities: tuple[str, ...]
    base_price: int


HOTEL_TIERS: dict[BudgetTier, HotelTier] = {
    BudgetTier.budget: HotelTier(
        name="Budget Inn",
        rating=2.5,
        amenities=("WiFi", "Breakfast"),
        base_price=60,
    ),
    BudgetTier.standard: HotelTier(
        name="Comfort Hotel",
        rating=4.0,
        amenities=("WiFi", "Pool", "Gym", "Restaurant"),
        base_price=120,
    ),
    BudgetTier.luxury: HotelTier(
        name="Grand Resort",
        rating=4.8,
        amenities=("WiFi", "Spa", "Pool", "Concierge", "Fine Dining"),
        base_price=280,
    ),
}

HOTEL_LOCATION = "City Center"

DESTINATION_MULTIPLIERS: dict[str, float] = {
    "tokyo": 1.4,
    "paris": 1.3,
    "london": 1.2,
    "dubai": 1.1,
    "new york": 1.2,
    "mumbai": 0.6,
    "delhi": 0.5,
    "bangkok": 0.7,
    "singapore": 1.1,
}

ACTIVITY_CATALOG: dict[str, tuple[str, ...]] = {
    "cultural": ("Museum Tour", "Historical Walk", "Art Gallery Visit", "Cultural Show"),
    "adventure": ("Hiking Tour", "Water Sports", "Rock Climbing", "Zip Lining"),
    "food": ("Food Tour", "Cooking Class", "Wine Tasting", "Street Food Walk"),
    "nature": ("Nature Walk", "Wildlife Safari", "Botanical Garden", "Beach Day"),
    "default": ("City Tour", "Sightseeing", "Local Experience", "Photography Walk"),
}

ACTIVITY_PRICE_MIN = 25
ACTIVITY_PRICE_SPREAD = 75
MAX_RECOMMENDED_ACTIVITIES = 4
MAX_TOTAL_ACTIVITIES = 10
ACTIVITY_CANCELLATION_POLICY = "24 hours free cancellation"

# Base currency -> counter currency -> rate
EXCHANGE_RATES: dict[str, dict[str, float]] = {
    "USD": {"EUR": 0.85, "GBP": 0.73, "INR": 83.12, "JPY": 149.50},
    "EUR": {"USD": 1.18, "GBP": 0.86, "INR": 97.89, "JPY": 176.19},
    "GBP": {"USD": 1.37, "EUR": 1.16, "INR": 113.87, "JPY": 204.93},
    "INR": {"USD": 0.012, "EUR": 0.010, "GBP": 0.0088, "JPY": 1.80},
}

DEFAULT_BASE_CURRENCY = "USD"
FALLBACK_EXCHANGE_RATES: dict[str, float] = {"USD": 1.0}
