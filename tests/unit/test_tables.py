"""Tests for route tables and the symmetric lookup rule."""

from tripplanner.models.common import BudgetTier
from tripplanner.pricing.tables import (
    ACTIVITY_CATALOG,
    DOMESTIC_DURATIONS,
    EXCHANGE_RATES,
    HOTEL_TIERS,
    INDIAN_CITIES,
    INTERNATIONAL_DURATIONS,
    ROUTE_PRICES,
    lookup_route,
    normalize_place,
)


def test_normalize_place_trims_and_lowercases() -> None:
    assert normalize_place("  New York ") == "new york"


def test_lookup_route_forward_and_reverse() -> None:
    """Each pair is stored once and resolves in both directions."""
    assert lookup_route(ROUTE_PRICES, "Mumbai", "Delhi") == 80
    assert lookup_route(ROUTE_PRICES, "delhi", " MUMBAI ") == 80
    assert lookup_route(DOMESTIC_DURATIONS, "Chennai", "Bangalore") == 1.0


def test_lookup_route_unknown_pair_returns_none() -> None:
    assert lookup_route(ROUTE_PRICES, "Lima", "Oslo") is None


def test_route_tables_hold_each_pair_once() -> None:
    """No table carries both (a, b) and (b, a)."""
    for table in (ROUTE_PRICES, DOMESTIC_DURATIONS, INTERNATIONAL_DURATIONS):
        for origin, destination in table:
            assert (destination, origin) not in table
            assert origin == normalize_place(origin)
            assert destination == normalize_place(destination)


def test_domestic_duration_routes_join_indian_cities() -> None:
    for origin, destination in DOMESTIC_DURATIONS:
        assert origin in INDIAN_CITIES
        assert destination in INDIAN_CITIES


def test_all_table_prices_positive() -> None:
    assert all(price > 0 for price in ROUTE_PRICES.values())
    assert all(tier.base_price > 0 for tier in HOTEL_TIERS.values())


def test_hotel_tiers_cover_every_budget_tier() -> None:
    assert set(HOTEL_TIERS) == set(BudgetTier)
    assert HOTEL_TIERS[BudgetTier.luxury].name == "Grand Resort"


def test_activity_catalog_has_default_category() -> None:
    assert "default" in ACTIVITY_CATALOG
    assert all(len(activities) == 4 for activities in ACTIVITY_CATALOG.values())


def test_exchange_rate_bases() -> None:
    assert set(EXCHANGE_RATES) == {"USD", "EUR", "GBP", "INR"}
    assert EXCHANGE_RATES["USD"]["INR"] == 83.12
