"""Rule-based trip recommendations and money-saving tips.

Rules are additive and independent; every rule whose condition holds
contributes its lines, and output order is fixed by rule group.
"""

from tripplanner.models.common import BudgetTier
from tripplanner.pricing.estimator import is_peak_month

LONG_TRIP_DAYS = 7
WEEKLY_RATE_DAYS = 5
LARGE_GROUP_SIZE = 4
HIGH_SEASON_MULTIPLIER = 1.2

BUDGET_ADVICE = [
    "🏠 Consider hostels or budget hotels for accommodation",
    "🚌 Use public transportation to save on travel costs",
    "🚶 Look for free walking tours and city attractions",
    "🍜 Try local street food for authentic and affordable meals",
]

LUXURY_ADVICE = [
    "✈️ Book flights 2-3 months in advance for better deals",
    "🏨 Consider package deals for flights + hotels",
    "🍾 Look for hotel packages that include breakfast and amenities",
]

LONG_TRIP_ADVICE = [
    "📅 Book longer stays for potential accommodation discounts",
    "🎫 Consider weekly transport passes for better value",
    "🗓️ Plan rest days to avoid burnout and extra costs",
]

PEAK_SEASON_ADVICE = [
    "📈 This is peak season - book early for better prices",
    "📉 Consider shoulder season for 20-30% savings",
    "🎪 Expect crowds at popular attractions",
]

OFF_PEAK_ADVICE = [
    "💰 Great choice! Off-peak season offers better value",
    "🌤️ Weather might be less predictable, pack accordingly",
]

GROUP_ADVICE = [
    "👥 Look for group discounts on activities and tours",
    "🏠 Consider vacation rentals for larger groups",
]

HIGH_SEASON_TIPS = [
    "💡 Travel in shoulder season to save 20-30%",
    "💡 Book accommodations with free cancellation for flexibility",
]

LUXURY_TIPS = [
    "💡 Use travel reward credit cards for points and perks",
    "💡 Book directly with hotels for potential upgrades",
]

LONG_STAY_TIPS = [
    "💡 Look for weekly accommodation rates",
    "💡 Cook some meals to reduce food costs",
    "💡 Use city tourism cards for attraction discounts",
]

UNIVERSAL_TIPS = [
    "💡 Compare prices across multiple booking platforms",
    "💡 Set price alerts for flights and hotels",
    "💡 Consider travel insurance for peace of mind",
    "💡 Download offline maps to avoid roaming charges",
]


def generate_recommendations(
    destination: str,
    budget_type: BudgetTier,
    month: int,
    duration: int,
    travelers: int,
) -> list[str]:
    """Build trip recommendations from trip parameters.

    Args:
        destination: Destination city (reserved for destination-specific rules)
        budget_type: Budget tier; standard has no tier-specific advice
        month: Zero-based departure month (0 = January)
        duration: Trip length in days
        travelers: Number of travelers

    Returns:
        Budget-tier advice, then duration advice, then seasonal advice, then
        group advice
    """
    recommendations: list[str] = []

    if budget_type == BudgetTier.budget:
        recommendations.extend(BUDGET_ADVICE)
    elif budget_type == BudgetTier.luxury:
        recommendations.extend(LUXURY_ADVICE)

    if duration > LONG_TRIP_DAYS:
        recommendations.extend(LONG_TRIP_ADVICE)

    if is_peak_month(month):
        recommendations.extend(PEAK_SEASON_ADVICE)
    else:
        recommendations.extend(OFF_PEAK_ADVICE)

    if travelers > LARGE_GROUP_SIZE:
        recommendations.extend(GROUP_ADVICE)

    return recommendations


def generate_saving_tips(
    budget_type: BudgetTier,
    duration: int,
    seasonal_multiplier: float,
    destination: str,
) -> list[str]:
    """Build money-saving tips; the universal tips always close the list."""
    tips: list[str] = []

    if seasonal_multiplier > HIGH_SEASON_MULTIPLIER:
        tips.extend(HIGH_SEASON_TIPS)

    if budget_type == BudgetTier.luxury:
        tips.extend(LUXURY_TIPS)

    if duration > WEEKLY_RATE_DAYS:
        tips.extend(LONG_STAY_TIPS)

    tips.extend(UNIVERSAL_TIPS)
    return tips
