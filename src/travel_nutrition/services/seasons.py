"""Season resolution for trip destinations."""

from datetime import UTC, date, datetime

from travel_nutrition.domain.destinations import (
    NORTHERN_SUMMER_MONTHS,
    NORTHERN_WINTER_MONTHS,
    SOUTHERN_HEMISPHERE_DESTINATIONS,
    TROPICAL_WARM_DESTINATIONS,
)
from travel_nutrition.domain.targets import SeasonContext

TROPICAL_HEAT_BOOST_C = 2.0
SOUTHERN_SUMMER_BOOST_C = 5.0
SOUTHERN_SHOULDER_BOOST_C = 1.0
NORTHERN_SUMMER_BOOST_C = 4.0
WINTER_BOOST_C = -2.0


def resolve_trip_month(trip_date: str | None, today: date | None = None) -> int:
    """Return the month of the trip date, falling back to the current month."""
    fallback = (today or datetime.now(tz=UTC).date()).month
    if not trip_date:
        return fallback
    cleaned = trip_date.strip()
    for parse in (datetime.fromisoformat, _parse_year_month):
        try:
            return parse(cleaned).month
        except ValueError:
            continue
    return fallback


def _parse_year_month(value: str) -> datetime:
    return datetime.strptime(value, "%Y-%m")


def seasonal_heat_boost(destination: str, month: int) -> float:
    """Return the temperature boost applied for the destination's season."""
    if destination in TROPICAL_WARM_DESTINATIONS:
        return TROPICAL_HEAT_BOOST_C
    if destination in SOUTHERN_HEMISPHERE_DESTINATIONS:
        # Hemispheres swap seasons.
        if month in NORTHERN_WINTER_MONTHS:
            return SOUTHERN_SUMMER_BOOST_C
        if month in NORTHERN_SUMMER_MONTHS:
            return WINTER_BOOST_C
        return SOUTHERN_SHOULDER_BOOST_C
    if month in NORTHERN_SUMMER_MONTHS:
        return NORTHERN_SUMMER_BOOST_C
    if month in NORTHERN_WINTER_MONTHS:
        return WINTER_BOOST_C
    return 0.0


def is_local_summer(destination: str, month: int) -> bool:
    """Return whether the month falls in the destination's summer."""
    if destination in SOUTHERN_HEMISPHERE_DESTINATIONS:
        return month in NORTHERN_WINTER_MONTHS
    return month in NORTHERN_SUMMER_MONTHS


def season_context(
    destination: str, trip_date: str | None, today: date | None = None
) -> SeasonContext:
    """Derive the season context for a destination and trip date."""
    month = resolve_trip_month(trip_date, today)
    return SeasonContext(
        is_summer_locally=is_local_summer(destination, month),
        seasonal_heat_boost_c=seasonal_heat_boost(destination, month),
    )
