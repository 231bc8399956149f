"""Domain models for dynamic nutrition targets."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Literal

HydrationAlertKind = Literal["heat", "activity", "mixed", "none"]

DEFAULT_WATER_TARGET_ML = 2500
DEFAULT_CALORIE_TARGET = 2000
DEFAULT_TEMPERATURE_C = 22.0
DEFAULT_HUMIDITY_PERCENT = 50.0
DEFAULT_WEATHER_CODE = 0


@dataclass(frozen=True)
class ProfileSnapshot:
    """Baseline targets and dietary constraints for a traveller."""

    base_water_target_ml: int = DEFAULT_WATER_TARGET_ML
    base_calorie_target: int = DEFAULT_CALORIE_TARGET
    allergies: frozenset[str] = field(default_factory=frozenset)
    dietary_preferences: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class LoggedMeal:
    """A meal logged today, reduced to its calorie total."""

    calories: int


@dataclass(frozen=True)
class DailyActivitySnapshot:
    """Steps and meals logged for the current day."""

    steps: int = 0
    logged_meals: tuple[LoggedMeal, ...] = ()


@dataclass(frozen=True)
class TripContext:
    """Destination and timing of the active trip."""

    destination: str = ""
    trip_date: str | None = None
    selected_dish_names: tuple[str, ...] = ()


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current weather reading at the trip destination."""

    temperature_c: float
    apparent_temperature_c: float
    humidity_percent: float
    weather_code: int
    fetched_at: datetime


@dataclass(frozen=True)
class SeasonContext:
    """Season information derived from destination and trip date."""

    is_summer_locally: bool
    seasonal_heat_boost_c: float


@dataclass(frozen=True)
class ExtraMealSuggestion:
    """Optional supplementary meal that fits the remaining calories."""

    title: str
    reason: str
    estimated_calories: int


@dataclass(frozen=True)
class DynamicTargets:
    """Adjusted hydration and calorie targets for today."""

    base_water_target: int
    adjusted_water_target: int
    base_calorie_target: int
    adjusted_calorie_target: int
    water_delta: int
    calorie_delta: int
    step_delta_water: int
    step_delta_calories: int
    weather_delta_water: int
    weather_delta_calories: int
    consumed_calories: int
    remaining_calories: int
    effective_temperature_c: float
    needs_hydration_alert: bool
    hydration_alert_kind: HydrationAlertKind
    hydration_alert_seasonal: bool
    hydration_alert_reason: str
    strong_alert: bool
    extra_meal_suggestion: ExtraMealSuggestion | None
    last_updated_at: datetime


def default_weather(now: datetime | None = None) -> WeatherSnapshot:
    """Return the fallback weather used when no live reading is available."""
    return WeatherSnapshot(
        temperature_c=DEFAULT_TEMPERATURE_C,
        apparent_temperature_c=DEFAULT_TEMPERATURE_C,
        humidity_percent=DEFAULT_HUMIDITY_PERCENT,
        weather_code=DEFAULT_WEATHER_CODE,
        fetched_at=now or datetime.now(tz=UTC),
    )
