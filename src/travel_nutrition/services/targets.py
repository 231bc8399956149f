"""Dynamic hydration and calorie target adjustment."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime

from travel_nutrition.domain.numbers import finite_number
from travel_nutrition.domain.targets import (
    DEFAULT_CALORIE_TARGET,
    DEFAULT_HUMIDITY_PERCENT,
    DEFAULT_TEMPERATURE_C,
    DEFAULT_WATER_TARGET_ML,
    DailyActivitySnapshot,
    DynamicTargets,
    HydrationAlertKind,
    ProfileSnapshot,
    SeasonContext,
    TripContext,
    WeatherSnapshot,
)
from travel_nutrition.services.advisor import MealAdvisorService
from travel_nutrition.services.seasons import season_context
from travel_nutrition.services.weather import WeatherService

# Evaluated top-down; first matching threshold wins.
HEAT_WATER_BRACKETS: tuple[tuple[float, int], ...] = ((32, 900), (28, 700), (24, 400))
COLD_WATER_BRACKETS: tuple[tuple[float, int], ...] = ((10, -250), (18, -150))
HEAT_CALORIE_BRACKETS: tuple[tuple[float, int], ...] = ((32, 80), (28, 50))

HUMID_THRESHOLD_PERCENT = 80
DRY_THRESHOLD_PERCENT = 30
HUMID_WATER_DELTA = 200
DRY_WATER_DELTA = 150

STEP_WATER_BASELINE = 3000
STEP_WATER_INTERVAL = 3000
STEP_WATER_INCREMENT = 250
MAX_STEP_WATER_DELTA = 1000
STEP_CALORIE_INTERVAL = 1000
STEP_CALORIE_INCREMENT = 40
MAX_STEP_CALORIE_DELTA = 400

HIGH_ACTIVITY_WATER_DELTA = 500
COLD_WEATHER_FLOOR = -150
MIN_WATER_TARGET = 1500
MAX_WATER_TARGET = 6000

ALERT_WATER_INCREASE = 300
ALERT_HEAT_TEMPERATURE_C = 28
SEASONAL_ALERT_BOOST_C = 4
EXTRA_MEAL_MIN_REMAINING = 300

SEASONAL_ACTIVITY_REASON = "Summer season and high activity increased hydration needs."
HEAT_REASON = "Hot weather detected and hydration target increased for today."
ACTIVITY_REASON = "High activity detected and hydration target increased for today."

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HydrationAlert:
    """Hydration alert classification for the day."""

    needs_alert: bool
    kind: HydrationAlertKind
    seasonal: bool
    reason: str


@dataclass(frozen=True)
class TargetComputation:
    """Targets together with the weather reading they were computed from."""

    weather: WeatherSnapshot
    targets: DynamicTargets


@dataclass
class TargetAdjustmentEngine:
    """Turns weather, season and activity into adjusted daily targets."""

    weather_service: WeatherService
    advisor_service: MealAdvisorService

    async def compute_dynamic_targets(  # noqa: PLR0913
        self,
        profile: ProfileSnapshot,
        activity: DailyActivitySnapshot,
        trip: TripContext,
        live_weather: WeatherSnapshot | None = None,
        api_key: str | None = None,
        now: datetime | None = None,
    ) -> TargetComputation:
        """Compute today's targets, fetching weather and a meal idea as needed."""
        resolved_now = now or datetime.now(tz=UTC)
        weather = live_weather or await self.weather_service.current_weather(
            trip.destination
        )
        season = season_context(trip.destination, trip.trip_date, resolved_now.date())
        targets = adjust_targets(profile, activity, weather, season, resolved_now)

        if targets.remaining_calories >= EXTRA_MEAL_MIN_REMAINING:
            suggestion = await self.advisor_service.suggest_extra_meal(
                destination=trip.destination,
                remaining_calories=targets.remaining_calories,
                profile=profile,
                selected_dish_names=trip.selected_dish_names,
                api_key=api_key,
            )
            targets = replace(targets, extra_meal_suggestion=suggestion)

        _logger.info(
            "Dynamic targets: destination=%s water=%s calories=%s alert=%s",
            trip.destination or "-",
            targets.adjusted_water_target,
            targets.adjusted_calorie_target,
            targets.hydration_alert_kind,
        )
        return TargetComputation(weather=weather, targets=targets)


def adjust_targets(
    profile: ProfileSnapshot,
    activity: DailyActivitySnapshot,
    weather: WeatherSnapshot,
    season: SeasonContext,
    now: datetime | None = None,
) -> DynamicTargets:
    """Apply weather, season and activity rules to the profile baselines."""
    base_water = _positive_int_or(profile.base_water_target_ml, DEFAULT_WATER_TARGET_ML)
    base_calories = _positive_int_or(profile.base_calorie_target, DEFAULT_CALORIE_TARGET)
    steps = _non_negative_int(activity.steps)
    humidity = _finite_or(weather.humidity_percent, DEFAULT_HUMIDITY_PERCENT)
    temperature = _finite_or(weather.temperature_c, DEFAULT_TEMPERATURE_C)
    effective_temperature = temperature + season.seasonal_heat_boost_c

    step_water = step_delta_water(steps)
    weather_water = apply_cold_weather_floor(
        weather_delta_water(effective_temperature, humidity), step_water
    )
    adjusted_water = _clamp(
        base_water + weather_water + step_water, MIN_WATER_TARGET, MAX_WATER_TARGET
    )

    step_calories = step_delta_calories(steps)
    weather_calories = weather_delta_calories(effective_temperature)
    adjusted_calories = base_calories + step_calories + weather_calories
    consumed = consumed_calories(activity)
    remaining = max(0, adjusted_calories - consumed)

    alert = classify_hydration_alert(
        water_increase=adjusted_water - base_water,
        effective_temperature_c=effective_temperature,
        step_water_delta=step_water,
        season=season,
    )

    return DynamicTargets(
        base_water_target=base_water,
        adjusted_water_target=adjusted_water,
        base_calorie_target=base_calories,
        adjusted_calorie_target=adjusted_calories,
        water_delta=adjusted_water - base_water,
        calorie_delta=adjusted_calories - base_calories,
        step_delta_water=step_water,
        step_delta_calories=step_calories,
        weather_delta_water=weather_water,
        weather_delta_calories=weather_calories,
        consumed_calories=consumed,
        remaining_calories=remaining,
        effective_temperature_c=effective_temperature,
        needs_hydration_alert=alert.needs_alert,
        hydration_alert_kind=alert.kind,
        hydration_alert_seasonal=alert.seasonal,
        hydration_alert_reason=alert.reason,
        strong_alert=alert.needs_alert,
        extra_meal_suggestion=None,
        last_updated_at=now or datetime.now(tz=UTC),
    )


def weather_delta_water(effective_temperature_c: float, humidity_percent: float) -> int:
    """Return the raw weather-driven water delta in ml."""
    delta = 0
    for threshold, bracket_delta in HEAT_WATER_BRACKETS:
        if effective_temperature_c >= threshold:
            delta = bracket_delta
            break
    else:
        for threshold, bracket_delta in COLD_WATER_BRACKETS:
            if effective_temperature_c < threshold:
                delta = bracket_delta
                break

    if humidity_percent >= HUMID_THRESHOLD_PERCENT:
        delta += HUMID_WATER_DELTA
    elif humidity_percent <= DRY_THRESHOLD_PERCENT:
        delta += DRY_WATER_DELTA
    return delta


def step_delta_water(steps: int) -> int:
    """Return extra water for every full interval walked beyond the baseline."""
    intervals = max(0, steps - STEP_WATER_BASELINE) // STEP_WATER_INTERVAL
    return _clamp(intervals * STEP_WATER_INCREMENT, 0, MAX_STEP_WATER_DELTA)


def apply_cold_weather_floor(raw_weather_delta: int, step_water_delta: int) -> int:
    """Stop cold weather from cancelling hydration earned by high activity."""
    if step_water_delta >= HIGH_ACTIVITY_WATER_DELTA:
        return max(raw_weather_delta, COLD_WEATHER_FLOOR)
    return raw_weather_delta


def step_delta_calories(steps: int) -> int:
    """Return extra calories earned by walking."""
    increments = max(0, steps) // STEP_CALORIE_INTERVAL
    return _clamp(increments * STEP_CALORIE_INCREMENT, 0, MAX_STEP_CALORIE_DELTA)


def weather_delta_calories(effective_temperature_c: float) -> int:
    """Return extra calories for hot weather."""
    for threshold, delta in HEAT_CALORIE_BRACKETS:
        if effective_temperature_c >= threshold:
            return delta
    return 0


def consumed_calories(activity: DailyActivitySnapshot) -> int:
    """Sum today's logged meal calories, ignoring invalid entries."""
    return sum(_non_negative_int(meal.calories) for meal in activity.logged_meals)


def classify_hydration_alert(
    *,
    water_increase: int,
    effective_temperature_c: float,
    step_water_delta: int,
    season: SeasonContext,
) -> HydrationAlert:
    """Decide whether and why the hydration target warrants an alert."""
    significant = water_increase > ALERT_WATER_INCREASE
    heat_driven = significant and effective_temperature_c >= ALERT_HEAT_TEMPERATURE_C
    activity_driven = significant and step_water_delta >= HIGH_ACTIVITY_WATER_DELTA
    seasonal_activity = activity_driven and (
        season.is_summer_locally
        or season.seasonal_heat_boost_c >= SEASONAL_ALERT_BOOST_C
    )

    kind: HydrationAlertKind
    if (heat_driven and activity_driven) or seasonal_activity:
        kind = "mixed"
    elif heat_driven:
        kind = "heat"
    elif activity_driven:
        kind = "activity"
    else:
        kind = "none"

    if seasonal_activity:
        reason = SEASONAL_ACTIVITY_REASON
    elif heat_driven:
        reason = HEAT_REASON
    elif activity_driven:
        reason = ACTIVITY_REASON
    else:
        reason = ""

    return HydrationAlert(
        needs_alert=heat_driven or activity_driven,
        kind=kind,
        seasonal=seasonal_activity,
        reason=reason,
    )


def _clamp(value: int, lower: int, upper: int) -> int:
    return min(upper, max(lower, value))


def _positive_int_or(value: object, default: int) -> int:
    """Return a positive integer, or the default for missing or invalid values."""
    number = finite_number(value)
    if number is None or number <= 0:
        return default
    return int(number)


def _non_negative_int(value: object) -> int:
    number = finite_number(value)
    if number is None or number < 0:
        return 0
    return int(number)


def _finite_or(value: object, default: float) -> float:
    number = finite_number(value)
    return default if number is None else number

