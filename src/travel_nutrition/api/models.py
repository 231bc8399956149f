"""Pydantic models for the dynamic targets HTTP payloads."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from travel_nutrition.domain.numbers import finite_number
from travel_nutrition.domain.targets import (
    DEFAULT_CALORIE_TARGET,
    DEFAULT_HUMIDITY_PERCENT,
    DEFAULT_WATER_TARGET_ML,
    DEFAULT_WEATHER_CODE,
    DailyActivitySnapshot,
    DynamicTargets,
    ExtraMealSuggestion,
    HydrationAlertKind,
    LoggedMeal,
    ProfileSnapshot,
    TripContext,
    WeatherSnapshot,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


def _string_list(value: object) -> list[str]:
    if not isinstance(value, list | tuple | set | frozenset):
        return []
    return [str(item) for item in value if item is not None and str(item).strip()]


class ProfilePayload(_CamelModel):
    """Subset of the stored user profile the engine needs."""

    water_target: int = DEFAULT_WATER_TARGET_ML
    daily_calorie_target: int = DEFAULT_CALORIE_TARGET
    allergies: list[str] = Field(default_factory=list)
    dietary_preferences: list[str] = Field(default_factory=list)

    @field_validator("water_target", mode="before")
    @classmethod
    def _water_or_default(cls, value: object) -> int:
        number = finite_number(value)
        return int(number) if number and number > 0 else DEFAULT_WATER_TARGET_ML

    @field_validator("daily_calorie_target", mode="before")
    @classmethod
    def _calories_or_default(cls, value: object) -> int:
        number = finite_number(value)
        return int(number) if number and number > 0 else DEFAULT_CALORIE_TARGET

    @field_validator("allergies", "dietary_preferences", mode="before")
    @classmethod
    def _lists(cls, value: object) -> list[str]:
        return _string_list(value)

    def to_snapshot(self) -> ProfileSnapshot:
        """Convert to the engine's profile snapshot."""
        return ProfileSnapshot(
            base_water_target_ml=self.water_target,
            base_calorie_target=self.daily_calorie_target,
            allergies=frozenset(self.allergies),
            dietary_preferences=frozenset(self.dietary_preferences),
        )


class MealPayload(_CamelModel):
    """Logged meal; only calories matter here."""

    calories: int = 0

    @field_validator("calories", mode="before")
    @classmethod
    def _calories(cls, value: object) -> int:
        number = finite_number(value)
        return int(number) if number and number > 0 else 0


class DailyLogPayload(_CamelModel):
    """Today's activity log."""

    steps: int = 0
    meals: list[MealPayload] = Field(default_factory=list)

    @field_validator("steps", mode="before")
    @classmethod
    def _steps(cls, value: object) -> int:
        number = finite_number(value)
        return int(number) if number and number > 0 else 0

    @field_validator("meals", mode="before")
    @classmethod
    def _meals(cls, value: object) -> list[object]:
        if not isinstance(value, list):
            return []
        return [meal for meal in value if isinstance(meal, dict)]

    def to_snapshot(self) -> DailyActivitySnapshot:
        """Convert to the engine's activity snapshot."""
        return DailyActivitySnapshot(
            steps=self.steps,
            logged_meals=tuple(LoggedMeal(calories=meal.calories) for meal in self.meals),
        )


class DishPayload(_CamelModel):
    """Dish the traveller already picked for the trip."""

    name: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, value: object) -> str:
        return "" if value is None else str(value).strip()


class WeatherPayload(_CamelModel):
    """Weather reading supplied by the caller or returned to it."""

    temperature_c: float = Field(alias="temperatureC")
    apparent_temperature_c: float | None = Field(
        default=None, alias="apparentTemperatureC"
    )
    humidity: float = DEFAULT_HUMIDITY_PERCENT
    weather_code: int = DEFAULT_WEATHER_CODE
    fetched_at: datetime = Field(default_factory=lambda: datetime.now(tz=UTC))

    @field_validator("apparent_temperature_c", mode="before")
    @classmethod
    def _apparent(cls, value: object) -> float | None:
        return finite_number(value)

    @field_validator("humidity", mode="before")
    @classmethod
    def _humidity(cls, value: object) -> float:
        number = finite_number(value)
        return DEFAULT_HUMIDITY_PERCENT if number is None else number

    @field_validator("weather_code", mode="before")
    @classmethod
    def _weather_code(cls, value: object) -> int:
        number = finite_number(value)
        return DEFAULT_WEATHER_CODE if number is None else round(number)

    @field_validator("fetched_at", mode="before")
    @classmethod
    def _fetched_at(cls, value: object) -> object:
        if isinstance(value, datetime):
            return value
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(value)
            except ValueError:
                pass
        return datetime.now(tz=UTC)

    @classmethod
    def from_snapshot(cls, snapshot: WeatherSnapshot) -> "WeatherPayload":
        """Build a response payload from a weather snapshot."""
        return cls(
            temperature_c=snapshot.temperature_c,
            apparent_temperature_c=snapshot.apparent_temperature_c,
            humidity=snapshot.humidity_percent,
            weather_code=snapshot.weather_code,
            fetched_at=snapshot.fetched_at,
        )

    def to_snapshot(self) -> WeatherSnapshot:
        """Convert to the engine's weather snapshot."""
        apparent = self.apparent_temperature_c
        return WeatherSnapshot(
            temperature_c=self.temperature_c,
            apparent_temperature_c=self.temperature_c if apparent is None else apparent,
            humidity_percent=self.humidity,
            weather_code=self.weather_code,
            fetched_at=self.fetched_at,
        )


class DynamicTargetsRequest(_CamelModel):
    """Request body for the dynamic targets route."""

    profile: ProfilePayload = Field(default_factory=ProfilePayload)
    daily_log: DailyLogPayload = Field(default_factory=DailyLogPayload)
    destination: str = ""
    trip_date: str | None = None
    selected_dishes: list[DishPayload] = Field(default_factory=list)
    weather: WeatherPayload | None = None

    @field_validator("profile", "daily_log", mode="before")
    @classmethod
    def _object_or_empty(cls, value: object) -> object:
        return value if isinstance(value, dict | BaseModel) else {}

    @field_validator("destination", mode="before")
    @classmethod
    def _destination(cls, value: object) -> str:
        return str(value).strip() if value else ""

    @field_validator("trip_date", mode="before")
    @classmethod
    def _trip_date(cls, value: object) -> str | None:
        return value if isinstance(value, str) else None

    @field_validator("selected_dishes", mode="before")
    @classmethod
    def _dishes(cls, value: object) -> list[object]:
        if not isinstance(value, list):
            return []
        return [dish for dish in value if isinstance(dish, dict)]

    @field_validator("weather", mode="before")
    @classmethod
    def _weather(cls, value: object) -> object:
        # Unusable pre-fetched weather is treated as absent.
        if isinstance(value, BaseModel):
            return value
        if not isinstance(value, dict):
            return None
        temperature = finite_number(value.get("temperatureC"))
        if temperature is None:
            return None
        return {**value, "temperatureC": temperature}

    def to_trip(self) -> TripContext:
        """Convert to the engine's trip context."""
        return TripContext(
            destination=self.destination,
            trip_date=self.trip_date,
            selected_dish_names=tuple(
                dish.name for dish in self.selected_dishes if dish.name
            ),
        )


class ExtraMealPayload(_CamelModel):
    """Supplementary meal suggestion."""

    title: str
    reason: str
    estimated_calories: int

    @classmethod
    def from_suggestion(cls, suggestion: ExtraMealSuggestion) -> "ExtraMealPayload":
        """Build a response payload from a suggestion."""
        return cls(
            title=suggestion.title,
            reason=suggestion.reason,
            estimated_calories=suggestion.estimated_calories,
        )


class DynamicTargetsPayload(_CamelModel):
    """Adjusted targets as returned to the UI."""

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
    effective_temperature_c: float = Field(alias="effectiveTemperatureC")
    needs_hydration_alert: bool
    hydration_alert_kind: HydrationAlertKind
    hydration_alert_seasonal: bool
    hydration_alert_reason: str
    strong_alert: bool
    extra_meal_suggestion: ExtraMealPayload | None = None
    last_updated_at: datetime

    @classmethod
    def from_targets(cls, targets: DynamicTargets) -> "DynamicTargetsPayload":
        """Build a response payload from computed targets."""
        suggestion = targets.extra_meal_suggestion
        return cls(
            base_water_target=targets.base_water_target,
            adjusted_water_target=targets.adjusted_water_target,
            base_calorie_target=targets.base_calorie_target,
            adjusted_calorie_target=targets.adjusted_calorie_target,
            water_delta=targets.water_delta,
            calorie_delta=targets.calorie_delta,
            step_delta_water=targets.step_delta_water,
            step_delta_calories=targets.step_delta_calories,
            weather_delta_water=targets.weather_delta_water,
            weather_delta_calories=targets.weather_delta_calories,
            consumed_calories=targets.consumed_calories,
            remaining_calories=targets.remaining_calories,
            effective_temperature_c=targets.effective_temperature_c,
            needs_hydration_alert=targets.needs_hydration_alert,
            hydration_alert_kind=targets.hydration_alert_kind,
            hydration_alert_seasonal=targets.hydration_alert_seasonal,
            hydration_alert_reason=targets.hydration_alert_reason,
            strong_alert=targets.strong_alert,
            extra_meal_suggestion=(
                ExtraMealPayload.from_suggestion(suggestion) if suggestion else None
            ),
            last_updated_at=targets.last_updated_at,
        )


class DynamicTargetsResponse(_CamelModel):
    """Response body for the dynamic targets route."""

    weather: WeatherPayload
    dynamic_targets: DynamicTargetsPayload
