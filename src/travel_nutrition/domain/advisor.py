"""Models for meal advisor results."""

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from travel_nutrition.domain.numbers import finite_number

MIN_SUGGESTION_CALORIES = 150
MAX_SUGGESTION_CALORIES = 350
DEFAULT_SUGGESTION_CALORIES = 220
DEFAULT_SUGGESTION_TITLE = "Traditional local snack"
DEFAULT_SUGGESTION_REASON = "Fits your remaining energy budget."

_TEXT_DEFAULTS = {
    "title": DEFAULT_SUGGESTION_TITLE,
    "reason": DEFAULT_SUGGESTION_REASON,
}


class MealSuggestionPayload(BaseModel):
    """Structured extra-meal suggestion returned by the advisor."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = DEFAULT_SUGGESTION_TITLE
    reason: str = DEFAULT_SUGGESTION_REASON
    estimated_calories: int = Field(
        default=DEFAULT_SUGGESTION_CALORIES, alias="estimatedCalories"
    )

    @field_validator("title", "reason", mode="before")
    @classmethod
    def _text_or_default(cls, value: object, info: ValidationInfo) -> str:
        if value is None or not str(value).strip():
            return _TEXT_DEFAULTS[info.field_name]
        return str(value).strip()

    @field_validator("estimated_calories", mode="before")
    @classmethod
    def _clamp_calories(cls, value: object) -> int:
        return clamp_suggestion_calories(value)


def clamp_suggestion_calories(value: object) -> int:
    """Coerce an advisor calorie estimate into the allowed suggestion range."""
    calories = finite_number(value)
    if not calories:
        calories = DEFAULT_SUGGESTION_CALORIES
    return int(
        min(MAX_SUGGESTION_CALORIES, max(MIN_SUGGESTION_CALORIES, round(calories)))
    )
