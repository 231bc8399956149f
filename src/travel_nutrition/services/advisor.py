"""Extra-meal suggestions from an LLM advisor."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from travel_nutrition.domain.advisor import (
    MAX_SUGGESTION_CALORIES,
    MIN_SUGGESTION_CALORIES,
    MealSuggestionPayload,
)
from travel_nutrition.domain.targets import ExtraMealSuggestion, ProfileSnapshot

GENERIC_SUGGESTION = ExtraMealSuggestion(
    title="Traditional local meal",
    reason="You still have energy budget for one local option.",
    estimated_calories=250,
)

SUGGESTION_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "reason": {"type": "string"},
        "estimatedCalories": {
            "type": "integer",
            "minimum": MIN_SUGGESTION_CALORIES,
            "maximum": MAX_SUGGESTION_CALORIES,
        },
    },
    "required": ["title", "reason", "estimatedCalories"],
    "additionalProperties": False,
}

_logger = logging.getLogger(__name__)


class AdvisorError(RuntimeError):
    """Raised when the meal advisor cannot produce a suggestion."""


class MealAdvisorClient(Protocol):
    """Interface for LLM-backed meal suggestions."""

    async def suggest(  # noqa: PLR0913
        self,
        *,
        model: str,
        prompt: str,
        schema: dict[str, object],
        api_key: str | None,
        temperature: float,
        max_output_tokens: int,
    ) -> dict[str, object]:
        """Return a raw structured suggestion."""


@dataclass
class MealAdvisorService:
    """Service that prompts the advisor and falls back to a generic meal."""

    client: MealAdvisorClient | None
    model: str
    temperature: float = 0.6
    max_output_tokens: int = 220

    async def suggest_extra_meal(
        self,
        *,
        destination: str,
        remaining_calories: int,
        profile: ProfileSnapshot,
        selected_dish_names: Iterable[str] = (),
        api_key: str | None = None,
    ) -> ExtraMealSuggestion:
        """Return an advisor suggestion, or the generic one on any failure."""
        try:
            return await self.request_suggestion(
                destination=destination,
                remaining_calories=remaining_calories,
                profile=profile,
                selected_dish_names=selected_dish_names,
                api_key=api_key,
            )
        except Exception as exc:
            _logger.warning("Meal advisor unavailable, using generic meal: %s", exc)
            return GENERIC_SUGGESTION

    async def request_suggestion(
        self,
        *,
        destination: str,
        remaining_calories: int,
        profile: ProfileSnapshot,
        selected_dish_names: Iterable[str] = (),
        api_key: str | None = None,
    ) -> ExtraMealSuggestion:
        """Ask the advisor for one suggestion, raising on failure."""
        if self.client is None:
            raise AdvisorError("No meal advisor configured")
        prompt = build_prompt(
            destination=destination,
            remaining_calories=remaining_calories,
            profile=profile,
            selected_dish_names=selected_dish_names,
        )
        raw = await self.client.suggest(
            model=self.model,
            prompt=prompt,
            schema=SUGGESTION_SCHEMA,
            api_key=api_key,
            temperature=self.temperature,
            max_output_tokens=self.max_output_tokens,
        )
        try:
            payload = MealSuggestionPayload.model_validate(raw)
        except ValidationError as exc:
            raise AdvisorError(f"Invalid advisor payload: {exc}") from exc
        return ExtraMealSuggestion(
            title=payload.title,
            reason=payload.reason,
            estimated_calories=payload.estimated_calories,
        )


def build_prompt(
    *,
    destination: str,
    remaining_calories: int,
    profile: ProfileSnapshot,
    selected_dish_names: Iterable[str],
) -> str:
    """Build the advisor instructions for one optional local meal."""
    return "\n".join(
        [
            "You recommend traditional dishes to travellers tracking nutrition.",
            f"Trip destination: {destination or 'unknown'}",
            f"Remaining calories: {remaining_calories}",
            f"Allergies: {_join_or_none(profile.allergies)}",
            f"Preferences: {_join_or_none(profile.dietary_preferences)}",
            f"Already selected dishes: {_join_or_none(selected_dish_names)}",
            "Constraints:",
            "- suggest a traditional local option not already selected",
            (
                f"- keep calories between {MIN_SUGGESTION_CALORIES} "
                f"and {MAX_SUGGESTION_CALORIES}"
            ),
            "- never include allergens",
        ]
    )


def _join_or_none(values: Iterable[str]) -> str:
    cleaned = sorted({value.strip() for value in values if value and value.strip()})
    return ", ".join(cleaned) or "none"
