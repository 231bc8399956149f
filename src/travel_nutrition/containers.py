"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from travel_nutrition.adapters.open_meteo_client import HttpxOpenMeteoClient
from travel_nutrition.adapters.openai_advisor_client import OpenAIMealAdvisorClient
from travel_nutrition.config import Settings
from travel_nutrition.services.advisor import MealAdvisorService
from travel_nutrition.services.targets import TargetAdjustmentEngine
from travel_nutrition.services.weather import WeatherService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    weather_service: WeatherService
    advisor_service: MealAdvisorService
    target_engine: TargetAdjustmentEngine
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    weather_client = HttpxOpenMeteoClient.create(
        base_url=resolved_settings.weather_base_url,
        timeout_seconds=resolved_settings.weather_timeout_seconds,
    )
    advisor_client = OpenAIMealAdvisorClient.create(
        resolved_settings.openai_api_key, store=resolved_settings.openai_store
    )
    weather_service = WeatherService(weather_client)
    advisor_service = MealAdvisorService(
        client=advisor_client,
        model=resolved_settings.openai_model,
        temperature=resolved_settings.openai_temperature,
        max_output_tokens=resolved_settings.openai_max_output_tokens,
    )
    target_engine = TargetAdjustmentEngine(
        weather_service=weather_service,
        advisor_service=advisor_service,
    )

    async def close_resources() -> None:
        await weather_client.close()
        await advisor_client.close()

    return AppContainer(
        settings=resolved_settings,
        weather_service=weather_service,
        advisor_service=advisor_service,
        target_engine=target_engine,
        close_resources=close_resources,
    )
