"""Shared test fixtures."""

from dataclasses import dataclass, field

import httpx
import pytest

from travel_nutrition.adapters.open_meteo_client import WeatherClient
from travel_nutrition.config import Settings
from travel_nutrition.containers import AppContainer
from travel_nutrition.services.advisor import MealAdvisorClient, MealAdvisorService
from travel_nutrition.services.targets import TargetAdjustmentEngine
from travel_nutrition.services.weather import WeatherService


@dataclass
class FakeWeatherClient(WeatherClient):
    """Fake weather client returning a fixed Open-Meteo payload."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "current": {
                "temperature_2m": 30.0,
                "apparent_temperature": 33.5,
                "relative_humidity_2m": 85,
                "weather_code": 2,
            }
        }
    )
    calls: list[tuple[float, float]] = field(default_factory=list)

    async def fetch_current(self, latitude: float, longitude: float) -> dict[str, object]:
        self.calls.append((latitude, longitude))
        return self.payload


@dataclass
class FailingWeatherClient(WeatherClient):
    """Weather client that always fails with an HTTP error."""

    calls: int = 0

    async def fetch_current(self, latitude: float, longitude: float) -> dict[str, object]:
        self.calls += 1
        request = httpx.Request("GET", "https://weather.test/forecast")
        response = httpx.Response(503, request=request)
        raise httpx.HTTPStatusError("unavailable", request=request, response=response)


@dataclass
class FakeAdvisorClient(MealAdvisorClient):
    """Fake advisor client that records prompts."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "title": "Onigiri",
            "reason": "Light rice snack that fits your budget.",
            "estimatedCalories": 200,
        }
    )
    prompts: list[str] = field(default_factory=list)
    api_keys: list[str | None] = field(default_factory=list)

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
        self.prompts.append(prompt)
        self.api_keys.append(api_key)
        return self.payload


@dataclass
class FailingAdvisorClient(MealAdvisorClient):
    """Advisor client that always raises."""

    calls: int = 0

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
        self.calls += 1
        raise RuntimeError("advisor down")


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key")


@pytest.fixture
def weather_client() -> FakeWeatherClient:
    return FakeWeatherClient()


@pytest.fixture
def advisor_client() -> FakeAdvisorClient:
    return FakeAdvisorClient()


@pytest.fixture
def container(
    settings: Settings,
    weather_client: FakeWeatherClient,
    advisor_client: FakeAdvisorClient,
) -> AppContainer:
    weather_service = WeatherService(weather_client)
    advisor_service = MealAdvisorService(
        client=advisor_client,
        model=settings.openai_model,
        temperature=settings.openai_temperature,
        max_output_tokens=settings.openai_max_output_tokens,
    )
    target_engine = TargetAdjustmentEngine(
        weather_service=weather_service,
        advisor_service=advisor_service,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        weather_service=weather_service,
        advisor_service=advisor_service,
        target_engine=target_engine,
        close_resources=close_resources,
    )
