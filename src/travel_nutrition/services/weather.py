"""Weather lookups for trip destinations."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from travel_nutrition.adapters.open_meteo_client import WeatherClient
from travel_nutrition.domain.destinations import coordinates_for
from travel_nutrition.domain.targets import (
    DEFAULT_HUMIDITY_PERCENT,
    DEFAULT_TEMPERATURE_C,
    DEFAULT_WEATHER_CODE,
    WeatherSnapshot,
    default_weather,
)

_logger = logging.getLogger(__name__)


@dataclass
class WeatherService:
    """Resolves the current weather for a destination, never failing."""

    client: WeatherClient

    async def current_weather(self, destination: str) -> WeatherSnapshot:
        """Return live weather, or the default snapshot when unavailable."""
        coordinates = coordinates_for(destination)
        if coordinates is None:
            return default_weather()

        try:
            payload = await self.client.fetch_current(
                coordinates.latitude, coordinates.longitude
            )
            snapshot = _parse_current(payload)
        except Exception as exc:
            _logger.warning(
                "Weather lookup failed for %s (status=%s): %s",
                destination,
                _status_code_from_exception(exc),
                exc,
            )
            return default_weather()

        if snapshot is None:
            _logger.warning("Weather payload for %s had no current block", destination)
            return default_weather()
        return snapshot


def _parse_current(payload: dict[str, object]) -> WeatherSnapshot | None:
    """Map an Open-Meteo payload to a snapshot, filling missing fields."""
    current = payload.get("current") if isinstance(payload, dict) else None
    if not isinstance(current, dict) or not current:
        return None

    temperature = _number(current.get("temperature_2m"), DEFAULT_TEMPERATURE_C)
    apparent = _number(current.get("apparent_temperature"), temperature)
    humidity = _number(current.get("relative_humidity_2m"), DEFAULT_HUMIDITY_PERCENT)
    weather_code = _number(current.get("weather_code"), DEFAULT_WEATHER_CODE)
    return WeatherSnapshot(
        temperature_c=temperature,
        apparent_temperature_c=apparent,
        humidity_percent=humidity,
        weather_code=int(weather_code),
        fetched_at=datetime.now(tz=UTC),
    )


def _number(value: object, default: float) -> float:
    if value is None:
        return float(default)
    return float(value)  # type: ignore[arg-type]


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
