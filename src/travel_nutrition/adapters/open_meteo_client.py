"""Open-Meteo forecast API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

CURRENT_FIELDS = (
    "temperature_2m",
    "apparent_temperature",
    "relative_humidity_2m",
    "weather_code",
)


class WeatherClient(Protocol):
    """Interface for current-weather lookups."""

    async def fetch_current(self, latitude: float, longitude: float) -> dict[str, object]:
        """Return raw current-weather data for a location."""


@dataclass
class HttpxOpenMeteoClient(WeatherClient):
    """HTTPX-backed Open-Meteo client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 10.0

    @classmethod
    def create(
        cls, base_url: str, timeout_seconds: float = 10.0
    ) -> "HttpxOpenMeteoClient":
        """Create an Open-Meteo client with a managed httpx session."""
        return cls(
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def fetch_current(self, latitude: float, longitude: float) -> dict[str, object]:
        """Fetch current conditions for a coordinate pair."""
        url = f"{self.base_url}/forecast"
        response = await self.http_client.get(
            url,
            params={
                "latitude": latitude,
                "longitude": longitude,
                "current": ",".join(CURRENT_FIELDS),
            },
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
