"""Tests for weather service."""

import asyncio

from travel_nutrition.services.weather import WeatherService
from tests.conftest import FailingWeatherClient, FakeWeatherClient


def test_current_weather_maps_open_meteo_payload() -> None:
    client = FakeWeatherClient()
    service = WeatherService(client)

    snapshot = asyncio.run(service.current_weather("Japan"))

    assert client.calls == [(35.6762, 139.6503)]
    assert snapshot.temperature_c == 30.0
    assert snapshot.apparent_temperature_c == 33.5
    assert snapshot.humidity_percent == 85
    assert snapshot.weather_code == 2


def test_unmapped_destination_uses_default_without_calling() -> None:
    client = FakeWeatherClient()
    service = WeatherService(client)

    snapshot = asyncio.run(service.current_weather("Atlantis"))

    assert client.calls == []
    assert snapshot.temperature_c == 22
    assert snapshot.humidity_percent == 50
    assert snapshot.weather_code == 0


def test_failed_fetch_uses_default() -> None:
    client = FailingWeatherClient()
    service = WeatherService(client)

    snapshot = asyncio.run(service.current_weather("Peru"))

    assert client.calls == 1
    assert snapshot.temperature_c == 22
    assert snapshot.humidity_percent == 50


def test_missing_current_block_uses_default() -> None:
    service = WeatherService(FakeWeatherClient(payload={"latitude": 1.0}))

    snapshot = asyncio.run(service.current_weather("Spain"))

    assert snapshot.temperature_c == 22


def test_partial_current_block_fills_missing_fields() -> None:
    client = FakeWeatherClient(payload={"current": {"temperature_2m": 14.5}})
    service = WeatherService(client)

    snapshot = asyncio.run(service.current_weather("France"))

    assert snapshot.temperature_c == 14.5
    assert snapshot.apparent_temperature_c == 14.5
    assert snapshot.humidity_percent == 50
    assert snapshot.weather_code == 0


def test_malformed_value_uses_default() -> None:
    client = FakeWeatherClient(payload={"current": {"temperature_2m": "warm"}})
    service = WeatherService(client)

    snapshot = asyncio.run(service.current_weather("Greece"))

    assert snapshot.temperature_c == 22
