"""Tests for HTTP-based adapters."""

import asyncio
import json

import httpx
import pytest

from travel_nutrition.adapters.open_meteo_client import HttpxOpenMeteoClient
from travel_nutrition.adapters.openai_advisor_client import OpenAIMealAdvisorClient
from travel_nutrition.services.advisor import SUGGESTION_SCHEMA, AdvisorError


class _FakeResponses:
    def __init__(self, output_text: str) -> None:
        self.output_text = output_text
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("Resp", (), {"output_text": self.output_text})()


class _FakeOpenAI:
    def __init__(self, output_text: str) -> None:
        self.responses = _FakeResponses(output_text)
        self.closed = False

    async def close(self) -> None:
        self.closed = True


def _suggest(client: OpenAIMealAdvisorClient) -> dict[str, object]:
    return asyncio.run(
        client.suggest(
            model="gpt-4o-mini",
            prompt="Suggest a dish",
            schema=SUGGESTION_SCHEMA,
            api_key=None,
            temperature=0.6,
            max_output_tokens=220,
        )
    )


def test_openai_advisor_client_parses_output() -> None:
    fake = _FakeOpenAI(
        json.dumps({"title": "Mochi", "reason": "Sweet", "estimatedCalories": 180})
    )
    client = OpenAIMealAdvisorClient(client=fake)

    result = _suggest(client)

    assert result["title"] == "Mochi"
    payload = fake.responses.last_payload
    assert payload is not None
    assert payload["model"] == "gpt-4o-mini"
    assert payload["instructions"] == "Suggest a dish"
    assert payload["text"]["format"]["type"] == "json_schema"
    assert payload["store"] is False


def test_openai_advisor_client_rejects_empty_output() -> None:
    client = OpenAIMealAdvisorClient(client=_FakeOpenAI(""))

    with pytest.raises(AdvisorError):
        _suggest(client)


def test_openai_advisor_client_rejects_malformed_json() -> None:
    client = OpenAIMealAdvisorClient(client=_FakeOpenAI("{not json"))

    with pytest.raises(AdvisorError):
        _suggest(client)


def test_openai_advisor_client_requires_a_key() -> None:
    client = OpenAIMealAdvisorClient.create(api_key=None)

    with pytest.raises(AdvisorError):
        _suggest(client)
    asyncio.run(client.close())


def test_openai_advisor_client_closes_shared_client() -> None:
    fake = _FakeOpenAI("{}")
    client = OpenAIMealAdvisorClient(client=fake)

    asyncio.run(client.close())

    assert fake.closed is True


def test_open_meteo_client_requests_current_fields() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200, json={"current": {"temperature_2m": 18.2, "weather_code": 3}}
        )

    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxOpenMeteoClient(
        base_url="https://weather.test/v1", http_client=async_client
    )

    payload = asyncio.run(client.fetch_current(41.9028, 12.4964))

    assert payload["current"]["temperature_2m"] == 18.2
    assert seen[0].url.path == "/v1/forecast"
    params = seen[0].url.params
    assert params["latitude"] == "41.9028"
    assert params["longitude"] == "12.4964"
    assert params["current"] == (
        "temperature_2m,apparent_temperature,relative_humidity_2m,weather_code"
    )


def test_open_meteo_client_raises_on_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, json={"error": True})

    async_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = HttpxOpenMeteoClient(
        base_url="https://weather.test/v1", http_client=async_client
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.fetch_current(0.0, 0.0))
