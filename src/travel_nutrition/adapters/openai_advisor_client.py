"""OpenAI Responses API client for meal suggestions."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from travel_nutrition.services.advisor import AdvisorError, MealAdvisorClient


@dataclass
class OpenAIMealAdvisorClient(MealAdvisorClient):
    """Meal advisor backed by OpenAI Responses API."""

    client: AsyncOpenAI | None
    store: bool = False

    @classmethod
    def create(
        cls, api_key: str | None, store: bool = False
    ) -> "OpenAIMealAdvisorClient":
        """Create an advisor client; without a key only per-request keys work."""
        client = AsyncOpenAI(api_key=api_key) if api_key else None
        return cls(client=client, store=store)

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
        """Call OpenAI Responses API with structured outputs."""
        request_payload: dict[str, object] = {
            "model": model,
            "instructions": prompt,
            "input": "Suggest one optional extra local meal.",
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": "extra_meal_suggestion",
                    "strict": True,
                    "schema": schema,
                }
            },
            "temperature": temperature,
            "max_output_tokens": max_output_tokens,
            "store": self.store,
        }

        if api_key:
            async with AsyncOpenAI(api_key=api_key) as request_client:
                response = await request_client.responses.create(**request_payload)
        elif self.client is not None:
            response = await self.client.responses.create(**request_payload)
        else:
            raise AdvisorError("OpenAI API key is not configured")

        output_text = response.output_text
        if not output_text:
            raise AdvisorError("OpenAI returned an empty response")
        try:
            return json.loads(output_text)
        except json.JSONDecodeError as exc:
            raise AdvisorError("OpenAI returned malformed JSON") from exc

    async def close(self) -> None:
        """Close the shared OpenAI client, if any."""
        if self.client is not None:
            await self.client.close()
