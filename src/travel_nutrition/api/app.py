"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Header, Request
from fastapi.responses import JSONResponse

from travel_nutrition.api.models import (
    DynamicTargetsPayload,
    DynamicTargetsRequest,
    DynamicTargetsResponse,
    WeatherPayload,
)
from travel_nutrition.app_logging import configure_logging
from travel_nutrition.config import resolve_api_key
from travel_nutrition.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post(
        "/dynamic-targets",
        response_model=DynamicTargetsResponse,
        response_model_exclude_none=True,
    )
    async def dynamic_targets(
        body: DynamicTargetsRequest,
        request: Request,
        x_openai_key: str | None = Header(default=None),
    ) -> DynamicTargetsResponse | JSONResponse:
        """Recompute today's hydration and calorie targets."""
        state_container: AppContainer = request.app.state.container
        try:
            result = await state_container.target_engine.compute_dynamic_targets(
                profile=body.profile.to_snapshot(),
                activity=body.daily_log.to_snapshot(),
                trip=body.to_trip(),
                live_weather=body.weather.to_snapshot() if body.weather else None,
                api_key=resolve_api_key(x_openai_key),
            )
        except Exception:
            logger.exception(
                "Dynamic targets computation failed",
                extra={"destination": body.destination},
            )
            return JSONResponse(
                status_code=500, content={"error": "Internal server error"}
            )

        return DynamicTargetsResponse(
            weather=WeatherPayload.from_snapshot(result.weather),
            dynamic_targets=DynamicTargetsPayload.from_targets(result.targets),
        )

    return app
