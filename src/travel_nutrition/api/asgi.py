"""ASGI entrypoint serving the dynamic targets API."""

from travel_nutrition.api.app import create_app
from travel_nutrition.config import Settings
from travel_nutrition.containers import build_container

settings = Settings()
app = create_app(build_container(settings))
