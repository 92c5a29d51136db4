"""ASGI entrypoint for the meal log API."""

from meal_log.api.app import create_app
from meal_log.containers import build_container

app = create_app(build_container())
