"""ASGI entrypoint for the meal suggestion API."""

from meal_suggester.api.app import create_app
from meal_suggester.containers import build_container

app = create_app(build_container())
