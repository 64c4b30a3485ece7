"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from meal_suggester.config import Settings
from meal_suggester.services.dispatcher import ProviderDispatcher
from meal_suggester.services.providers import build_providers
from meal_suggester.services.suggestions import MealSuggestionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    suggestion_service: MealSuggestionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    dispatcher = ProviderDispatcher.create(
        build_providers(resolved_settings),
        timeout_seconds=resolved_settings.provider_timeout_seconds,
    )
    suggestion_service = MealSuggestionService(dispatcher)

    async def close_resources() -> None:
        await dispatcher.close()

    return AppContainer(
        settings=resolved_settings,
        suggestion_service=suggestion_service,
        close_resources=close_resources,
    )
