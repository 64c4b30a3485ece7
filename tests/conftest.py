"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field

import httpx
import pytest

from meal_suggester.config import Settings
from meal_suggester.containers import AppContainer
from meal_suggester.domain.providers import ProviderDescriptor, ProviderKind
from meal_suggester.services.dispatcher import ProviderDispatcher
from meal_suggester.services.providers import build_providers
from meal_suggester.services.suggestions import MealSuggestionService

Handler = Callable[[httpx.Request], httpx.Response]


@dataclass
class RecordingTransport:
    """Routes requests to per-host handlers and records every call."""

    handlers: dict[str, Handler] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.handlers.get(request.url.host)
        if handler is None:
            return httpx.Response(404, text="no handler")
        return handler(request)

    @property
    def hosts(self) -> list[str]:
        return [request.url.host for request in self.requests]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


def chat_response(text: str) -> httpx.Response:
    return httpx.Response(200, json={"choices": [{"message": {"content": text}}]})


def gemini_response(text: str) -> httpx.Response:
    return httpx.Response(
        200, json={"candidates": [{"content": {"parts": [{"text": text}]}}]}
    )


def chat_provider(name: str, api_key: str | None = "key") -> ProviderDescriptor:
    return ProviderDescriptor(
        name=name,
        kind=ProviderKind.CHAT_COMPLETIONS,
        endpoint_url=f"https://{name.lower()}.test/v1/chat/completions",
        model=f"{name.lower()}-model",
        api_key=api_key,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        groq_api_key="groq-key",
        cerebras_api_key="cerebras-key",
        openrouter_api_key="openrouter-key",
        gemini_api_key="gemini-key",
    )


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def container(settings: Settings, transport: RecordingTransport) -> AppContainer:
    dispatcher = ProviderDispatcher(
        providers=build_providers(settings),
        http_client=transport.client(),
        timeout_seconds=settings.provider_timeout_seconds,
    )

    async def close_resources() -> None:
        await dispatcher.close()

    return AppContainer(
        settings=settings,
        suggestion_service=MealSuggestionService(dispatcher),
        close_resources=close_resources,
    )
