"""Tests for the meal suggestion endpoint."""

import json
from dataclasses import dataclass, replace

import httpx
from fastapi.testclient import TestClient

from meal_suggester.api.app import create_app
from meal_suggester.containers import AppContainer
from meal_suggester.domain.errors import RateLimitedError, UpstreamError
from meal_suggester.domain.suggestions import MacroRequest, SuggestionResult
from tests.conftest import RecordingTransport, chat_response, gemini_response

PAYLOAD = {
    "remainingCals": 700,
    "remainingProtein": 45,
    "remainingCarbs": 80,
    "remainingFat": 25,
    "userGoal": "build muscle",
    "eatenToday": ["eggs", "toast"],
}


def test_health(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_suggest_meals_returns_first_provider_text(
    container: AppContainer, transport: RecordingTransport
) -> None:
    transport.handlers = {"api.groq.com": lambda request: chat_response("Moi moi")}
    client = TestClient(create_app(container))

    response = client.post("/api/suggest-meals", json=PAYLOAD)

    assert response.status_code == 200
    assert response.json() == {"suggestions": "Moi moi"}
    body = json.loads(transport.requests[0].content.decode())
    user_prompt = body["messages"][1]["content"]
    assert "Already eaten today: eggs, toast" in user_prompt
    assert "User's goal: build muscle" in user_prompt


def test_suggest_meals_falls_back_to_gemini(
    container: AppContainer, transport: RecordingTransport
) -> None:
    transport.handlers = {
        "api.groq.com": lambda request: httpx.Response(429),
        "api.cerebras.ai": lambda request: httpx.Response(500, text="oops"),
        "openrouter.ai": lambda request: httpx.Response(402, text="credits"),
        "generativelanguage.googleapis.com": lambda request: gemini_response(
            "Egusi soup"
        ),
    }
    client = TestClient(create_app(container))

    response = client.post("/api/suggest-meals", json=PAYLOAD)

    assert response.status_code == 200
    assert response.json() == {"suggestions": "Egusi soup"}
    assert len(transport.requests) == 4


def test_suggest_meals_all_unavailable_returns_503(
    container: AppContainer, transport: RecordingTransport
) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/suggest-meals", json=PAYLOAD)

    assert response.status_code == 503
    assert response.json()["error"].startswith(
        "All AI providers are currently unavailable"
    )


def test_suggest_meals_without_keys_returns_configuration_error(
    container: AppContainer, transport: RecordingTransport
) -> None:
    dispatcher = container.suggestion_service.dispatcher
    dispatcher.providers = tuple(
        replace(provider, api_key=None) for provider in dispatcher.providers
    )
    client = TestClient(create_app(container))

    response = client.post("/api/suggest-meals", json=PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {"error": "Server configuration error"}
    assert transport.requests == []


def test_suggest_meals_accepts_minimal_body(
    container: AppContainer, transport: RecordingTransport
) -> None:
    transport.handlers = {"api.groq.com": lambda request: chat_response("Anything")}
    client = TestClient(create_app(container))

    response = client.post("/api/suggest-meals", json={"userGoal": "maintain"})

    assert response.status_code == 200
    body = json.loads(transport.requests[0].content.decode())
    assert "nothing yet" in body["messages"][1]["content"]


def test_cors_allows_any_origin(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.options(
        "/api/suggest-meals",
        headers={
            "Origin": "https://app.example.com",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


@dataclass
class FailingSuggestionService:
    """Raises a fixed error for every request."""

    error: Exception

    async def suggest(self, request: MacroRequest) -> SuggestionResult:
        raise self.error


def test_rate_limit_escaping_service_returns_429(container: AppContainer) -> None:
    container.suggestion_service = FailingSuggestionService(
        RateLimitedError("Groq", "rate limited")
    )
    client = TestClient(create_app(container))

    response = client.post("/api/suggest-meals", json=PAYLOAD)

    assert response.status_code == 429
    assert response.json() == {"error": "Quota exceeded. Please try again later."}


def test_other_suggestion_error_returns_service_error(
    container: AppContainer,
) -> None:
    container.suggestion_service = FailingSuggestionService(
        UpstreamError("Groq", 500, "boom")
    )
    client = TestClient(create_app(container))

    response = client.post("/api/suggest-meals", json=PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {"error": "AI service error"}
