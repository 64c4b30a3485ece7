"""Request builders and response readers for each provider wire format."""

from typing import Protocol

from meal_suggester.domain.providers import (
    ProviderDescriptor,
    ProviderKind,
    ProviderRequest,
)

NO_SUGGESTIONS_TEXT = "No suggestions available."


class ProviderFormat(Protocol):
    """Interface shared by provider wire formats."""

    def build_request(
        self, provider: ProviderDescriptor, system_prompt: str, user_prompt: str
    ) -> ProviderRequest:
        """Build the outbound request for a provider attempt."""

    def extract_text(self, payload: object) -> str | None:
        """Return generated text from a response payload, if present."""


class ChatCompletionsFormat:
    """OpenAI-compatible chat completions (Groq, Cerebras, OpenRouter)."""

    def build_request(
        self, provider: ProviderDescriptor, system_prompt: str, user_prompt: str
    ) -> ProviderRequest:
        return ProviderRequest(
            url=provider.endpoint_url,
            headers={
                "Authorization": f"Bearer {provider.api_key}",
                "Content-Type": "application/json",
            },
            body={
                "model": provider.model,
                "messages": [
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                "temperature": provider.temperature,
                "max_tokens": provider.max_tokens,
            },
        )

    def extract_text(self, payload: object) -> str | None:
        choices = _get(payload, "choices")
        message = _get(_first(choices), "message")
        return _as_text(_get(message, "content"))


class GenerateContentFormat:
    """Gemini generateContent API."""

    def build_request(
        self, provider: ProviderDescriptor, system_prompt: str, user_prompt: str
    ) -> ProviderRequest:
        return ProviderRequest(
            url=provider.endpoint_url.format(model=provider.model),
            headers={"Content-Type": "application/json"},
            body={
                "contents": [
                    {"role": "user", "parts": [{"text": system_prompt}]},
                    {"role": "user", "parts": [{"text": user_prompt}]},
                ]
            },
            params={"key": provider.api_key or ""},
        )

    def extract_text(self, payload: object) -> str | None:
        candidate = _first(_get(payload, "candidates"))
        parts = _get(_get(candidate, "content"), "parts")
        return _as_text(_get(_first(parts), "text"))


FORMATS: dict[ProviderKind, ProviderFormat] = {
    ProviderKind.CHAT_COMPLETIONS: ChatCompletionsFormat(),
    ProviderKind.GENERATE_CONTENT: GenerateContentFormat(),
}


def format_for(kind: ProviderKind) -> ProviderFormat:
    """Return the wire format implementation for a provider kind."""
    return FORMATS[kind]


def extract_generated_text(payload: object, kind: ProviderKind | None = None) -> str:
    """Extract generated text, falling back to a fixed message.

    With ``kind`` set only that provider's response shape is read; otherwise
    every known shape is tried in turn.
    """
    formats = [FORMATS[kind]] if kind is not None else list(FORMATS.values())
    for provider_format in formats:
        text = provider_format.extract_text(payload)
        if text:
            return text
    return NO_SUGGESTIONS_TEXT


def _get(value: object, key: str) -> object:
    if isinstance(value, dict):
        return value.get(key)
    return None


def _first(value: object) -> object:
    if isinstance(value, list) and value:
        return value[0]
    return None


def _as_text(value: object) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None
