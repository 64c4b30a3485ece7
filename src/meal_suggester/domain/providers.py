"""Provider descriptors for the fallback chain."""

from dataclasses import dataclass
from enum import Enum


class ProviderKind(Enum):
    """Wire format spoken by a provider."""

    CHAT_COMPLETIONS = "chat_completions"
    GENERATE_CONTENT = "generate_content"


@dataclass(frozen=True)
class ProviderDescriptor:
    """Static description of one LLM provider."""

    name: str
    kind: ProviderKind
    endpoint_url: str
    model: str
    api_key: str | None
    temperature: float = 0.7
    max_tokens: int = 500

    @property
    def is_configured(self) -> bool:
        """Return whether an API key is available for this provider."""
        return bool(self.api_key)


@dataclass(frozen=True)
class ProviderRequest:
    """Outbound HTTP request for a provider attempt."""

    url: str
    headers: dict[str, str]
    body: dict[str, object]
    params: dict[str, str] | None = None
