"""Errors raised while producing meal suggestions."""


class SuggestionError(Exception):
    """Base error for the suggestion pipeline."""


class ProviderError(SuggestionError):
    """A single provider attempt failed; the chain moves on."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider


class MissingConfigurationError(ProviderError):
    """The provider has no API key configured."""


class RateLimitedError(ProviderError):
    """The provider answered with HTTP 429."""


class UpstreamError(ProviderError):
    """The provider answered with a non-success status or an unusable body."""

    def __init__(self, provider: str, status_code: int, body: str) -> None:
        super().__init__(provider, f"status {status_code}")
        self.status_code = status_code
        self.body = body


class NetworkFailureError(ProviderError):
    """Transport-level failure, including per-attempt timeouts."""


class AllProvidersUnavailableError(SuggestionError):
    """Every provider in the chain was skipped or failed."""

    def __init__(self, attempted: tuple[str, ...]) -> None:
        super().__init__("All AI providers are currently unavailable")
        self.attempted = attempted
