"""Sequential multi-provider fallback dispatcher."""

import logging
from dataclasses import dataclass

import httpx

from meal_suggester.adapters.provider_formats import (
    extract_generated_text,
    format_for,
)
from meal_suggester.domain.errors import (
    AllProvidersUnavailableError,
    MissingConfigurationError,
    NetworkFailureError,
    RateLimitedError,
    UpstreamError,
)
from meal_suggester.domain.providers import ProviderDescriptor
from meal_suggester.domain.suggestions import SuggestionResult

_logger = logging.getLogger(__name__)


@dataclass
class ProviderDispatcher:
    """Try each provider in order and return the first usable answer."""

    providers: tuple[ProviderDescriptor, ...]
    http_client: httpx.AsyncClient
    timeout_seconds: float = 30.0

    @classmethod
    def create(
        cls, providers: tuple[ProviderDescriptor, ...], timeout_seconds: float = 30.0
    ) -> "ProviderDispatcher":
        """Create a dispatcher with a managed httpx session."""
        return cls(
            providers=providers,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def dispatch(self, system_prompt: str, user_prompt: str) -> SuggestionResult:
        """Return suggestions from the first provider that succeeds."""
        attempted: list[str] = []
        for provider in self.providers:
            _logger.info("Trying provider: %s", provider.name)
            attempted.append(provider.name)
            try:
                text = await self._attempt(provider, system_prompt, user_prompt)
            except MissingConfigurationError:
                _logger.warning("%s API key not set, skipping", provider.name)
                continue
            except RateLimitedError:
                _logger.info("%s rate limited, trying next", provider.name)
                continue
            except UpstreamError as exc:
                _logger.error(
                    "%s error (%s): %s", provider.name, exc.status_code, exc.body
                )
                continue
            except NetworkFailureError as exc:
                _logger.error("%s request failed: %s", provider.name, exc)
                continue
            _logger.info("Success with %s", provider.name)
            return SuggestionResult(suggestions=text, provider=provider.name)

        _logger.error("All AI providers failed")
        raise AllProvidersUnavailableError(tuple(attempted))

    async def _attempt(
        self, provider: ProviderDescriptor, system_prompt: str, user_prompt: str
    ) -> str:
        """Run a single provider attempt, raising a ProviderError on failure."""
        if not provider.is_configured:
            raise MissingConfigurationError(provider.name, "API key not set")

        provider_format = format_for(provider.kind)
        request = provider_format.build_request(provider, system_prompt, user_prompt)
        try:
            response = await self.http_client.post(
                request.url,
                headers=request.headers,
                params=request.params,
                json=request.body,
                timeout=self.timeout_seconds,
            )
        except httpx.TimeoutException as exc:
            raise NetworkFailureError(
                provider.name, f"timed out after {self.timeout_seconds}s"
            ) from exc
        except httpx.HTTPError as exc:
            raise NetworkFailureError(
                provider.name, str(exc) or type(exc).__name__
            ) from exc

        if response.status_code == httpx.codes.TOO_MANY_REQUESTS:
            raise RateLimitedError(provider.name, "rate limited")
        if not response.is_success:
            raise UpstreamError(provider.name, response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamError(
                provider.name, response.status_code, response.text
            ) from exc
        return extract_generated_text(payload, provider.kind)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
