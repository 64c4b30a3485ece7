"""Meal suggestion service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from meal_suggester.domain.errors import MissingConfigurationError
from meal_suggester.domain.providers import ProviderDescriptor
from meal_suggester.domain.suggestions import MacroRequest, SuggestionResult
from meal_suggester.services.prompts import SYSTEM_PROMPT, build_user_prompt

_logger = logging.getLogger(__name__)


class SuggestionDispatcher(Protocol):
    """Interface for sending prompts through the provider chain."""

    providers: tuple[ProviderDescriptor, ...]

    async def dispatch(self, system_prompt: str, user_prompt: str) -> SuggestionResult:
        """Return suggestions from the first provider that succeeds."""


@dataclass
class MealSuggestionService:
    """Turns remaining macros into meal suggestions."""

    dispatcher: SuggestionDispatcher
    system_prompt: str = SYSTEM_PROMPT

    async def suggest(self, request: MacroRequest) -> SuggestionResult:
        """Build prompts for a request and dispatch them."""
        providers = self.dispatcher.providers
        if not any(provider.is_configured for provider in providers):
            names = ", ".join(provider.name for provider in providers) or "none"
            _logger.error("No provider API keys configured (%s)", names)
            raise MissingConfigurationError(names, "no API key configured")
        user_prompt = build_user_prompt(request)
        return await self.dispatcher.dispatch(self.system_prompt, user_prompt)
