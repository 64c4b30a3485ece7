"""Default provider chain built from settings."""

from meal_suggester.config import Settings, parse_provider_order
from meal_suggester.domain.providers import ProviderDescriptor, ProviderKind

GROQ_URL = "https://api.groq.com/openai/v1/chat/completions"
CEREBRAS_URL = "https://api.cerebras.ai/v1/chat/completions"
OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"
GEMINI_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
)


def build_providers(settings: Settings) -> tuple[ProviderDescriptor, ...]:
    """Build the ordered provider chain."""
    available = {
        "groq": ProviderDescriptor(
            name="Groq",
            kind=ProviderKind.CHAT_COMPLETIONS,
            endpoint_url=GROQ_URL,
            model=settings.groq_model,
            api_key=settings.groq_api_key,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
        ),
        "cerebras": ProviderDescriptor(
            name="Cerebras",
            kind=ProviderKind.CHAT_COMPLETIONS,
            endpoint_url=CEREBRAS_URL,
            model=settings.cerebras_model,
            api_key=settings.cerebras_api_key,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
        ),
        "openrouter": ProviderDescriptor(
            name="OpenRouter",
            kind=ProviderKind.CHAT_COMPLETIONS,
            endpoint_url=OPENROUTER_URL,
            model=settings.openrouter_model,
            api_key=settings.openrouter_api_key,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
        ),
        "gemini": ProviderDescriptor(
            name="Gemini",
            kind=ProviderKind.GENERATE_CONTENT,
            endpoint_url=GEMINI_URL,
            model=settings.gemini_model,
            api_key=settings.gemini_api_key,
        ),
    }
    order = parse_provider_order(settings.provider_order)
    return tuple(available[name] for name in order)
