"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from meal_suggester.app_logging import configure_logging
from meal_suggester.config import parse_cors_origins
from meal_suggester.containers import AppContainer
from meal_suggester.domain.errors import (
    AllProvidersUnavailableError,
    MissingConfigurationError,
    RateLimitedError,
    SuggestionError,
)
from meal_suggester.domain.suggestions import MacroRequest

UNAVAILABLE_MESSAGE = (
    "All AI providers are currently unavailable. Please try again later."
)
CONFIGURATION_MESSAGE = "Server configuration error"
QUOTA_MESSAGE = "Quota exceeded. Please try again later."
SERVICE_ERROR_MESSAGE = "AI service error"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    origins = parse_cors_origins(container.settings.cors_allow_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(SuggestionError)
    async def suggestion_error_handler(
        request: Request, exc: SuggestionError
    ) -> JSONResponse:
        if isinstance(exc, AllProvidersUnavailableError):
            return _error(status.HTTP_503_SERVICE_UNAVAILABLE, UNAVAILABLE_MESSAGE)
        if isinstance(exc, MissingConfigurationError):
            return _error(
                status.HTTP_500_INTERNAL_SERVER_ERROR, CONFIGURATION_MESSAGE
            )
        if isinstance(exc, RateLimitedError):
            return _error(status.HTTP_429_TOO_MANY_REQUESTS, QUOTA_MESSAGE)
        logger.exception("Unhandled suggestion error", exc_info=exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVICE_ERROR_MESSAGE)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/suggest-meals")
    async def suggest_meals(payload: MacroRequest, request: Request) -> dict[str, str]:
        """Return meal ideas that fit the remaining macros."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.suggestion_service.suggest(payload)
        return {"suggestions": result.suggestions}

    return app


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})
