"""Run the meal suggestion API with uvicorn."""

import uvicorn

from meal_suggester.config import Settings


def main() -> None:
    """Serve the API on the configured host and port."""
    settings = Settings()
    uvicorn.run(
        "meal_suggester.api.asgi:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    main()
