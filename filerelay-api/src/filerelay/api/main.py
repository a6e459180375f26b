"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from filerelay.domain.errors import InvalidApiKeyError
from filerelay.infrastructure.http.auth import invalid_api_key_handler
from filerelay.infrastructure.log_config import configure_logging
from filerelay.infrastructure.settings import Settings, get_settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")

    if not settings.webhook_url:
        logger.warning("DISCORD_WEBHOOK_URL is not set; uploads will fail until it is configured")
    if settings.api_key is None:
        logger.warning("API_KEY is not set; only requests with an empty x-api-key header are accepted")

    yield

    logger.info("Shutdown complete")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Explicit ``settings`` replace the cached ones for every route.
    """
    explicit_settings = settings is not None
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Relays uploaded or remote files to a webhook and returns the stored attachments",
        lifespan=lifespan,
    )
    app.state.settings = settings
    if explicit_settings:
        app.dependency_overrides[get_settings] = lambda: settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidApiKeyError, invalid_api_key_handler)

    # Register routes
    from filerelay.api.routes import router
    from filerelay.infrastructure.http.upload import router as upload_router

    app.include_router(router)
    app.include_router(upload_router)

    return app


# Create app instance
app = create_app()
