"""FastAPI application for SeoKar AI."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .admin.routes import router as admin_router
from .ai.service import SuggestionService
from .core.config import AppConfig, ProviderConfig
from .core.hooks import HookManager
from .core.logging import logger, setup_logging


def create_app(
    app_config: AppConfig | None = None,
    provider_config: ProviderConfig | None = None,
    hooks: HookManager | None = None,
    service: SuggestionService | None = None,
) -> FastAPI:
    """Build the application.

    Configuration that is not passed in is read from the environment at
    startup.

    Args:
        app_config: Runtime settings.
        provider_config: Provider credentials.
        hooks: Filter chains for the service.
        service: Prebuilt service; overrides the three arguments above.

    Returns:
        FastAPI application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan - build the suggestion service on startup."""
        suggestions = service
        if suggestions is None:
            config = app_config or AppConfig.from_env()
            setup_logging(config.log_level)
            suggestions = SuggestionService(
                provider_config or ProviderConfig.from_env(),
                config,
                hooks=hooks,
            )

        provider = suggestions.active_provider()
        if provider is None:
            logger.warning("No AI provider is configured; suggestions will fail")
        else:
            logger.info(f"Active AI provider: {provider.name.value}")

        app.state.suggestions = suggestions
        yield
        app.state.suggestions = None

    app = FastAPI(
        title="SeoKar AI",
        description="AI writing suggestions for the post editor",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(admin_router)
    return app


app = create_app()
