"""FastAPI application factory.

api layer:
- Validates inputs, applies the cross-origin policy
- Composes extractor, provider and translator per request
- Forbidden: direct upstream HTTP calls (providers own those)
"""

from __future__ import annotations

from fastapi import Depends, FastAPI

from bilibili_parts.api.cors import CorsPolicy
from bilibili_parts.config import Settings
from bilibili_parts.providers.base import ProviderBase
from bilibili_parts.providers.bilibili import BilibiliProvider


def get_settings() -> Settings:
    """Dependency to get settings.

    Read from the environment on every request, so changes apply without
    a restart.
    """
    return Settings.from_env()


def get_cors_policy(settings: Settings = Depends(get_settings)) -> CorsPolicy:
    """Dependency to get the cross-origin policy."""
    return CorsPolicy(allowed_origins=settings.allowed_origins)


def get_provider(settings: Settings = Depends(get_settings)) -> ProviderBase:
    """Dependency to get the upstream provider.

    Returns:
        BilibiliProvider configured from settings.
    """
    return BilibiliProvider(
        timeout=settings.api_timeout,
        user_agent=settings.user_agent,
        debug=settings.debug,
    )


def create_app() -> FastAPI:
    """Create FastAPI application.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="Bilibili Parts API",
        description="Lists the parts (pages) of a Bilibili video",
        version="0.1.0",
    )

    # Include routes
    from bilibili_parts.api.routes import parts

    app.include_router(parts.router)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
