"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from microblog.config import Settings
from microblog.interface.api.errors import register_error_handlers
from microblog.interface.api.routes import auth, health, posts, users
from microblog.util.di.container import create_container, setup_di
from microblog.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function. In
    production, start_app.py handles this; tests configure it in conftest.py.

    Args:
        settings: Application settings (loaded from environment if omitted)
        container: DI container (production container if omitted)

    Returns:
        Configured application
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Microblog API",
        description="Backend API for Microblog - short posts, tags and likes",
        version="0.1.0",
    )

    if settings.environment != "test":
        # Logfire must be configured before instrumentation
        instrument_httpx()
        instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance, settings)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(users.router)

    return app_instance
