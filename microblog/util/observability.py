"""Observability configuration using Logfire.

Logfire provides structured logging and tracing, with integrations for
FastAPI, SQLAlchemy and httpx.

Usage:
    import logfire

    # Structured logging
    logfire.info("Post liked", post_id=post.id, like_count=count)

    # Manual spans for core operations
    with logfire.span("post_service.create", author=handle):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from microblog.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Logs stay local unless a token is configured. Cloud sending can be
    forced either way with OBSERVABILITY__SEND_TO_LOGFIRE.

    Args:
        settings: Application settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "microblog",
        "service_version": settings.git_sha,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Health checks are not traced. Post ids and handles taken from the path
    are attached to request spans so they can be searched.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        path_params = getattr(request, "path_params", None) or {}
        result = {**attributes}
        for key in ("post_id", "handle"):
            if key in path_params:
                result[key] = path_params[key]
        return result

    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_map_request_attributes,
        excluded_urls="/health",
    )
    logfire.info("FastAPI instrumented", excluded="/health")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Instrument SQLAlchemy engine with Logfire.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Instrument outbound httpx requests (Google OAuth) with Logfire."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
