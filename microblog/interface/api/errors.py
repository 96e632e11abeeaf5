"""Mapping of domain errors to HTTP responses."""

from urllib.parse import urlencode

import logfire
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse, RedirectResponse

from microblog.adapter.error import ProviderError
from microblog.config import Settings
from microblog.domain.error import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    StoreUnavailableError,
    UnauthenticatedError,
    ValidationError,
)
from microblog.interface.api.session import frontend_redirect

# Form endpoints and the page their errors are shown on
_ERROR_PAGES = {
    "/auth/login": "/login",
    "/auth/register": "/register",
    "/auth/google/callback": "/login",
}


def _redirect_with_error(settings: Settings, page: str, message: str) -> RedirectResponse:
    query = urlencode({"error": message})
    return RedirectResponse(
        url=f"{frontend_redirect(settings, page)}?{query}",
        status_code=status.HTTP_303_SEE_OTHER,
    )


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Register one exception handler per domain error kind.

    Args:
        app: FastAPI application
        settings: Application settings (for redirect URLs)
    """

    @app.exception_handler(ValidationError)
    @app.exception_handler(ConflictError)
    async def handle_bad_input(request: Request, exc: Exception) -> RedirectResponse:
        page = _ERROR_PAGES.get(request.url.path, "/")
        return _redirect_with_error(settings, page, str(exc))

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError) -> Response:
        if request.url.path == "/auth/login":
            # Unknown username on the login form
            return _redirect_with_error(settings, "/login", "User not found")
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(ForbiddenError)
    async def handle_forbidden(request: Request, exc: ForbiddenError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"detail": "You can only delete your own posts"},
        )

    @app.exception_handler(UnauthenticatedError)
    async def handle_unauthenticated(
        request: Request, exc: UnauthenticatedError
    ) -> RedirectResponse:
        return RedirectResponse(
            url=frontend_redirect(settings, "/login"),
            status_code=status.HTTP_303_SEE_OTHER,
        )

    @app.exception_handler(ProviderError)
    async def handle_provider_error(
        request: Request, exc: ProviderError
    ) -> RedirectResponse:
        logfire.error("Identity provider failure", error=str(exc))
        return _redirect_with_error(settings, "/login", "Google login failed")

    @app.exception_handler(StoreUnavailableError)
    async def handle_store_unavailable(
        request: Request, exc: StoreUnavailableError
    ) -> JSONResponse:
        logfire.error(
            "Store unavailable", path=request.url.path, error=str(exc.__cause__ or exc)
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )
