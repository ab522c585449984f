"""FastAPI application factory and the uvicorn entrypoint."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from life.config import Settings
from life.interface.api.routes import (
    auth,
    decisions,
    export,
    health,
    invites,
    journal,
    phases,
    private_profile,
    profile,
)
from life.interface.error import register_error_handlers
from life.util.di.container import create_container, setup_di
from life.util.observability import instrument_fastapi

ROUTERS = (
    health.router,
    auth.router,
    invites.router,
    profile.router,
    decisions.router,
    journal.router,
    phases.router,
    private_profile.router,
    export.router,
)

# Frontend dev servers (Next.js, Vite)
LOCAL_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


def _allowed_origins(settings: Settings) -> list[str]:
    if settings.is_production:
        return [settings.api.frontend_url]
    return [settings.api.frontend_url, *LOCAL_ORIGINS]


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the API.

    Logfire must already be configured (start_app.py does it) for request
    spans to be exported.

    Args:
        container: DI container to use; the production container when omitted

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Life API",
        description="Backend API for Life - private journaling, decision tracking and life phases",
        version="0.1.0",
        # Interactive docs expose the whole surface; keep them off the public host
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None,
    )

    instrument_fastapi(app_instance)

    # The session cookie rides cross-site, so origins are listed explicitly
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=_allowed_origins(settings),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Cache-Control"],
        # The export filename is read from Content-Disposition
        expose_headers=["Content-Length", "Content-Type", "Content-Disposition"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    for router in ROUTERS:
        app_instance.include_router(router)

    register_error_handlers(app_instance)

    return app_instance


app = create_app()
