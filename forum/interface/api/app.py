"""FastAPI application."""

from typing import Optional

from dishka import AsyncContainer
from fastapi import FastAPI

from forum.interface.api.routes import common, health, posts, threads
from forum.interface.error import register_error_handlers
from forum.util.di.container import create_container, setup_di
from forum.util.observability import instrument_fastapi


def create_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function;
    ``scripts/start_app.py`` does it in production.

    Args:
        container: DI container to serve requests from. Defaults to the
            production container.
    """
    app_instance = FastAPI(
        title="Forum API",
        description="Forum backend with threaded replies stored as materialized paths",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)
    register_error_handlers(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(common.router)
    app_instance.include_router(threads.router)
    app_instance.include_router(posts.router)

    return app_instance


# Module-level app for uvicorn
app = create_app()
