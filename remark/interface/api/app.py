"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from remark.interface.api.errors import register_error_handlers
from remark.interface.api.routes import comments, health, moderation, reports, votes
from remark.util.di.container import create_container, setup_di
from remark.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container; the production container is built
            from the environment when omitted (tests pass their own)

    Returns:
        Configured application
    """
    app_instance = FastAPI(
        title="Remark API",
        description="Threaded comments, votes and reports for externally owned content",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(reports.router)
    app_instance.include_router(moderation.router)

    return app_instance
