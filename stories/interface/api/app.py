"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stories.config import Settings
from stories.interface.api.errors import register_exception_handlers
from stories.interface.api.routes import (
    auth,
    comments,
    health,
    realtime,
    testimonials,
)
from stories.util.di.container import create_container, setup_di
from stories.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Closes the broadcaster and disposes the engine
    await app.state.dishka_container.close()


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it.

    Args:
        settings: Settings for app-level wiring, loaded from the environment
            when omitted
        container: DI container, the production container when omitted
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Stories API",
        description="Backend API for Stories - members share testimonials, "
        "discuss them in threaded comments and follow updates live",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())
    register_exception_handlers(app_instance, settings)

    # Health stays at the root; everything else lives under the API prefix
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router, prefix=settings.api_prefix)
    app_instance.include_router(testimonials.router, prefix=settings.api_prefix)
    app_instance.include_router(comments.router, prefix=settings.api_prefix)
    app_instance.include_router(realtime.router, prefix=settings.api_prefix)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
