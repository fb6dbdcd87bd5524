"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, starlette, talentiq.api, talentiq.observability, talentiq.configs
System role: Application initialization and configuration
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from talentiq import __version__
from talentiq.api import api_router
from talentiq.api.deps import ServiceContainer
from talentiq.api.routers.error_handling import register_exception_handlers
from talentiq.configs import Settings, get_settings
from talentiq.observability.logger import configure_logging
from talentiq.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)
from talentiq.workers.identity_sync import serve_identity_sync

logger = logging.getLogger(__name__)

API_PREFIX = "api/"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Starts the service container (database, provider clients) and closes
    it on shutdown. A startup failure is logged and aborts the process.
    """
    # Startup
    configure_logging(app.state.settings.log_level)
    logger.info("Application startup: logging configured")

    services: ServiceContainer = app.state.services
    try:
        await services.startup()
        logger.info("Application startup complete: all resources initialized")
    except Exception as e:
        logger.exception(
            "Failed to initialize application resources",
            extra={"error": str(e)},
        )
        await services.shutdown()
        raise

    yield

    # Shutdown
    await services.shutdown()
    logger.info("Application shutdown")


def _mount_client_bundle(app: FastAPI, dist_dir: str) -> None:
    """Serve the pre-built client with index.html as the fallback route."""
    dist = Path(dist_dir).resolve()
    index = dist / "index.html"
    assets = dist / "assets"
    if assets.is_dir():
        app.mount("/assets", StaticFiles(directory=assets), name="assets")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_client(full_path: str) -> FileResponse:
        if full_path == "api" or full_path.startswith(API_PREFIX):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
        candidate = (dist / full_path).resolve()
        if full_path and candidate.is_file() and candidate.is_relative_to(dist):
            return FileResponse(candidate)
        return FileResponse(index)

    logger.info("Serving client bundle", extra={"dist_dir": str(dist)})


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Optional settings override, defaults to ``get_settings()``

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="TalentIQ API",
        description="Collaborative coding interview sessions with video, chat and code runs",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.services = ServiceContainer(settings)

    # Add observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(SessionMiddleware, secret_key=settings.secret_key)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.client_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Register API routes
    app.include_router(api_router, prefix="/api")
    if settings.is_production and not settings.inngest.signing_key:
        # Startup validation rejects this configuration with a logged error
        logger.warning("Identity sync endpoint not mounted: INNGEST_SIGNING_KEY is unset")
    else:
        serve_identity_sync(app, settings, lambda: app.state.services.identity_sync)

    if settings.is_production:
        _mount_client_bundle(app, settings.client_dist_dir)

    return app


app = create_app()


def run() -> None:
    """Console entry point."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "talentiq.main:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
