from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from . import __version__
from .config import settings
from .infrastructure.logging import configure_logging
from .presentation.api.dependencies import close_clients
from .presentation.api.v1 import health, hormuud
from .presentation.middleware import CorrelationIdMiddleware

configure_logging(settings.service_name, debug=settings.debug)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(
        "Starting application",
        service=settings.service_name,
        channel_uuid=str(settings.channel_uuid) if settings.channel_uuid else None,
    )

    yield

    await close_clients()
    logger.info("Application shutdown complete")


app = FastAPI(
    title="Hormuud Courier",
    description="Send and receive SMS through the Hormuud API",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(CorrelationIdMiddleware)

app.include_router(health.router)
app.include_router(hormuud.router)


@app.get("/")
def root() -> dict:
    return {
        "service": settings.service_name,
        "version": __version__,
        "docs": "/docs",
    }
