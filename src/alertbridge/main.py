from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from alertbridge import __version__
from alertbridge.api.v1 import notifications, settings
from alertbridge.database import close_db, init_db
from alertbridge.utils.logging import get_logger, setup_logging

# Setup logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan events.

    Handles startup and shutdown tasks.
    """
    logger.info("application_startup")

    await init_db()

    yield

    await close_db()
    logger.info("application_shutdown")


app = FastAPI(
    title="Alertbridge API",
    description="Chat webhook notifications for monitor state changes",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(
    notifications.router,
    prefix="/api/v1/notifications",
    tags=["notifications"],
)
app.include_router(
    settings.router,
    prefix="/api/v1/settings",
    tags=["settings"],
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
