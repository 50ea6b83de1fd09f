from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import APIRouter, FastAPI

from scheduling_api.api.errors import register_exception_handlers
from scheduling_api.api.middleware import request_context_middleware
from scheduling_api.api.routes.clients import router as clients_router
from scheduling_api.core.logging import configure_logging
from scheduling_api.core.settings import get_app_settings
from scheduling_api.db import run_migrations
from scheduling_api.db.seed import seed_all
from scheduling_api.schemas.common import MessageResponse

settings = get_app_settings()
configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Prepare the database before serving.

    A failing migration or seed is logged and the service still starts, so the health
    probe stays reachable while the database recovers.
    """
    startup = get_app_settings()
    if startup.RUN_MIGRATIONS_ON_STARTUP:
        try:
            # migrations/env.py runs its own event loop
            await asyncio.to_thread(run_migrations.upgrade)
        except Exception:
            logger.exception("Database migration failed")
    if startup.AUTO_SEED:
        try:
            await seed_all()
        except Exception:
            logger.exception("Database seeding failed")
    yield


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    openapi_tags=[
        {"name": "Health", "description": "Liveness probe."},
        {"name": "Clients", "description": "Tenant-scoped client records."},
    ],
    lifespan=lifespan,
)
app.middleware("http")(request_context_middleware)
register_exception_handlers(app)

api = APIRouter(prefix="/api")


# PUBLIC_INTERFACE
@api.get("/health", response_model=MessageResponse, summary="Health Check", tags=["Health"])
def health_check() -> MessageResponse:
    """Liveness check; needs neither a token nor the database."""
    return MessageResponse(message="Healthy")


api.include_router(clients_router)
app.include_router(api)
