"""Chart API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CyanvasError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database, cache and static assets initialized on startup via lifespan
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import cyanvas.infrastructure.cache as cache_module
import cyanvas.infrastructure.database as db_module
from cyanvas.api.error_handlers import register_error_handlers
from cyanvas.api.routes import charts, health, sonolus
from cyanvas.config import get_settings
from cyanvas.infrastructure.asset_registry import init_assets
from cyanvas.infrastructure.cache import init_cache
from cyanvas.infrastructure.database import init_db
from cyanvas.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    init_cache()
    init_assets(settings.asset_root)
    logger.info("Chart API started")
    yield
    logger.info("Chart API shutting down")
    if cache_module.cache:
        cache_module.cache.close()
    if db_module.db_manager:
        await db_module.db_manager.dispose()


app = FastAPI(
    title="Cyanvas Chart API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(charts.router)
app.include_router(sonolus.router)

register_error_handlers(app)
