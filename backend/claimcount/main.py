"""Claim Count API — FastAPI application entry point.

Invariants:
    - Routers and error handlers registered explicitly here
    - CORS origins come from settings
    - The lifespan configures logging, opens the claim database and disposes it on shutdown
    - Lifespan and middleware read the one Settings passed to create_app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import claimcount.infrastructure.database as database
from claimcount.api.error_handlers import register_error_handlers
from claimcount.api.routes import claim_counts, health
from claimcount.config import Settings, get_settings
from claimcount.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    manager = database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Claim Count API started")
    try:
        yield
    finally:
        await manager.dispose()
        logger.info("Claim Count API stopped")


def create_app(settings: Settings) -> FastAPI:
    application = FastAPI(
        title="Claim Count API", version=health.SERVICE_VERSION, lifespan=lifespan,
    )
    application.state.settings = settings
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    application.include_router(health.router)
    application.include_router(claim_counts.router)
    register_error_handlers(application)
    return application


app = create_app(get_settings())
