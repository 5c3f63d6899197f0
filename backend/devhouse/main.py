"""DevHouse API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map DevHouseError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py to keep this module a wiring list
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import devhouse.infrastructure.database as db_module
from devhouse.api.error_handlers import register_error_handlers
from devhouse.api.routes import (
    auth, developers, health, project_types, projects, roles, teams,
)
from devhouse.config import get_settings
from devhouse.infrastructure.database import init_db
from devhouse.infrastructure.observability import setup_logging

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
    logger.info("DevHouse API started")
    yield
    if db_module.db_manager:
        await db_module.db_manager.dispose()
    logger.info("DevHouse API shutting down")


app = FastAPI(
    title="DevHouse API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(teams.router)
app.include_router(roles.router)
app.include_router(project_types.router)
app.include_router(developers.router)
app.include_router(projects.router)

register_error_handlers(app)
