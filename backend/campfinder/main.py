"""Campfinder API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CampfinderError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager
    - Every /api/ response carries the security headers below

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Static frontend mounted AFTER API routes so /api/v1/* takes precedence
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from campfinder.api.error_handlers import register_error_handlers
from campfinder.api.routes import (
    admin_access, admin_campsites, auth, campsites, health,
)
from campfinder.config import get_settings
from campfinder.infrastructure.database import close_db, init_db
from campfinder.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "X-XSS-Protection": "1; mode=block",
}


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
    logger.info("Campfinder API started")
    yield
    logger.info("Campfinder API shutting down")
    await close_db()


app = FastAPI(
    title="Campfinder API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    if request.url.path.startswith("/api/"):
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
    return response


register_error_handlers(app)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(campsites.router)
app.include_router(admin_campsites.router)
app.include_router(admin_access.router)
app.include_router(auth.router)

# html=True enables SPA fallback (serves index.html for unknown routes)
if os.path.isdir(settings.static_dir):
    app.mount(
        "/", StaticFiles(directory=settings.static_dir, html=True), name="static",
    )
