"""Employee Cards API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map EmployeeCardError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Startup order: settings → logging → database (+ schema) → catalog defaults
      and record mirror

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Static front-end mounted last so /api/v1/* takes precedence
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from employee_cards.api.dependencies import init_catalog
from employee_cards.api.error_handlers import register_error_handlers
from employee_cards.api.routes import cards, employees, forms, health
from employee_cards.config import get_settings
from employee_cards.infrastructure.catalog_loader import load_catalog_defaults
from employee_cards.infrastructure.database import init_db
from employee_cards.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.auto_create_schema:
        await manager.create_schema()
    init_catalog(load_catalog_defaults(settings))
    logger.info("Employee cards API started")
    yield
    await manager.dispose()
    logger.info("Employee cards API shutting down")


app = FastAPI(
    title="Employee Cards API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(employees.router)
app.include_router(cards.router)
app.include_router(forms.router)

register_error_handlers(app)

# Static files — serves the browser pages (form, dashboard, card) when built
if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")
