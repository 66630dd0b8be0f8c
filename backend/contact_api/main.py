"""Contact API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Store and service wired once per app in lifespan, by constructor injection
    - Global error handlers map ContactApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - app.state holds the wiring: no DI container, no ambient lookup in services
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contact_api.api.error_handlers import register_error_handlers
from contact_api.api.routes import contacts, health
from contact_api.config import get_settings
from contact_api.infrastructure.memory_store import InMemoryContactRepository
from contact_api.infrastructure.observability import setup_logging
from contact_api.services.contact_service import ContactService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    store = InMemoryContactRepository()
    app.state.contact_store = store
    app.state.contact_service = ContactService(store)
    logger.info("Contact API started")
    yield
    logger.info("Contact API shutting down")


settings = get_settings()
app = FastAPI(
    title=settings.app_name, version=settings.app_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(contacts.router)

register_error_handlers(app)
