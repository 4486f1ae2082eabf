"""Entry point for the FastAPI application.

This module constructs the FastAPI app, creates the receipt store the
routes share, includes the routers and registers the exception
handlers.  Run it with uvicorn (``python -m receipt_processor``) or
build an isolated instance with :func:`create_app` in tests.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from receipt_processor.api.error_handlers import (
    generic_exception_handler,
    http_exception_handler,
    identifier_generation_exception_handler,
    validation_exception_handler,
)
from receipt_processor.api.routes.receipts import router as receipts_router
from receipt_processor.core.config import settings
from receipt_processor.core.exceptions import IdentifierGenerationError
from receipt_processor.core.observability import configure_logging, init_sentry
from receipt_processor.services.receipt_store import ReceiptStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    # Startup
    logger.info("Starting up...")
    if init_sentry("api"):
        logger.info("Sentry SDK initialized (api)")
    yield
    # Shutdown
    logger.info("Shutting down... %d receipts held in memory", len(app.state.receipt_store))


def create_app(store: Optional[ReceiptStore] = None) -> FastAPI:
    """Build the application around ``store`` (a fresh one by default)."""
    configure_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.receipt_store = store if store is not None else ReceiptStore()

    # Register custom exception handlers
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(IdentifierGenerationError, identifier_generation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # Include routers
    app.include_router(receipts_router)
    return app


app = create_app()
