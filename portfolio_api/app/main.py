"""
Main entrypoint for the portfolio API.

This module assembles the FastAPI application: logging, CORS, error
handlers, the versioned routers and the operational endpoints.
``create_app`` builds a configured instance, and one is created at
import time as ``app`` so an ASGI server can find it::

    uvicorn portfolio_api.app.main:app --reload

Pending database migrations are applied when the application starts.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.actuator import router as actuator_router
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.exceptions import catch_unexpected_exceptions, register_exception_handlers
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Creates the database file on first start and brings the schema up to date.
    init_db()
    if not settings.jwt_secret:
        logger.warning("JWT_SECRET is not set; every write request will be rejected with 401")
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first, so that everything below can log.
    setup_logging(settings.log_level, logfile=settings.log_file, debug=settings.debug)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Middleware added later wraps middleware added earlier.
    app.middleware("http")(catch_unexpected_exceptions)

    # Browser clients of the portfolio site.  Preflight answers are
    # cacheable for ``cors_max_age`` seconds.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=settings.cors_methods,
        allow_headers=["*"],
        max_age=settings.cors_max_age,
    )

    register_exception_handlers(app)

    app.include_router(v1_router, prefix="/api/v1")
    app.include_router(actuator_router, prefix="/actuator", tags=["actuator"])

    return app


app = create_app()
