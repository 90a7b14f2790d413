"""FastAPI application entry point.

Creates the app, configures middleware, sets up Jinja2 templates, and
wires up routers.
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.templating import Jinja2Templates

from app.api.database import router as database_router
from app.api.health import router as health_router
from app.api.welcome import router as welcome_router
from app.config import settings
from app.db import mapper
from app.db.pool import CONNECTION_ERRORS, close_pool, init_pool
from app.middleware.security import SecurityHeadersMiddleware
from app.pages.welcome import router as pages_router

logger = logging.getLogger(__name__)


async def _open_pool() -> None:
    """Create the pool at startup without failing the process.

    When the database is unreachable the error is logged and the pool is
    created on the first request that needs a connection.
    """
    try:
        await init_pool(settings)
    except CONNECTION_ERRORS as exc:
        logger.warning("Database unavailable at startup, pool will be created on demand: %s", exc)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup and shutdown lifecycle."""
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("aiomysql").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    # Startup
    mapper.validate_statements()
    await _open_pool()
    logger.info("%s started", settings.APP_NAME)
    yield
    # Shutdown
    await close_pool()


app = FastAPI(
    title=settings.APP_NAME,
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.add_middleware(SecurityHeadersMiddleware)

# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------
_base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_templates_dir = os.path.join(_base_dir, "templates")

templates = Jinja2Templates(directory=_templates_dir)
app.state.templates = templates

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(health_router, tags=["health"])
app.include_router(database_router)
app.include_router(welcome_router, tags=["welcome"])
app.include_router(pages_router)
