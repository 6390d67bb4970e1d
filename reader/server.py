"""
Reader API Server

FastAPI application providing endpoints for:
- Article search, create, update and soft delete
- Feed registration
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from . import __version__
from .config import config, state
from .database import Database
from .routes import articles_router, feeds_router, misc_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize and cleanup application resources."""
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Startup - skip if already initialized (e.g., by tests)
    if state.db is None:
        state.db = Database(config.DB_PATH)
        logger.info(f"Database ready at {config.DB_PATH}")

    yield


app = FastAPI(
    title="Reader API",
    version=__version__,
    lifespan=lifespan
)

# Include routers
app.include_router(misc_router)
app.include_router(articles_router)
app.include_router(feeds_router)
