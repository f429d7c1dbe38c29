"""Application lifespan: startup and shutdown.

Single place for startup/shutdown logic. Used by main.py; no business
logic here, only logging setup and DB engine disposal.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from profile_api.core.logging import setup_logging
from profile_api.infrastructure.persistence.database import dispose_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging, yield, then dispose the SQL engine (if it was created)."""
    setup_logging()
    logger.info("%s %s starting", app.title, app.version)

    yield

    await dispose_engine()
