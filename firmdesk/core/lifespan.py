"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: logging, the upload directory and
the SQL engine. No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from fastapi import FastAPI

from firmdesk.core.config import get_settings
from firmdesk.infrastructure.persistence.database import dispose_engine
from firmdesk.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit dispose the engine."""
    settings = get_settings()
    setup_logging()

    storage_root = Path(settings.storage_root).resolve()
    storage_root.mkdir(parents=True, exist_ok=True, mode=0o750)
    logger.info(
        "%s %s starting (storage at %s)",
        settings.app_name,
        settings.app_version,
        storage_root,
    )

    yield

    await dispose_engine()
    logger.info("SQL engine disposed")
