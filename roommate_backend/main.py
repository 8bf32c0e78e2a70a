# Standard library imports
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

# Local application imports
from .core.logger import setup_logger
from .di import DIContainer, get_container, reset_container
from .infrastructure.db.database import dispose_engine, init_models

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan() -> AsyncIterator[DIContainer]:
    """
    Lifespan context manager for startup/shutdown.
    
    Configures logging, creates the database schema if needed and yields
    the wired DI container. On exit, or if startup fails, the engine's
    pooled connections are closed and the container is dropped.
    """
    try:
        setup_logger()
        await init_models()
        container = get_container()
        logger.info("User store ready")
        yield container
    finally:
        await dispose_engine()
        reset_container()
        logger.info("Application shutdown complete")
