# Standard library imports
import logging
from typing import Optional

# External package imports
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

# Local application imports
from ...core.config import get_settings
from .models import Base

logger = logging.getLogger(__name__)

# Global engine and session factory (singleton pattern)
_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def get_engine() -> AsyncEngine:
    """
    Get the async SQLAlchemy engine (singleton pattern)
    
    Returns:
        AsyncEngine bound to settings.database_url
    """
    global _engine
    
    if _engine is not None:
        return _engine
    
    settings = get_settings()
    _engine = create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,  # Check connections before using them
        hide_parameters=True,  # Keep password digests out of error text and logs
    )
    logger.info(f"Database engine created for {_engine.url.render_as_string(hide_password=True)}")
    return _engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Build a session factory for an engine
    
    Objects stay readable after commit so repositories can map rows
    to domain models once the transaction has closed.
    """
    return async_sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Get the session factory for the global engine (singleton pattern)
    
    Returns:
        async_sessionmaker producing AsyncSession instances
    """
    global _session_factory
    
    if _session_factory is None:
        _session_factory = create_session_factory(get_engine())
    return _session_factory


async def init_models(engine: Optional[AsyncEngine] = None) -> None:
    """Create all tables that do not exist yet"""
    engine = engine if engine is not None else get_engine()
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
    logger.info("Database tables created")


async def dispose_engine() -> None:
    """Close pooled connections and forget the global engine and session factory"""
    global _engine, _session_factory
    
    if _engine is not None:
        await _engine.dispose()
        logger.info("Database engine disposed")
    _engine = None
    _session_factory = None
