# prompthub/models/base.py
"""
SQLAlchemy Base and async engine/session management
"""

from datetime import datetime, timezone
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from prompthub.config import settings
from prompthub.utils.logger import logger

# Base model
Base = declarative_base()

def utcnow() -> datetime:
    # Naive UTC, stored as-is by both MySQL and SQLite DATETIME columns
    return datetime.now(timezone.utc).replace(tzinfo=None)

_connect_args = {}
if settings.sqlalchemy_url.startswith("sqlite"):
    # Writers queue on the file lock instead of failing immediately
    _connect_args = {"timeout": 30}

# Async engine
engine = create_async_engine(
    settings.sqlalchemy_url,
    echo=settings.db_echo,
    pool_pre_ping=True,
    pool_recycle=3600,
    connect_args=_connect_args,
)

# Async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)

async def init_db():
    """Create tables (initial setup)."""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(" Database tables created")
    except Exception as e:
        logger.error(f" Table creation failed: {e}")
        raise

async def close_db():
    await engine.dispose()
    logger.info(" Database connections closed")
