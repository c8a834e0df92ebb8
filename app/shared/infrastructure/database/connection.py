# 📄 File: app/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to our database, making sure Leaflings can talk to its data storage
# and that the tables for people, plants, diaries, ads and payments exist.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy engine management with connection pooling for server databases,
# SQLite foreign-key enforcement, schema creation, health checks and the shared declarative Base.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine, declarative base)
# - aiosqlite / asyncpg (async drivers selected by DATABASE_URL)
# - app/shared/config/settings.py (database configuration)
#
# 🔄 Connected Modules / Calls From:
# - app/shared/infrastructure/database/session.py (session management)
# - All module ORM models (Base)
# - app/main.py lifespan, app/api/v1/health.py

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base

from app.shared.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

Base = declarative_base()


class DatabaseConnectionManager:
    """
    Owns the async engine: creation, schema bootstrap, health checks and disposal.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._engine: Optional[AsyncEngine] = None
        self._health_check_query = text("SELECT 1")
        self._retry_attempts = 3
        self._retry_delay = 0.5

    def _build_connection_params(self, url: str) -> Dict[str, Any]:
        """Build SQLAlchemy engine parameters for the configured backend."""
        params: Dict[str, Any] = {
            "url": url,
            "echo": self._settings.DB_ECHO,
            "pool_pre_ping": True,
        }
        if not url.startswith("sqlite"):
            params.update(
                pool_size=self._settings.DB_POOL_SIZE,
                max_overflow=self._settings.DB_MAX_OVERFLOW,
                pool_recycle=self._settings.DB_POOL_RECYCLE,
            )
        return params

    async def initialize(self, url: Optional[str] = None) -> None:
        """Create the engine. Safe to call twice."""
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        url = url or self._settings.DATABASE_URL
        logger.info("Initializing database engine...")
        self._engine = create_async_engine(**self._build_connection_params(url))
        if url.startswith("sqlite"):
            register_sqlite_pragmas(self._engine)
        logger.info(f"Database engine ready ({self._engine.url.get_backend_name()})")

    async def create_tables(self) -> None:
        """Create every table registered on ``Base`` that does not exist yet."""
        if self._engine is None:
            raise RuntimeError("Database engine not initialized")

        import_all_models()
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    async def health_check(self) -> Dict[str, Any]:
        """
        Perform database health check and return structured status.
        """
        if self._engine is None:
            return {
                "status": "unhealthy",
                "error": "Database engine not initialized",
                "timestamp": datetime.now(timezone.utc).isoformat()
            }

        for attempt in range(self._retry_attempts):
            try:
                async with self._engine.connect() as conn:
                    await conn.execute(self._health_check_query)
                return {
                    "status": "healthy",
                    "timestamp": datetime.now(timezone.utc).isoformat()
                }
            except Exception as e:
                logger.warning(
                    f"Database health check failed (attempt {attempt + 1}/{self._retry_attempts}): {e}"
                )
                if attempt < self._retry_attempts - 1:
                    await asyncio.sleep(self._retry_delay * (2 ** attempt))

        logger.error("Database health check failed after all retry attempts")
        return {
            "status": "unhealthy",
            "error": "Database health check failed after all retry attempts",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    async def close(self) -> None:
        """Close database engine and all connections."""
        if self._engine is None:
            logger.warning("Database engine not initialized, nothing to close")
            return
        await self._engine.dispose()
        self._engine = None
        logger.info("Database engine disposed")

    @property
    def engine(self) -> Optional[AsyncEngine]:
        """Get the SQLAlchemy async engine."""
        return self._engine

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None


def register_sqlite_pragmas(engine: AsyncEngine) -> None:
    """Turn on foreign key enforcement for every new SQLite connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def import_all_models() -> None:
    """Import every module's ORM models so they register on ``Base.metadata``."""
    from app.modules.user_management.infrastructure.database import models as _users  # noqa: F401
    from app.modules.plant_catalog.infrastructure.database import models as _catalog  # noqa: F401
    from app.modules.plant_journal.infrastructure.database import models as _journal  # noqa: F401
    from app.modules.advertising.infrastructure.database import models as _ads  # noqa: F401
    from app.modules.payments.infrastructure.database import models as _payments  # noqa: F401


# Global database connection manager instance
db_manager = DatabaseConnectionManager()


async def init_database(create_tables: Optional[bool] = None) -> None:
    """Initialize the global engine and, if configured, the schema."""
    await db_manager.initialize()
    should_create = get_settings().DB_CREATE_TABLES if create_tables is None else create_tables
    if should_create:
        await db_manager.create_tables()


async def close_database() -> None:
    """Close the global database connection manager."""
    await db_manager.close()


def get_database_engine() -> AsyncEngine:
    """
    Get the database engine instance.

    Raises:
        RuntimeError: If database is not initialized
    """
    if not db_manager.is_initialized:
        raise RuntimeError("Database not initialized. Call init_database() first.")
    return db_manager.engine


async def database_health_check() -> Dict[str, Any]:
    return await db_manager.health_check()
