"""Database engine and session factory used across the application."""

from typing import Any

from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, create_engine

from bookshelf.app.runtime.config.config_data import ConfigData
from bookshelf.app.runtime.context import get_config


def engine_options(config: ConfigData) -> dict[str, Any]:
    """Keyword arguments for ``create_engine`` suited to the configured backend."""
    db = config.database
    if db.is_sqlite:
        if config.app.environment == "production":
            logger.warning("SQLite is not recommended for production use")
        # Request sessions are used from FastAPI's threadpool workers
        return {"connect_args": {"check_same_thread": False, "timeout": 20}}

    options: dict[str, Any] = {
        "pool_size": db.pool_size,
        "max_overflow": db.max_overflow,
        "pool_timeout": db.pool_timeout,
        "pool_recycle": db.pool_recycle,
        "pool_pre_ping": True,
    }
    if db.url.startswith("postgresql"):
        options["connect_args"] = {
            "application_name": f"bookshelf_{config.app.environment}",
            "connect_timeout": 30,
        }
    return options


class DbSessionService:
    """Owns the shared engine and hands out sessions bound to it."""

    def __init__(self, engine: Engine | None = None):
        """
        Args:
            engine: Pre-built engine to use instead of one derived from the
                active configuration
        """
        if engine is None:
            config = get_config()
            logger.info(
                "Initializing database engine for environment: {}",
                config.app.environment,
            )
            engine = create_engine(
                config.database.connection_string, echo=False, **engine_options(config)
            )
        self._engine = engine

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        return Session(self._engine, expire_on_commit=False)

    def health_check(self) -> bool:
        """Return True if a trivial query round-trips to the database."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error(
                "Database health check failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False
        return True

    def dispose(self) -> None:
        self._engine.dispose()
