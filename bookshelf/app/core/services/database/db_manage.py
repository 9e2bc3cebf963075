"""Schema management for the application's tables."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel


def create_all(engine: Engine) -> None:
    """Create the accounts and books tables (idempotent)."""
    from bookshelf.app.entities.core.account import AccountTable  # noqa: F401
    from bookshelf.app.entities.service.book import BookTable  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.info("Database initialized with tables.")
