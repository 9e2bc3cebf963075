"""Database initialization script."""

from bookshelf.app.api.utils.app_startup import configure_logging
from bookshelf.app.core.services.database import DbSessionService, create_all


def init_db() -> None:
    """Create the accounts and books tables."""
    configure_logging()
    db_service = DbSessionService()
    try:
        create_all(db_service.engine)
    finally:
        db_service.dispose()


if __name__ == "__main__":
    init_db()
