from .db_manage import create_all
from .db_session import DbSessionService

__all__ = ["DbSessionService", "create_all"]
