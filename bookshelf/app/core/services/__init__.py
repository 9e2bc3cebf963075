from .account import AccountService
from .catalog import CatalogService
from .database import DbSessionService
from .jwt import JwtGeneratorService, JwtVerificationService

__all__ = [
    "AccountService",
    "CatalogService",
    "DbSessionService",
    "JwtGeneratorService",
    "JwtVerificationService",
]
