"""Account entity module.

This module contains all Account-related classes organized by responsibility:
- Account: Domain entity (never exposes the password hash when serialized)
- AccountTable: Database persistence model
- AccountRepository: Data access layer
"""

from .entity import Account
from .repository import AccountRepository
from .table import AccountTable

__all__ = ["Account", "AccountTable", "AccountRepository"]
