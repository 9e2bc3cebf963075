"""Entities module with hybrid entity-centric structure.

This module organizes entities by business concept rather than technical layer.
Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer

Accounts and books are independent collections; neither references the other.
"""

from .core.account import Account, AccountRepository, AccountTable
from .service.book import Book, BookRepository, BookTable

__all__ = [
    "Account",
    "AccountTable",
    "AccountRepository",
    "Book",
    "BookTable",
    "BookRepository",
]
