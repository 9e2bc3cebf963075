"""Bookshelf API.

Account registration and login with bcrypt credentials and JWT session
tokens, plus a catalog of books, served over FastAPI.
"""

__version__ = "1.0.0"
