from typing import Any

from authlib.jose import jwt


def decode_unverified(token: str, secret: str) -> dict[str, Any]:
    """Decode a token's claims without validating them."""
    return dict(jwt.decode(token, secret))


def register_payload(
    name: str = "Ann", email: str = "ann@x.com", password: str = "secret1"
) -> dict[str, str]:
    return {"name": name, "email": email, "password": password}


def book_payload(
    title: str = "Dune",
    author: str = "Herbert",
    isbn: str = "9780441013593",
    publication_year: int = 1965,
) -> dict[str, Any]:
    return {
        "title": title,
        "author": author,
        "isbn": isbn,
        "publicationYear": publication_year,
    }
