"""Book catalog API router."""

from typing import Any

from fastapi import APIRouter, Depends, status

from bookshelf.app.api.http.deps import get_catalog_service
from bookshelf.app.core.models.book import AddBookRequest
from bookshelf.app.core.services import CatalogService

router = APIRouter(prefix="/books", tags=["books"])


@router.post("", status_code=status.HTTP_201_CREATED)
def add_book(
    payload: AddBookRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> dict[str, Any]:
    """Add a book to the catalog."""
    book = service.add_book(payload)
    return {
        "msg": "Book added successfully",
        "book": book.model_dump(mode="json", by_alias=True),
    }


@router.get("")
def list_books(
    service: CatalogService = Depends(get_catalog_service),
) -> list[dict[str, Any]]:
    """List all books, newest first."""
    return [book.model_dump(mode="json", by_alias=True) for book in service.list_books()]


@router.delete("/{book_id}")
def delete_book(
    book_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> dict[str, str]:
    """Delete a book."""
    service.delete_book(book_id)
    return {"msg": "Book deleted successfully"}
