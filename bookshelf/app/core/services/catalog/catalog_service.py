"""Book catalog operations."""

from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session

from bookshelf.app.core.errors import (
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from bookshelf.app.core.models.book import AddBookRequest
from bookshelf.app.core.security import parse_entity_id
from bookshelf.app.entities.service.book import Book, BookRepository

DUPLICATE_ISBN_MESSAGE = "A book with this ISBN already exists in the library"


class CatalogService:
    def __init__(self, session: Session):
        self._session = session
        self._repository = BookRepository(session)

    def add_book(self, request: AddBookRequest) -> Book:
        """Add a book to the catalog.

        Raises:
            ValidationError: If any of the four fields is missing
            ConflictError: If a book with the same ISBN exists
        """
        if (
            not request.title
            or not request.author
            or not request.isbn
            or request.publication_year is None
        ):
            raise ValidationError(
                "Please provide all required fields: title, author, ISBN, and publication year"
            )

        try:
            if self._repository.get_by_isbn(request.isbn) is not None:
                raise ConflictError(DUPLICATE_ISBN_MESSAGE)

            book = self._repository.create(
                Book(
                    title=request.title,
                    author=request.author,
                    isbn=request.isbn,
                    publication_year=request.publication_year,
                )
            )
            self._session.commit()
        except IntegrityError as e:
            self._session.rollback()
            logger.info("Book rejected by unique index for isbn {}", request.isbn)
            raise ConflictError(DUPLICATE_ISBN_MESSAGE) from e
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error("Failed to add book: {}", e)
            raise InternalError("Failed to add book. Please try again later.") from e

        logger.info("book.added", book_id=book.id, isbn=book.isbn)
        return book

    def list_books(self) -> list[Book]:
        """List every book, newest first."""
        try:
            return self._repository.list_all()
        except SQLAlchemyError as e:
            logger.error("Failed to list books: {}", e)
            raise InternalError("Failed to retrieve books. Please try again later.") from e

    def delete_book(self, book_id: str) -> None:
        normalized_id = parse_entity_id(book_id)
        if normalized_id is None:
            raise NotFoundError("Invalid book ID provided")

        try:
            if not self._repository.delete(normalized_id):
                raise NotFoundError("Book not found. It may have already been deleted.")
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error("Failed to delete book {}: {}", normalized_id, e)
            raise InternalError("Failed to delete book. Please try again later.") from e

        logger.info("book.deleted", book_id=normalized_id)
