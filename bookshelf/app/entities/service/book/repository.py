"""Book repository for data access operations."""

from sqlmodel import Session, col, select

from .entity import Book
from .table import BookTable


class BookRepository:
    """Data-access layer for catalog books."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, book_id: str) -> Book | None:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return None
        return Book.model_validate(row, from_attributes=True)

    def get_by_isbn(self, isbn: str) -> Book | None:
        statement = select(BookTable).where(BookTable.isbn == isbn)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return Book.model_validate(row, from_attributes=True)

    def list_all(self) -> list[Book]:
        """List every book, newest first; ties on created_at break on id."""
        statement = select(BookTable).order_by(
            col(BookTable.created_at).desc(), col(BookTable.id).desc()
        )
        rows = self._session.exec(statement).all()
        return [Book.model_validate(row, from_attributes=True) for row in rows]

    def create(self, book: Book) -> Book:
        row = BookTable(
            id=book.id,
            title=book.title,
            author=book.author,
            isbn=book.isbn,
            publication_year=book.publication_year,
            created_at=book.created_at,
            updated_at=book.updated_at,
        )
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Book.model_validate(row, from_attributes=True)

    def delete(self, book_id: str) -> bool:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True
