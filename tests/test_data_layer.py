"""Data layer tests.

Covers the Account and Book entities, their table mappings and the
repositories, using in-memory SQLite for real database behaviour.
"""

from datetime import UTC, datetime

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from bookshelf.app.entities.core.account import (
    Account,
    AccountRepository,
    AccountTable,
)
from bookshelf.app.entities.service.book import Book, BookRepository, BookTable


class TestAccountEntity:
    """Test Account domain entity."""

    def test_account_creation(self):
        account = Account(name="Ann", email="ann@x.com", password_hash="hash")

        assert account.name == "Ann"
        assert account.email == "ann@x.com"
        assert account.id is not None  # Auto-generated
        assert account.created_at is not None
        assert account.updated_at is not None

    def test_password_hash_never_serialized(self):
        """The hash must not leak through dumps or repr."""
        account = Account(name="Ann", email="ann@x.com", password_hash="$2b$10$abc")

        assert "password_hash" not in account.model_dump()
        assert "$2b$10$abc" not in account.model_dump_json()
        assert "$2b$10$abc" not in repr(account)

    def test_account_equality_ignores_timestamps(self):
        account1 = Account(id="1", name="Ann", email="ann@x.com", password_hash="a")
        account2 = Account(id="1", name="Ann", email="ann@x.com", password_hash="b")
        account3 = Account(id="2", name="Ann", email="ann@x.com", password_hash="a")

        assert account1 == account2
        assert hash(account1) == hash(account2)
        assert account1 != account3
        assert account1 != "not an account"


class TestBookEntity:
    """Test Book domain entity."""

    def test_book_serializes_camel_case(self):
        book = Book(title="Dune", author="Herbert", isbn="1", publication_year=1965)

        data = book.model_dump(mode="json", by_alias=True)
        assert data["publicationYear"] == 1965
        assert {"id", "title", "author", "isbn", "createdAt", "updatedAt"} <= data.keys()

    def test_book_accepts_alias_and_field_name(self):
        by_alias = Book.model_validate(
            {"title": "Dune", "author": "Herbert", "isbn": "1", "publicationYear": 1965}
        )
        by_name = Book(title="Dune", author="Herbert", isbn="1", publication_year=1965)

        assert by_alias.publication_year == by_name.publication_year == 1965

    def test_book_equality(self):
        book1 = Book(id="b", title="Dune", author="Herbert", isbn="1", publication_year=1965)
        book2 = Book(id="b", title="Dune", author="Herbert", isbn="1", publication_year=1965)

        assert book1 == book2
        assert len({book1, book2}) == 1


class TestAccountRepository:
    """Test AccountRepository against a real database."""

    def test_create_and_get(self, session: Session):
        repo = AccountRepository(session)
        created = repo.create(Account(name="Ann", email="ann@x.com", password_hash="h"))
        session.commit()

        fetched = repo.get(created.id)
        assert fetched == created
        assert fetched.password_hash == "h"

    def test_get_missing_returns_none(self, session: Session):
        assert AccountRepository(session).get("missing") is None

    def test_get_by_email(self, session: Session, account_factory):
        account = account_factory()
        repo = AccountRepository(session)

        assert repo.get_by_email("ann@x.com") == account
        assert repo.get_by_email("bob@x.com") is None

    def test_email_taken_by_other(self, session: Session, account_factory):
        ann = account_factory()
        bob = account_factory(name="Bob", email="bob@x.com")
        repo = AccountRepository(session)

        assert repo.email_taken_by_other("ann@x.com", bob.id) is True
        assert repo.email_taken_by_other("ann@x.com", ann.id) is False
        assert repo.email_taken_by_other("new@x.com", ann.id) is False

    def test_list_all_in_creation_order(self, session: Session, account_factory):
        ann = account_factory()
        bob = account_factory(name="Bob", email="bob@x.com")

        assert [a.id for a in AccountRepository(session).list_all()] == [ann.id, bob.id]

    def test_update(self, session: Session, account_factory):
        account = account_factory()
        repo = AccountRepository(session)

        account.name = "Annie"
        updated = repo.update(account)
        session.commit()

        assert updated.name == "Annie"
        assert repo.get(account.id).name == "Annie"

    def test_update_missing_returns_none(self, session: Session):
        repo = AccountRepository(session)
        assert repo.update(Account(name="Ghost", email="g@x.com", password_hash="h")) is None

    def test_delete(self, session: Session, account_factory):
        account = account_factory()
        repo = AccountRepository(session)

        assert repo.delete(account.id) is True
        session.commit()
        assert repo.get(account.id) is None
        assert repo.delete(account.id) is False

    def test_unique_email_index(self, session: Session, account_factory):
        account_factory()
        session.add(AccountTable(name="Other", email="ann@x.com", password_hash="h"))

        with pytest.raises(IntegrityError):
            session.flush()


class TestBookRepository:
    """Test BookRepository against a real database."""

    def test_create_persists_all_fields(self, session: Session):
        repo = BookRepository(session)
        created = repo.create(
            Book(title="Dune", author="Herbert", isbn="9780441013593", publication_year=1965)
        )
        session.commit()

        row = session.exec(select(BookTable).where(BookTable.id == created.id)).one()
        assert row.title == "Dune"
        assert row.publication_year == 1965

    def test_get_by_isbn(self, session: Session, book_factory):
        book = book_factory()
        repo = BookRepository(session)

        assert repo.get_by_isbn("9780441013593") == book
        assert repo.get_by_isbn("0000000000") is None

    def test_list_all_newest_first(self, session: Session, book_factory):
        first = book_factory()
        second = book_factory(title="Emma", author="Austen", isbn="9780141439587", publication_year=1815)

        assert [b.id for b in BookRepository(session).list_all()] == [second.id, first.id]

    def test_same_timestamp_orders_by_id(self, session: Session):
        repo = BookRepository(session)
        stamp = datetime(2024, 1, 1, tzinfo=UTC)
        for isbn in ("111", "222", "333"):
            repo.create(
                Book(title=isbn, author="A", isbn=isbn, publication_year=2000, created_at=stamp)
            )
        session.commit()

        ids = [b.id for b in repo.list_all()]

        assert ids == sorted(ids, reverse=True)

    def test_delete(self, session: Session, book_factory):
        book = book_factory()
        repo = BookRepository(session)

        assert repo.delete(book.id) is True
        session.commit()
        assert repo.get(book.id) is None
        assert repo.delete(book.id) is False

    def test_unique_isbn_index(self, session: Session, book_factory):
        book_factory()
        session.add(BookTable(title="Copy", author="X", isbn="9780441013593", publication_year=2000))

        with pytest.raises(IntegrityError):
            session.flush()
