"""In-memory storage for library records."""

from __future__ import annotations

import dataclasses
from datetime import date
from typing import Dict, Generic, List, Optional, Protocol, TypeVar

from .entities import Book, Transaction, User


class RepositoryError(Exception):
    """Base class for storage errors."""

    message = "repository error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class NotFoundError(RepositoryError):
    message = "entity not found"


class AlreadyExistsError(RepositoryError):
    message = "entity already exists"


class BookAlreadyAvailableError(RepositoryError):
    message = "book is already available"


class BookNotAvailableError(RepositoryError):
    message = "book is not available"


class BookAlreadyReturnedError(RepositoryError):
    message = "book has already been returned"


class _HasId(Protocol):
    @property
    def id(self) -> str: ...


T = TypeVar("T", bound=_HasId)


class InMemoryRepository(Generic[T]):
    """A dictionary of entities keyed by their id."""

    def __init__(self) -> None:
        self._items: Dict[str, T] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, id: object) -> bool:
        return id in self._items

    def get(self, id: str) -> T:
        try:
            return self._items[id]
        except KeyError:
            raise NotFoundError() from None

    def create(self, entity: T) -> None:
        if entity.id in self._items:
            raise AlreadyExistsError()
        self._items[entity.id] = entity

    def update(self, entity: T) -> None:
        if entity.id not in self._items:
            raise NotFoundError()
        self._items[entity.id] = entity

    def delete(self, id: str) -> None:
        if id not in self._items:
            raise NotFoundError()
        del self._items[id]

    def all(self) -> List[T]:
        return list(self._items.values())


class BookRepository(InMemoryRepository[Book]):
    def find_by_title(self, title: str) -> List[Book]:
        return [book for book in self._items.values() if book.title == title]

    def borrow(self, id: str) -> Book:
        """Mark a book as lent out and return its new state."""
        book = self.get(id)
        if not book.is_available:
            raise BookNotAvailableError()
        borrowed = dataclasses.replace(book, is_available=False)
        self.update(borrowed)
        return borrowed


class UserRepository(InMemoryRepository[User]):
    def find_by_email(self, email: str) -> List[User]:
        return [user for user in self._items.values() if user.email == email]


class TransactionRepository(InMemoryRepository[Transaction]):
    def return_book(self, id: str, on: Optional[date] = None) -> Transaction:
        """Stamp a transaction with its return date (today by default)."""
        transaction = self.get(id)
        if transaction.return_date != "":
            raise BookAlreadyReturnedError()
        when = on if on is not None else date.today()
        returned = dataclasses.replace(
            transaction, return_date=when.strftime("%Y-%m-%d")
        )
        self.update(returned)
        return returned