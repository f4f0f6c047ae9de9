"""Library records: books, users and borrowing transactions."""

from __future__ import annotations

import uuid
from dataclasses import dataclass


def new_id() -> str:
    """Return a fresh random identifier in canonical UUID form."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Book:
    id: str
    title: str
    author: str
    is_available: bool = True


@dataclass(frozen=True)
class Transaction:
    id: str
    book_id: str
    user_id: str
    borrow_date: str
    return_date: str = ""


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str


def new_book(title: str, author: str) -> Book:
    """Create an available book with a new identifier."""
    return Book(id=new_id(), title=title, author=author, is_available=True)


def new_transaction(
    book_id: str, user_id: str, borrow_date: str, return_date: str
) -> Transaction:
    """Create a transaction with a new identifier."""
    return Transaction(
        id=new_id(),
        book_id=book_id,
        user_id=user_id,
        borrow_date=borrow_date,
        return_date=return_date,
    )


def new_user(name: str, email: str) -> User:
    """Create a user with a new identifier."""
    return User(id=new_id(), name=name, email=email)