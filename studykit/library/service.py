"""Library operations built on the record repositories."""

from __future__ import annotations

from datetime import date
from typing import List

from .entities import Book, Transaction, User, new_book, new_transaction, new_user
from .repository import BookRepository, TransactionRepository, UserRepository


class LibraryService:
    """Adds books and users, lends books out and takes them back."""

    def __init__(
        self,
        books: BookRepository,
        users: UserRepository,
        transactions: TransactionRepository,
    ) -> None:
        self.books = books
        self.users = users
        self.transactions = transactions

    def list_books(self) -> List[Book]:
        return self.books.all()

    def search_books_by_title(self, title: str) -> List[Book]:
        return self.books.find_by_title(title)

    def list_transactions(self) -> List[Transaction]:
        return self.transactions.all()

    def list_users(self) -> List[User]:
        return self.users.all()

    def add_book(self, title: str, author: str) -> Book:
        book = new_book(title, author)
        self.books.create(book)
        return book

    def register_user(self, name: str, email: str) -> User:
        user = new_user(name, email)
        self.users.create(user)
        return user

    def borrow_book(self, book_id: str, user_id: str) -> Transaction:
        """Lend a book out and record the transaction dated today."""
        self.books.borrow(book_id)
        borrow_date = date.today().strftime("%Y-%m-%d")
        transaction = new_transaction(book_id, user_id, borrow_date, "")
        self.transactions.create(transaction)
        return transaction

    def return_book(self, transaction_id: str) -> Transaction:
        return self.transactions.return_book(transaction_id)