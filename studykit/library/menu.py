"""Text menu for the library and the command that starts it."""

from __future__ import annotations

import sys
from typing import Callable, Dict, Iterable, Optional, TextIO

from .entities import Book
from .prompts import Prompter
from .repository import (
    BookRepository,
    RepositoryError,
    TransactionRepository,
    UserRepository,
)
from .service import LibraryService

_MENU_LINES = (
    "===== Library Management =====",
    "1. Add book",
    "2. Register user",
    "3. Borrow book",
    "4. Return book",
    "5. List books",
    "6. Search books by title",
    "7. List users",
    "8. List transactions",
    "0. Exit",
)


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


class Menu:
    """Runs the library menu until the user chooses to exit."""

    def __init__(
        self,
        service: LibraryService,
        prompter: Optional[Prompter] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self.service = service
        self._output = output if output is not None else sys.stdout
        self.prompter = prompter if prompter is not None else Prompter(output=self._output)
        self._actions: Dict[str, Callable[[], None]] = {
            "1": self._add_book,
            "2": self._register_user,
            "3": self._borrow_book,
            "4": self._return_book,
            "5": self._list_books,
            "6": self._search_books_by_title,
            "7": self._list_users,
            "8": self._list_transactions,
        }

    def _say(self, text: str = "") -> None:
        print(text, file=self._output)

    def show(self) -> None:
        while True:
            for line in _MENU_LINES:
                self._say(line)
            choice = self.prompter.read("Choose an option: ")
            if choice == "0":
                self._say("Goodbye!")
                return
            action = self._actions.get(choice)
            if action is None:
                self._say("Invalid option")
            else:
                try:
                    action()
                except RepositoryError as exc:
                    self._say(f"Error: {exc}")
            self._say()

    def _add_book(self) -> None:
        title = self.prompter.book_title("Book title: ")
        author = self.prompter.book_author("Book author: ")
        self.service.add_book(title, author)
        self._say("Book added successfully")

    def _register_user(self) -> None:
        name = self.prompter.user_name("User name: ")
        email = self.prompter.user_email("User email: ")
        self.service.register_user(name, email)
        self._say("User registered successfully")

    def _borrow_book(self) -> None:
        book_id = self.prompter.book_id("Book ID: ")
        user_id = self.prompter.user_id("User ID: ")
        self.service.borrow_book(book_id, user_id)
        self._say("Book borrowed successfully")

    def _return_book(self) -> None:
        transaction_id = self.prompter.book_id("Transaction ID: ")
        self.service.return_book(transaction_id)
        self._say("Book returned successfully")

    def _print_books(self, books: Iterable[Book]) -> None:
        books = list(books)
        if not books:
            self._say("No books found")
            return
        for book in books:
            self._say(
                f"ID: {book.id} | Title: {book.title} | Author: {book.author} "
                f"| Available: {_bool_text(book.is_available)}"
            )

    def _list_books(self) -> None:
        self._print_books(self.service.list_books())

    def _search_books_by_title(self) -> None:
        title = self.prompter.book_title("Title to search: ")
        self._print_books(self.service.search_books_by_title(title))

    def _list_users(self) -> None:
        users = self.service.list_users()
        if not users:
            self._say("No users found")
            return
        for user in users:
            self._say(f"ID: {user.id} | Name: {user.name} | Email: {user.email}")

    def _list_transactions(self) -> None:
        transactions = self.service.list_transactions()
        if not transactions:
            self._say("No transactions found")
            return
        for t in transactions:
            self._say(
                f"ID: {t.id} | BookID: {t.book_id} | UserID: {t.user_id} "
                f"| BorrowDate: {t.borrow_date} | ReturnDate: {t.return_date}"
            )


def main(argv: Optional[list] = None) -> int:
    """Start the library menu on standard input and output."""
    service = LibraryService(BookRepository(), UserRepository(), TransactionRepository())
    try:
        Menu(service).show()
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())