import io
from datetime import date

import pytest

from studykit.library.menu import Menu, main
from studykit.library.prompts import Prompter
from studykit.library.repository import (
    BookRepository,
    TransactionRepository,
    UserRepository,
)
from studykit.library.service import LibraryService


@pytest.fixture
def service():
    return LibraryService(BookRepository(), UserRepository(), TransactionRepository())


def run(service, answers):
    out = io.StringIO()
    prompter = Prompter(iter(answers).__next__, out)
    Menu(service, prompter, out).show()
    return out.getvalue()


def test_exit_prints_goodbye(service):
    text = run(service, ["0"])
    assert "===== Library Management =====" in text
    assert text.rstrip().endswith("Goodbye!")


def test_invalid_option(service):
    text = run(service, ["42", "0"])
    assert "Invalid option" in text


def test_add_and_list_books(service):
    text = run(service, ["5", "1", "Dune", "Frank Herbert", "5", "0"])
    assert "No books found" in text
    assert "Book added successfully" in text
    book = service.list_books()[0]
    assert f"ID: {book.id} | Title: Dune | Author: Frank Herbert | Available: true" in text


def test_register_and_list_users(service):
    text = run(service, ["7", "2", "Alice", "alice@example.com", "7", "0"])
    assert "No users found" in text
    assert "User registered successfully" in text
    user = service.list_users()[0]
    assert f"ID: {user.id} | Name: Alice | Email: alice@example.com" in text


def test_borrow_and_list_transactions(service):
    book = service.add_book("Dune", "Frank Herbert")
    user = service.register_user("Alice", "alice@example.com")
    text = run(service, ["8", "3", book.id, user.id, "8", "5", "0"])
    assert "No transactions found" in text
    assert "Book borrowed successfully" in text
    t = service.list_transactions()[0]
    today = date.today().strftime("%Y-%m-%d")
    assert (
        f"ID: {t.id} | BookID: {book.id} | UserID: {user.id} "
        f"| BorrowDate: {today} | ReturnDate: " in text
    )
    assert "Available: false" in text


def test_borrow_unavailable_reports_error(service):
    book = service.add_book("Dune", "Frank Herbert")
    user = service.register_user("Alice", "alice@example.com")
    service.borrow_book(book.id, user.id)
    text = run(service, ["3", book.id, user.id, "0"])
    assert "Error: book is not available" in text
    assert "Book borrowed successfully" not in text


def test_return_book(service):
    book = service.add_book("Dune", "Frank Herbert")
    user = service.register_user("Alice", "alice@example.com")
    transaction = service.borrow_book(book.id, user.id)
    text = run(service, ["4", transaction.id, "4", transaction.id, "0"])
    assert "Book returned successfully" in text
    assert "Error: book has already been returned" in text
    assert service.transactions.get(transaction.id).return_date != ""


def test_return_unknown_transaction(service):
    missing = "123e4567-e89b-12d3-a456-426614174000"
    text = run(service, ["4", missing, "0"])
    assert "Error: entity not found" in text


def test_search_books(service):
    service.add_book("Dune", "Frank Herbert")
    text = run(service, ["6", "Emma", "6", "Dune", "0"])
    assert text.count("No books found") == 1
    assert "Title: Dune | Author: Frank Herbert" in text


def test_main_exits_on_zero(monkeypatch, capsys):
    answers = iter(["0"])
    monkeypatch.setattr("builtins.input", lambda *args: next(answers))
    assert main([]) == 0
    assert "Goodbye!" in capsys.readouterr().out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    def closed(*args):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)
    assert main() == 0
    assert "Choose an option: " in capsys.readouterr().out