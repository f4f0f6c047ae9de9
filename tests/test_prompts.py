import io

import pytest

from studykit.library.prompts import Prompter
from studykit.library.validation import ValidationError

VALID_ID = "123e4567-e89b-12d3-a456-426614174000"


def make(answers):
    out = io.StringIO()
    return Prompter(iter(answers).__next__, out), out


def test_read_strips_and_writes_prompt():
    prompter, out = make(["  hello  "])
    assert prompter.read("Say: ") == "hello"
    assert out.getvalue() == "Say: "


def test_book_title_reprompts_on_empty():
    prompter, out = make(["   ", "Dune"])
    assert prompter.book_title("Book title: ") == "Dune"
    assert "Error: Book title cannot be empty" in out.getvalue()
    assert out.getvalue().count("Book title: ") == 3


def test_book_author_and_user_name():
    prompter, out = make(["", "Herbert", "", "Alice"])
    assert prompter.book_author("Author: ") == "Herbert"
    assert prompter.user_name("Name: ") == "Alice"
    assert "Error: Book author cannot be empty" in out.getvalue()
    assert "Error: User name cannot be empty" in out.getvalue()


def test_user_email_rejects_invalid():
    prompter, out = make(["not-an-email", "alice@example.com"])
    assert prompter.user_email("Email: ") == "alice@example.com"
    assert "Error: Email is invalid" in out.getvalue()


def test_book_and_user_id_require_uuid():
    prompter, out = make(["abc", VALID_ID, "", VALID_ID])
    assert prompter.book_id("Book ID: ") == VALID_ID
    assert prompter.user_id("User ID: ") == VALID_ID
    text = out.getvalue()
    assert "Error: ID must be a valid UUID" in text
    assert "Error: ID cannot be empty" in text


def test_borrow_date_requires_format():
    prompter, out = make(["2024/01/02", "2024-01-02"])
    assert prompter.borrow_date("Date: ") == "2024-01-02"
    assert "Error: Date must be in format YYYY-MM-DD" in out.getvalue()


def test_return_date_accepts_empty():
    prompter, out = make([""])
    assert prompter.return_date("Return: ") == ""
    assert "Error" not in out.getvalue()


def test_ask_with_custom_validator():
    def only_yes(value):
        if value != "yes":
            raise ValidationError("say yes")

    prompter, out = make(["no", "yes"])
    assert prompter.ask("? ", only_yes) == "yes"
    assert "Error: say yes" in out.getvalue()


def test_end_of_input_propagates():
    def closed():
        raise EOFError

    prompter = Prompter(closed, io.StringIO())
    with pytest.raises(EOFError):
        prompter.book_title("Book title: ")