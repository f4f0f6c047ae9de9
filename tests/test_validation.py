import uuid

import pytest

from studykit.library.validation import (
    ValidationError,
    validate_book_author,
    validate_book_title,
    validate_borrow_date,
    validate_date,
    validate_email,
    validate_required,
    validate_return_date,
    validate_transaction_book_id,
    validate_transaction_user_id,
    validate_user_email,
    validate_user_name,
    validate_uuid,
)


def test_required_passes_value_through():
    assert validate_required("Field", "hello") == "hello"


@pytest.mark.parametrize("value", ["", "   ", "\t\n"])
def test_required_rejects_blank(value):
    with pytest.raises(ValidationError) as info:
        validate_required("Field", value)
    assert str(info.value) == "Field cannot be empty"


def test_uuid_accepts_generated():
    value = str(uuid.uuid4())
    assert validate_uuid(value) == value


@pytest.mark.parametrize(
    "value",
    [
        "{" + str(uuid.UUID(int=7)) + "}",
        "urn:uuid:" + str(uuid.UUID(int=7)),
        uuid.UUID(int=7).hex,
        str(uuid.UUID(int=7)).upper(),
    ],
)
def test_uuid_accepts_other_forms(value):
    assert validate_uuid(value) == value


@pytest.mark.parametrize("value", ["not-a-uuid", "1234", str(uuid.uuid4())[:-1] + "g"])
def test_uuid_rejects_garbage(value):
    with pytest.raises(ValidationError) as info:
        validate_uuid(value)
    assert str(info.value) == "ID must be a valid UUID"


def test_uuid_rejects_empty_with_required_message():
    with pytest.raises(ValidationError) as info:
        validate_uuid("")
    assert str(info.value) == "ID cannot be empty"


@pytest.mark.parametrize("value", ["alice@example.com", "Alice <alice@example.com>"])
def test_email_accepts(value):
    assert validate_email(value) == value


@pytest.mark.parametrize("value", ["plainaddress", "@example.com", "alice@"])
def test_email_rejects(value):
    with pytest.raises(ValidationError) as info:
        validate_email(value)
    assert str(info.value) == "Email is invalid"


def test_email_empty():
    with pytest.raises(ValidationError) as info:
        validate_email(" ")
    assert str(info.value) == "Email cannot be empty"


def test_date_accepts_valid():
    assert validate_date("2024-02-29") == "2024-02-29"


@pytest.mark.parametrize("value", ["2024-1-5", "2023-02-29", "05/01/2024", "2024-13-01"])
def test_date_rejects(value):
    with pytest.raises(ValidationError) as info:
        validate_date(value)
    assert str(info.value) == "Date must be in format YYYY-MM-DD"


def test_field_specific_messages():
    with pytest.raises(ValidationError, match="^Book title cannot be empty$"):
        validate_book_title("")
    with pytest.raises(ValidationError, match="^Book author cannot be empty$"):
        validate_book_author("")
    with pytest.raises(ValidationError, match="^User name cannot be empty$"):
        validate_user_name("")


def test_delegating_validators_pass_values():
    value = str(uuid.uuid4())
    assert validate_transaction_book_id(value) == value
    assert validate_transaction_user_id(value) == value
    assert validate_user_email("bob@example.com") == "bob@example.com"
    assert validate_borrow_date("2024-05-01") == "2024-05-01"


def test_delegating_validators_raise():
    with pytest.raises(ValidationError):
        validate_transaction_book_id("x")
    with pytest.raises(ValidationError):
        validate_transaction_user_id("x")
    with pytest.raises(ValidationError):
        validate_user_email("x")
    with pytest.raises(ValidationError):
        validate_borrow_date("")


def test_return_date_may_be_empty():
    assert validate_return_date("") == ""
    assert validate_return_date("2024-05-01") == "2024-05-01"
    with pytest.raises(ValidationError):
        validate_return_date("tomorrow")