"""Checks for values typed in by library users."""

from __future__ import annotations

import re
from datetime import datetime
from email.utils import parseaddr


class ValidationError(ValueError):
    """Raised when a value does not pass a check."""


_CANONICAL = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
_UUID_RE = re.compile(
    rf"(?:urn:uuid:)?{_CANONICAL}|\{{{_CANONICAL}\}}|[0-9a-f]{{32}}",
    re.IGNORECASE,
)
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def validate_required(field_name: str, value: str) -> str:
    """Reject values that are empty or only whitespace."""
    if value.strip() == "":
        raise ValidationError(f"{field_name} cannot be empty")
    return value


def validate_uuid(id: str) -> str:
    validate_required("ID", id)
    if not _UUID_RE.fullmatch(id):
        raise ValidationError("ID must be a valid UUID")
    return id


def validate_email(email: str) -> str:
    validate_required("Email", email)
    _, address = parseaddr(email)
    local, at, domain = address.rpartition("@")
    if not at or not local or not domain or any(c.isspace() for c in address):
        raise ValidationError("Email is invalid")
    return email


def validate_date(date: str) -> str:
    validate_required("Date", date)
    try:
        if not _DATE_RE.fullmatch(date):
            raise ValueError(date)
        datetime.strptime(date, "%Y-%m-%d")
    except ValueError:
        raise ValidationError("Date must be in format YYYY-MM-DD") from None
    return date


def validate_book_title(title: str) -> str:
    return validate_required("Book title", title)


def validate_book_author(author: str) -> str:
    return validate_required("Book author", author)


def validate_user_name(name: str) -> str:
    return validate_required("User name", name)


def validate_user_email(email: str) -> str:
    return validate_email(email)


def validate_transaction_book_id(book_id: str) -> str:
    return validate_uuid(book_id)


def validate_transaction_user_id(user_id: str) -> str:
    return validate_uuid(user_id)


def validate_borrow_date(borrow_date: str) -> str:
    return validate_date(borrow_date)


def validate_return_date(return_date: str) -> str:
    """An empty return date is allowed; anything else must be a date."""
    if return_date.strip() == "":
        return return_date
    return validate_date(return_date)