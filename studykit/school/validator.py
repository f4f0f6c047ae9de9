"""Checks for values typed into the school menu."""

from __future__ import annotations

VALID_DEPARTMENTS = frozenset({"Xavalo", "Hola", "Fuda", "Hovilo"})
VALID_ID_PREFIXES = frozenset({"SE", "SS", "SA"})


class FieldError(ValueError):
    """Raised when a typed-in value is not acceptable."""


def validate_id(id: str) -> str:
    if id[:2] not in VALID_ID_PREFIXES:
        raise FieldError("ID must start with SE, SS, or SA")
    if len(id) < 5:
        raise FieldError("ID must be at least 5 characters long")
    return id


def validate_name(name: str) -> str:
    if not name:
        raise FieldError("Name cannot be empty")
    return name


def validate_gpa(text: str) -> str:
    """Accept text shaped like X.XX."""
    if len(text) != 4 or text[1] != ".":
        raise FieldError("GPA must be in format X.XX")
    return text


def validate_salary(text: str) -> str:
    if not text:
        raise FieldError("Salary cannot be empty")
    return text


def validate_department(department: str) -> str:
    if not department:
        raise FieldError("Department cannot be empty")
    if department not in VALID_DEPARTMENTS:
        raise FieldError("Invalid department")
    return department


def validate_age(age: int) -> int:
    if age < 18 or age > 65:
        raise FieldError("Age must be between 18 and 65")
    return age