"""School records: people, students and lecturers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    id: str = ""
    first_name: str = ""
    last_name: str = ""
    age: int = 0

    @property
    def full_name(self) -> str:
        """First and last name joined by a single space."""
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Student(Person):
    grade: int = 0
    gpa: float = 0.0


@dataclass(frozen=True)
class Lecturer(Person):
    department: str = ""
    salary: float = 0.0