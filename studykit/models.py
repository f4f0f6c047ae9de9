"""Small value types: rectangles, students and employees."""

from __future__ import annotations

import json
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Rectangle:
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("rectangle dimensions must be positive")

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return 2 * (self.width + self.height)

    def details(self) -> str:
        return f"Rectangle Details - Width: {self.width:.2f} & Height: {self.height:.2f}"


@dataclass
class Student:
    student_id: int
    name: str
    age: int
    _enrolled: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.student_id <= 0 or self.name == "" or self.age < 0:
            raise ValueError("invalid student data")

    @property
    def enrolled(self) -> bool:
        return self._enrolled

    def display_info(self) -> str:
        return "\n".join(
            [
                f"Student ID: {self.student_id}",
                f"Name: {self.name}",
                f"Age: {self.age}",
                f"Enrolled: {'true' if self._enrolled else 'false'}",
            ]
        )

    def enroll(self) -> bool:
        """Enroll the student; return True if they were not enrolled before."""
        newly = not self._enrolled
        self._enrolled = True
        return newly

    def clear(self) -> None:
        self.student_id = 0
        self.name = ""
        self.age = 0
        self._enrolled = False

    def to_json(self) -> str:
        """Serialise the public fields; enrolment status is not included."""
        return json.dumps(
            {
                "student_identifier_number": self.student_id,
                "name": self.name,
                "age": self.age,
            },
            separators=(",", ":"),
        )


@dataclass
class Employee:
    id: int
    full_name: str
    position: str
    salary: float

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Name: {self.full_name}, "
            f"Position: {self.position}, Salary: {self.salary:.2f}"
        )