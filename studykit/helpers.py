"""Small functions and types: arithmetic, recursion, generics, loops and choices."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, List, Tuple, TypeVar

T = TypeVar("T")
N = TypeVar("N", int, float)

_SKIPPED = frozenset({6, 48, 75, 89})
_DAYS = {1: "Monday", 2: "Tuesday", 3: "Wednesday", 4: "Thursday", 5: "Friday"}


@dataclass
class Box(Generic[T]):
    """Holds a content and a description of the same type."""

    content: T
    description: T


@dataclass(frozen=True)
class GenericRectangle(Generic[N]):
    """A rectangle whose sides are numbers of one kind."""

    width: N
    height: N

    def __post_init__(self) -> None:
        for side in (self.width, self.height):
            if isinstance(side, bool) or not isinstance(side, numbers.Real):
                raise TypeError("rectangle sides must be numbers")

    def area(self) -> N:
        return self.width * self.height

    def perimeter(self) -> N:
        return 2 * (self.width + self.height)


def adder() -> Callable[[int], int]:
    """Return a function that adds its argument to a running total and returns it."""
    total = 0

    def add(x: int) -> int:
        nonlocal total
        total += x
        return total

    return add


def swap(a: Any, b: Any) -> Tuple[Any, Any]:
    return b, a


def countdown(n: int) -> Iterator[str]:
    """Yield n down to 1, then the finishing line."""
    for value in range(n, 0, -1):
        yield str(value)
    yield "Countdown finished!"


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number; zero for n <= 0."""
    if n <= 0:
        return 0
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def sum_1_to_n(n: int) -> int:
    """Sum of 1..n; zero for n <= 0."""
    if n <= 0:
        return 0
    return n * (n + 1) // 2


def math_operation(a: int, b: int, op: str) -> float:
    """Apply +, -, * or /; division by zero and unknown operators give 0."""
    if op == "+":
        return float(a + b)
    if op == "-":
        return float(a - b)
    if op == "*":
        return float(a * b)
    if op == "/" and b != 0:
        return a / b
    return 0.0


def format_operation(a: int, b: int, op: str) -> str:
    """Describe the operation and its result; empty for division by zero."""
    if op in ("+", "-", "*"):
        return f"{a} {op} {b} = {int(math_operation(a, b, op))}"
    if op == "/":
        return f"{a} / {b} = {a / b:f}" if b != 0 else ""
    return "Invalid operation"


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def leap_year_message(year: int) -> str:
    if is_leap_year(year):
        return f"{year} is a leap year."
    return f"{year} is not a leap year."


def larger(a: Any, b: Any) -> Any:
    """The greater of two values; b when they are equal."""
    return a if a > b else b


def longest(*args: str) -> str:
    """The first of the longest strings (by encoded length); empty when none given."""
    if not args:
        return ""
    best = args[0]
    for text in args[1:]:
        if len(text.encode("utf-8")) > len(best.encode("utf-8")):
            best = text
    return best


def day_name(day: int) -> str:
    if day in _DAYS:
        return _DAYS[day]
    if day in (6, 7):
        return "Weekend"
    return "Invalid day number!"


def grade_letter(grade: float) -> str:
    """Letter for a grade out of ten; grades in [7, 8) fall through to F."""
    if 9 <= grade <= 10:
        return "A"
    if 8 <= grade < 9:
        return "B"
    if 6 <= grade < 7:
        return "C"
    if 5 <= grade < 6:
        return "D"
    return "F"


def access_message(age: int) -> str:
    if age >= 18:
        return "Access granted - you are old enough."
    return "Access denied - you are not old enough."


def numbers_excluding() -> List[int]:
    """The numbers 0 to 100 without 6, 48, 75 and 89."""
    return [i for i in range(101) if i not in _SKIPPED]


def multiples_of_three_lines() -> List[str]:
    """Multiples of three from 0 to 100, three to a line."""
    multiples = [str(i) for i in range(0, 101, 3)]
    return [", ".join(multiples[start:start + 3]) for start in range(0, len(multiples), 3)]


def multiplication_table(number: int) -> List[str]:
    """Lines "n x i = product" for i from 1 to 10."""
    return [f"{number} x {i} = {number * i}" for i in range(1, 11)]