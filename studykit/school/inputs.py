"""Prompts for the school menu that keep asking until the answer is valid."""

from __future__ import annotations

import re
import sys
from typing import Callable, Optional, TextIO, TypeVar

from .validator import (
    FieldError,
    validate_age,
    validate_department,
    validate_gpa,
    validate_id,
    validate_name,
    validate_salary,
)

_INT_RE = re.compile(r"[ \t]*([+-]?\d+)")
_FLOAT_RE = re.compile(r"[ \t]*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")

V = TypeVar("V")


def parse_int(text: str) -> int:
    """Read a decimal integer from the start of the text; trailing text is ignored."""
    match = _INT_RE.match(text)
    if match is None:
        raise ValueError(f"expected integer, got {text!r}")
    return int(match.group(1))


def parse_float(text: str) -> float:
    """Read a decimal number from the start of the text; trailing text is ignored."""
    match = _FLOAT_RE.match(text)
    if match is None:
        raise ValueError(f"expected number, got {text!r}")
    return float(match.group(1))


class Prompter:
    """Reads answers from a line source and writes prompts to a stream."""

    def __init__(
        self,
        input_func: Optional[Callable[[], str]] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self._input = input_func if input_func is not None else input
        self._output = output if output is not None else sys.stdout

    def _error(self, message: object) -> None:
        print(f"Error: {message}", file=self._output)

    def read(self, prompt: str) -> str:
        """Show the prompt and return the answer without surrounding whitespace."""
        print(prompt, end="", file=self._output, flush=True)
        return self._input().strip()

    def _ask(self, prompt: str, validator: Callable[[str], object]) -> str:
        while True:
            answer = self.read(prompt)
            try:
                validator(answer)
            except FieldError as exc:
                self._error(exc)
                continue
            return answer

    def name(self, prompt: str) -> str:
        return self._ask(prompt, validate_name)

    def id(self, prompt: str) -> str:
        return self._ask(prompt, validate_id)

    def gpa(self, prompt: str) -> str:
        """Return the GPA text once it is shaped like X.XX."""
        return self._ask(prompt, validate_gpa)

    def salary(self, prompt: str) -> float:
        """Return the salary; text that is not a number counts as zero."""
        text = self._ask(prompt, validate_salary)
        try:
            return parse_float(text)
        except ValueError:
            return 0.0

    def department(self, prompt: str) -> str:
        return self._ask(prompt, validate_department)

    def age(self, prompt: str) -> int:
        while True:
            try:
                age = parse_int(self.read(prompt))
            except ValueError:
                self._error("Age must be a valid number")
                continue
            try:
                return validate_age(age)
            except FieldError as exc:
                self._error(exc)

    def grade(self, prompt: str) -> int:
        """Return a school grade from 1 to 12."""
        while True:
            try:
                grade = parse_int(self.read(prompt))
            except ValueError:
                grade = 0
            if 1 <= grade <= 12:
                return grade
            self._error("Grade must be from 1 to 12")