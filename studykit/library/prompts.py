"""Interactive prompts that keep asking until the answer is valid."""

from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from .validation import (
    ValidationError,
    validate_book_author,
    validate_book_title,
    validate_borrow_date,
    validate_return_date,
    validate_transaction_book_id,
    validate_transaction_user_id,
    validate_user_email,
    validate_user_name,
)


class Prompter:
    """Reads answers from a line source and writes prompts to a stream."""

    def __init__(
        self,
        input_func: Optional[Callable[[], str]] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self._input = input_func if input_func is not None else input
        self._output = output if output is not None else sys.stdout

    def read(self, prompt: str) -> str:
        """Show the prompt and return the next answer without surrounding whitespace."""
        print(prompt, end="", file=self._output, flush=True)
        return self._input().strip()

    def ask(self, prompt: str, validator: Callable[[str], object]) -> str:
        """Repeat the prompt until the validator accepts the answer."""
        while True:
            answer = self.read(prompt)
            try:
                validator(answer)
            except ValidationError as exc:
                print(f"Error: {exc}", file=self._output)
                continue
            return answer

    def book_title(self, prompt: str) -> str:
        return self.ask(prompt, validate_book_title)

    def book_author(self, prompt: str) -> str:
        return self.ask(prompt, validate_book_author)

    def user_name(self, prompt: str) -> str:
        return self.ask(prompt, validate_user_name)

    def user_email(self, prompt: str) -> str:
        return self.ask(prompt, validate_user_email)

    def book_id(self, prompt: str) -> str:
        return self.ask(prompt, validate_transaction_book_id)

    def user_id(self, prompt: str) -> str:
        return self.ask(prompt, validate_transaction_user_id)

    def borrow_date(self, prompt: str) -> str:
        return self.ask(prompt, validate_borrow_date)

    def return_date(self, prompt: str) -> str:
        return self.ask(prompt, validate_return_date)