"""Animals that speak, eat, play and run, and helpers that describe values."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Protocol, runtime_checkable

_MIN_NAME = 2
_MAX_NAME = 30


@runtime_checkable
class _Speaker(Protocol):
    def speak(self) -> str: ...


@runtime_checkable
class _Actions(Protocol):
    def play(self) -> str: ...

    def run(self) -> str: ...


class Animal(ABC):
    """A named animal; the name is trimmed and must be 2 to 30 bytes long."""

    kind: ClassVar[str] = "animal"

    def __init__(self, name: str) -> None:
        name = name.strip()
        size = len(name.encode("utf-8"))
        if size == 0:
            raise ValueError(f"{self.kind} name cannot be empty")
        if size < _MIN_NAME:
            raise ValueError(f"{self.kind} name must be at least 2 characters long")
        if size > _MAX_NAME:
            raise ValueError(f"{self.kind} name cannot exceed 30 characters")
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name))

    @abstractmethod
    def speak(self) -> str:
        """What the animal says."""

    @abstractmethod
    def eat(self) -> str:
        """What the animal eats."""

    @abstractmethod
    def play(self) -> str:
        """How the animal plays."""

    @abstractmethod
    def run(self) -> str:
        """How the animal runs."""


class Cat(Animal):
    kind = "cat"

    def speak(self) -> str:
        return "Meow! I'm " + self.name

    def eat(self) -> str:
        return self.name + " is eating cat food."

    def play(self) -> str:
        return self.name + " is playing with a ball of yarn!"

    def run(self) -> str:
        return self.name + " is running swiftly!"


class Dog(Animal):
    kind = "dog"

    def speak(self) -> str:
        return "Woof! I'm " + self.name

    def eat(self) -> str:
        return self.name + " is eating dog food."

    def extra(self) -> str:
        return self.name + " loves to play fetch!"

    def play(self) -> str:
        return self.name + " is playing happily!"

    def run(self) -> str:
        return self.name + " is running fast!"

    def __str__(self) -> str:
        return (
            "Name: " + self.name
            + "\n Speak: " + self.speak()
            + "\n Eat: " + self.eat()
            + "\n Extra: " + self.extra()
            + "\n Play: " + self.play()
            + "\n Run: " + self.run()
        )


class Mouse(Animal):
    kind = "mouse"

    def speak(self) -> str:
        return "Squeak! I'm " + self.name

    def eat(self) -> str:
        return self.name + " is eating cheese."

    def play(self) -> str:
        return self.name + " is playing with a tiny ball!"

    def run(self) -> str:
        return self.name + " is running around quickly!"


def describe_value(value: object) -> str:
    """Describe a string, integer or boolean; anything else is unknown."""
    if isinstance(value, str):
        return f"String value: {value}"
    if isinstance(value, bool):
        return f"Boolean value: {'true' if value else 'false'}"
    if isinstance(value, int):
        return f"Integer value: {value}"
    return "Unknown type"


def describe_string(value: object) -> str:
    """Describe the value only if it is a string."""
    if not isinstance(value, str):
        return "Not a string value"
    return f"String value: {value}"