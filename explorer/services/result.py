"""Two-variant outcome type returned by node calls and decoders.

``Ok`` carries a payload, ``Err`` carries a message meant for the user.
Failures travel as return values; callers branch with ``match``.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))

    def and_then(self, fn: "Callable[[T], Result[U]]") -> "Result[U]":
        return fn(self.value)

    def value_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    message: str

    @property
    def is_ok(self) -> bool:
        return False

    def map(self, fn: Callable[[object], object]) -> "Err":
        return self

    def and_then(self, fn: Callable[[object], object]) -> "Err":
        return self

    def value_or(self, default: T) -> T:
        return default


Result = Union[Ok[T], Err]
