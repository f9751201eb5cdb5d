"""
Minimal result chain for sequential provisioning steps.

Each step returns ``Ok(value)`` or ``Err(error)``; ``and_then`` only calls the next step on success, so the first
failure short-circuits everything after it::

    build_policy().and_then(create_role).and_then(attach_first).and_then(attach_second)
"""
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def and_then(self, func: Callable[[T], "Result[U]"]) -> "Result[U]":
        return func(self.value)

    def map(self, func: Callable[[T], U]) -> "Result[U]":
        return Ok(func(self.value))

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: Exception

    @property
    def ok(self) -> bool:
        return False

    def and_then(self, func: Callable) -> "Err":
        return self

    def map(self, func: Callable) -> "Err":
        return self

    def unwrap(self):
        """Raise the carried error"""
        raise self.error


Result = Union[Ok[T], Err]
