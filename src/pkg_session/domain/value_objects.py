# src/pkg_session/domain/value_objects.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


# --- Result ---------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """
    Successful outcome of an operation.

    The carried value may itself be falsy (`False`, `None`); only `Err`
    signals a failure.
    """
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> Result[U]:
        return Ok(fn(self.value))


@dataclass(frozen=True, slots=True)
class Err:
    """
    Failed outcome of an operation, carrying the exception that describes it.
    """
    error: Exception

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        raise self.error

    def unwrap_or(self, default):
        return default

    def map(self, fn: Callable) -> Err:
        return self


Result = Union[Ok[T], Err]
