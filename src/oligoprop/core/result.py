"""
Result type for callers that prefer values over exceptions.

The property engine raises typed exceptions (see ``oligoprop.core.errors``).
Front ends that collect outcomes instead of unwinding (the CLI, config
loading) wrap those calls in a Result, similar to Rust's Result<T, E>.

Usage:
    >>> result = calculate_properties_result("ACGTACGTAC")
    >>> if result.is_ok():
    ...     props = result.unwrap()
    >>> else:
    ...     error = result.unwrap_err()

    >>> match result:
    ...     case Ok(props):
    ...         print(props.gc)
    ...     case Err(error):
    ...         print(f"Error: {error}")
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TypeVar, Generic, Callable, Union, Any

from oligoprop.core.errors import OligoPropError

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Transformed type


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome holding a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_err(self) -> Any:
        raise ValueError("Called unwrap_err on Ok value")

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def and_then(self, fn: Callable[[T], Result[U, Any]]) -> Result[U, Any]:
        return fn(self.value)

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome holding an error (a message or an exception instance)."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Re-raise an exception error, otherwise raise ValueError."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, fn: Callable[[Any], Any]) -> Err[E]:
        return self

    def and_then(self, fn: Callable[[Any], Any]) -> Err[E]:
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T], Err[E]]


def try_oligoprop(fn: Callable[..., T], *args, **kwargs) -> Result[T, OligoPropError]:
    """
    Call ``fn`` and capture property-engine failures as ``Err``.

    Only ``OligoPropError`` subclasses are captured; anything else is a bug
    and propagates to the caller.

    Returns:
        Ok(return value) on success, Err(exception) on a validation failure
    """
    try:
        return Ok(fn(*args, **kwargs))
    except OligoPropError as e:
        return Err(e)
