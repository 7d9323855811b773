"""Result container for computations that may fail.

A ``Result`` is exactly one of two frozen variants:

- ``Success(value)`` holds the payload of a computation that succeeded
- ``Failure(error)`` holds the cause of a computation that failed

Both variants support structural pattern matching, so callers inspect them
exhaustively with ``match``::

    match result:
        case Success(value):
            ...
        case Failure(error):
            ...

The ``@`` operator is the infix form of ``apply``: ``pure(f) @ a @ b``
applies a curried function to two wrapped arguments left to right.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


# Functor laws:
# 1. Identity: r.map(lambda x: x) == r
# 2. Composition: r.map(f).map(g) == r.map(lambda x: g(f(x)))
#
# Monad laws:
# 1. Left Identity: Success(a).flat_map(f) == f(a)
# 2. Right Identity: m.flat_map(Success) == m
# 3. Associativity: m.flat_map(f).flat_map(g) == m.flat_map(lambda x: f(x).flat_map(g))


@dataclass(frozen=True)
class Success(Generic[T, E]):
    """Successful result containing a value."""

    value: T

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply function to the contained value."""
        return Success(f(self.value))

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Apply function that returns a Result."""
        return f(self.value)

    def unwrap(self) -> T:
        """Extract the value."""
        return self.value

    def is_success(self) -> bool:
        """Check if this is a Success variant."""
        return True

    def is_failure(self) -> bool:
        """Check if this is a Failure variant."""
        return False

    def __matmul__(self, other: Any) -> Result[Any, E]:
        if not isinstance(other, (Success, Failure)):
            return NotImplemented

        from elevated.fp.core.combinators import apply

        return apply(self, other)

    def __str__(self) -> str:
        return f"Success({self.value})"

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class Failure(Generic[T, E]):
    """Failed result containing an error."""

    error: E

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """No-op for Failure."""
        return Failure(self.error)

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """No-op for Failure."""
        return Failure(self.error)

    def unwrap(self) -> T:
        """Raise an exception with the error."""
        raise ValueError(f"Called unwrap on Failure: {self.error}")

    def is_success(self) -> bool:
        """Check if this is a Success variant."""
        return False

    def is_failure(self) -> bool:
        """Check if this is a Failure variant."""
        return True

    def __matmul__(self, other: Any) -> Result[Any, E]:
        if not isinstance(other, (Success, Failure)):
            return NotImplemented
        # The function side failed, the argument is never inspected
        return Failure(self.error)

    def __str__(self) -> str:
        return f"Failure({self.error})"

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


# Type alias for Result
Result = Union[Success[T, E], Failure[T, E]]


__all__ = ["Failure", "Result", "Success"]
