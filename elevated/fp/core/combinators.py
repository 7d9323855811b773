"""
Applicative and monadic combinators over the Result container.

These functions let ordinary functions work inside the Result context
without unwrapping containers by hand. Every combinator short-circuits on
failure: a user-supplied function is never invoked on a failed container.

When several inputs fail at once the first failure in argument order wins,
so the function side of ``apply`` is always checked before its argument.
"""

from collections.abc import Callable, Iterable
from functools import reduce
from typing import Any, TypeVar

from elevated.fp.types.result import Failure, Result, Success

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


def pure(value: T) -> Result[T, E]:
    """Lift a plain value into the Result context."""
    return Success(value)


def apply(
    transform: Result[Callable[[T], U], E], result: Result[T, E]
) -> Result[U, E]:
    """Apply a wrapped function to a wrapped value.

    Args:
        transform: Result holding a one-argument function
        result: Result holding the argument

    Returns:
        Success with the function applied, or the first Failure found
        checking ``transform`` before ``result``
    """
    match transform:
        case Success(function):
            match result:
                case Success(value):
                    return Success(function(value))
                case Failure(error):
                    return Failure(error)
        case Failure(error):
            return Failure(error)
    raise TypeError("apply expects Result arguments")


def apply_curried(
    transform: Result[Callable[[T], U], E],
) -> Callable[[Result[T, E]], Result[U, E]]:
    """Curried form of ``apply``."""

    def applied(result: Result[T, E]) -> Result[U, E]:
        return apply(transform, result)

    return applied


def apply2(
    transform: Result[Callable[[A, B], C], E],
    lhs: Result[A, E],
    rhs: Result[B, E],
) -> Result[C, E]:
    """Apply a wrapped two-argument function to two wrapped values.

    Avoids currying the function first. Inputs are checked in the order
    transform, lhs, rhs and the first Failure encountered is returned.
    """
    match transform:
        case Failure(error):
            return Failure(error)
        case Success(function):
            match lhs:
                case Failure(error):
                    return Failure(error)
                case Success(lhs_value):
                    match rhs:
                        case Failure(error):
                            return Failure(error)
                        case Success(rhs_value):
                            return Success(function(lhs_value, rhs_value))
    raise TypeError("apply2 expects Result arguments")


def apply_all(
    transform: Result[Callable[..., Any], E], results: Iterable[Result[Any, E]]
) -> Result[Any, E]:
    """Apply a wrapped curried function to each result in turn.

    ``apply_all(pure(f), [a, b])`` is equivalent to ``pure(f) @ a @ b``.
    """
    return reduce(apply, results, transform)


def map_result(transform: Callable[[T], U], result: Result[T, E]) -> Result[U, E]:
    """Map a function over the success value, preserving failures."""
    return apply(pure(transform), result)


def map_curried(transform: Callable[[T], U]) -> Callable[[Result[T, E]], Result[U, E]]:
    """Curried form of ``map_result``."""

    def mapped(result: Result[T, E]) -> Result[U, E]:
        return apply_curried(pure(transform))(result)

    return mapped


def concat(result: Result[Result[T, E], E]) -> Result[T, E]:
    """Flatten one level of Result nesting."""
    match result:
        case Success(inner):
            return inner
        case Failure(error):
            return Failure(error)
    raise TypeError("concat expects a Result argument")


def flat_map(
    transform: Callable[[T], Result[U, E]], result: Result[T, E]
) -> Result[U, E]:
    """Chain a Result-producing function, flattening the outcome."""
    return concat(map_result(transform, result))


def flat_map_curried(
    transform: Callable[[T], Result[U, E]],
) -> Callable[[Result[T, E]], Result[U, E]]:
    """Curried form of ``flat_map``."""

    def bound(result: Result[T, E]) -> Result[U, E]:
        return concat(map_curried(transform)(result))

    return bound


__all__ = [
    "apply",
    "apply2",
    "apply_all",
    "apply_curried",
    "concat",
    "flat_map",
    "flat_map_curried",
    "map_curried",
    "map_result",
    "pure",
]
