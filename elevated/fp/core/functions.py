"""Function helpers for partial application inside apply chains."""

from collections.abc import Callable
from typing import TypeVar

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def curry(function: Callable[[A, B], C]) -> Callable[[A], Callable[[B], C]]:
    """Convert a two-argument function into a chain of one-argument functions.

    Example:
        >>> add = lambda lhs, rhs: lhs + rhs
        >>> curry(add)(1)(2)
        3
    """

    def take_first(first: A) -> Callable[[B], C]:
        def take_second(second: B) -> C:
            return function(first, second)

        return take_second

    return take_first


def uncurry(function: Callable[[A], Callable[[B], C]]) -> Callable[[A, B], C]:
    """Inverse of ``curry``."""

    def uncurried(first: A, second: B) -> C:
        return function(first)(second)

    return uncurried


__all__ = ["curry", "uncurry"]
