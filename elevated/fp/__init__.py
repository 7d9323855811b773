"""
Functional programming layer: the Result container and its combinators.
"""

from .core import (
    apply,
    apply2,
    apply_all,
    apply_curried,
    concat,
    curry,
    flat_map,
    flat_map_curried,
    map_curried,
    map_result,
    pure,
    uncurry,
)
from .types import Failure, Result, Success

__all__ = [
    "Failure",
    "Result",
    "Success",
    "apply",
    "apply2",
    "apply_all",
    "apply_curried",
    "concat",
    "curry",
    "flat_map",
    "flat_map_curried",
    "map_curried",
    "map_result",
    "pure",
    "uncurry",
]
