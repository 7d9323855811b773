"""
Functional Programming Core Components

This module provides the combinators for working inside the Result
container and the currying helpers used to lift multi-argument functions.
"""

from .combinators import (
    apply,
    apply2,
    apply_all,
    apply_curried,
    concat,
    flat_map,
    flat_map_curried,
    map_curried,
    map_result,
    pure,
)
from .functions import curry, uncurry

__all__ = [
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
