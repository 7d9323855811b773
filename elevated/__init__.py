"""
Elevated - applicative and monadic composition over a Result container.

This package shows how ordinary functions are lifted into a context that
may represent failure:
- ``Success``/``Failure`` container with structural pattern matching
- ``pure``, ``map``, ``apply`` and ``flat_map`` combinators
- ``curry`` for partial application inside apply chains
- ``@`` as the infix apply operator
"""

__version__ = "0.1.0"
__description__ = "Applicative and monadic composition over a Result container"

from .fp import (
    Failure,
    Result,
    Success,
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

__all__ = [
    "Failure",
    "Result",
    "Success",
    "__version__",
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
