"""
Demonstration of lifting ``add`` into the Result context.

``add`` knows nothing about failure, yet the three scenarios below combine
two numbers that each may be missing:

1. nested ``apply`` calls on a curried ``add``
2. the same chain written with the ``@`` operator
3. ``apply2`` with the uncurried ``add``

Run with ``python -m elevated.demo``; inputs come from ``ELEVATED_*``
environment variables (see ``elevated.config``).
"""

import logging
from collections.abc import Callable

from elevated.config import DemoSettings, build_settings_from_env
from elevated.fp.core import apply, apply2, curry, pure
from elevated.fp.types.result import Failure, Result, Success
from elevated.types.exceptions import ExampleError
from elevated.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

type NumberResult = Result[int, ExampleError]


def get_number(number: int, fail: bool) -> NumberResult:
    """Stand-in for a remote lookup that may fail."""
    return Failure(ExampleError()) if fail else Success(number)


def add(lhs: int, rhs: int) -> int:
    return lhs + rhs


def add_curried(lhs: int) -> Callable[[int], int]:
    """``add`` written curried by hand, ready for ``pure(add_curried) @ ...``."""

    def add_rhs(rhs: int) -> int:
        return lhs + rhs

    return add_rhs


def add_with_nested_apply(one: NumberResult, two: NumberResult) -> NumberResult:
    return apply(apply(pure(curry(add)), one), two)


def add_with_operator(one: NumberResult, two: NumberResult) -> NumberResult:
    return pure(add_curried) @ one @ two


def add_with_apply2(one: NumberResult, two: NumberResult) -> NumberResult:
    return apply2(pure(add), one, two)


SCENARIOS: dict[str, Callable[[NumberResult, NumberResult], NumberResult]] = {
    "nested apply": add_with_nested_apply,
    "operator": add_with_operator,
    "apply2": add_with_apply2,
}


def describe(result: NumberResult, one: NumberResult, two: NumberResult) -> str:
    """Render a scenario outcome for display."""
    match result:
        case Success(value):
            return f"The result is {value}"
        case Failure():
            return f"Failed to add {one} and {two}"
    raise TypeError(f"Expected a Result, got {type(result).__name__}")


def run_demo(settings: DemoSettings) -> list[NumberResult]:
    """Run every scenario against the configured inputs."""
    one = get_number(settings.first_number, fail=settings.fail_first)
    two = get_number(settings.second_number, fail=settings.fail_second)

    results = []
    for name, scenario in SCENARIOS.items():
        result = scenario(one, two)
        logger.info("[%s] %s", name, describe(result, one, two))
        if isinstance(result, Failure):
            logger.debug("[%s] cause: %s", name, result.error.get_error_context())
        results.append(result)
    return results


def main() -> int:
    settings = build_settings_from_env()
    match settings:
        case Failure(error):
            logging.basicConfig(level=logging.ERROR)
            logger.error("Invalid configuration: %s", error.message)
            return 1
        case Success(loaded):
            setup_logging(loaded)
            run_demo(loaded)
            return 0
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
