"""Unit tests for currying helpers."""

from elevated.fp.core.functions import curry, uncurry


class TestCurry:
    """Test curry and uncurry."""

    def test_curry_equivalence(self):
        def power(base, exponent):
            return base**exponent

        assert curry(power)(2)(10) == power(2, 10)

    def test_curry_captures_first_argument_first(self):
        """Test arguments keep their positions."""
        pair = curry(lambda first, second: (first, second))
        assert pair("a")("b") == ("a", "b")

    def test_curry_defers_call_until_second_argument(self):
        calls = []
        curried = curry(lambda a, b: calls.append((a, b)))
        partial = curried(1)
        assert calls == []
        partial(2)
        assert calls == [(1, 2)]

    def test_partial_application_is_reusable(self):
        add_ten = curry(lambda a, b: a + b)(10)
        assert [add_ten(n) for n in range(3)] == [10, 11, 12]

    def test_uncurry_inverts_curry(self):
        def concat(a, b):
            return a + b

        assert uncurry(curry(concat))("x", "y") == concat("x", "y")
