"""Property-based tests for the Result combinators.

Hypothesis generates containers of both variants to check the functor,
applicative and monad laws.
"""
