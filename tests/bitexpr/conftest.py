"""Shared fixtures and utilities for bitexpr tests."""

from typing import List

import pytest

from bitexpr import BitExpr, BitExprConverter, BitExprEvaluator, BitExprTokenizer, BitExprTokenType


@pytest.fixture
def bitexpr():
    """Create a fresh 32-bit calculator for each test."""
    return BitExpr()


@pytest.fixture
def bitexpr_custom():
    """Factory for calculators with a custom word width."""
    def _create_bitexpr(width: int = 32) -> BitExpr:
        return BitExpr(width=width)
    return _create_bitexpr


@pytest.fixture
def tokenizer():
    """Create a tokenizer."""
    return BitExprTokenizer()


@pytest.fixture
def converter():
    """Create a shunting-yard converter."""
    return BitExprConverter()


@pytest.fixture
def evaluator():
    """Create a 32-bit postfix evaluator."""
    return BitExprEvaluator()


class BitExprTestHelpers:
    """Helper utilities for bitexpr testing."""

    @staticmethod
    def kinds(tokens) -> List[BitExprTokenType]:
        """Return the token kinds of a token sequence."""
        return [t.kind for t in tokens]

    @staticmethod
    def texts(tokens) -> List[str]:
        """Return the token texts of a token sequence."""
        return [t.text for t in tokens]

    @staticmethod
    def assert_evaluates_to(bitexpr: BitExpr, expression: str, expected: int) -> None:
        """Assert that an expression evaluates successfully to the expected value."""
        success, value = bitexpr.evaluate(bitexpr.parse(expression))
        assert success, f"Expected {expression!r} to evaluate, but it was invalid"
        assert value == expected, f"Expected {expression!r} -> {expected}, got {value}"

    @staticmethod
    def assert_invalid(bitexpr: BitExpr, expression: str) -> None:
        """Assert that an expression fails to evaluate."""
        success, value = bitexpr.evaluate(bitexpr.parse(expression))
        assert not success, f"Expected {expression!r} to be invalid, got {value}"
        assert value == 0


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return BitExprTestHelpers
