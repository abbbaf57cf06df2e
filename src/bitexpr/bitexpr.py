"""Main bitexpr class: evaluates unsigned integer arithmetic and bitwise expressions."""

from typing import Tuple

from bitexpr.bitexpr_operators import BitExprOperators
from bitexpr.bitexpr_parser import BitExprParser


class BitExpr:
    """
    Unsigned integer expression calculator.

    Supports decimal numerals, brackets, unary '-' and '~', and the binary operators
    '*' '`' '/' '%' '+' '-' '<' '>' '&' '^' '|'.  All arithmetic wraps at the configured
    word width.
    """

    def __init__(self, width: int = 32):
        """
        Initialize the calculator.

        Args:
            width: Word width in bits (8, 16, 32 or 64)

        Raises:
            ValueError: If the width is not supported
        """
        BitExprOperators.check_width(width)

        self.width = width

    def parse(self, expression: str) -> BitExprParser:
        """
        Parse an expression into a handle that can be evaluated.

        Args:
            expression: Expression text

        Returns:
            Parser handle; parsing itself never fails
        """
        return BitExprParser(expression, self.width)

    def evaluate(self, handle: BitExprParser) -> Tuple[bool, int]:
        """
        Evaluate a parsed expression.

        Args:
            handle: Handle returned by parse()

        Returns:
            (True, value) on success, or (False, 0) if the expression is invalid
        """
        return handle.calculate()

    def calculate(self, expression: str) -> int:
        """
        Parse and evaluate an expression in one step.

        Args:
            expression: Expression text

        Returns:
            The unsigned result

        Raises:
            BitExprError: If the expression is invalid, with the specific reason
        """
        return self.parse(expression).calculate_or_raise()


_default = BitExpr()


def parse(expression: str) -> BitExprParser:
    """Parse an expression using a 32-bit engine."""
    return _default.parse(expression)


def evaluate(handle: BitExprParser) -> Tuple[bool, int]:
    """Evaluate a parsed expression."""
    return _default.evaluate(handle)
