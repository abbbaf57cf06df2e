"""Operator implementations for the bitexpr evaluator over a fixed-width unsigned word."""

from typing import Callable, Dict

from bitexpr.bitexpr_error import BitExprDivideByZeroError, BitExprNumeralError
from bitexpr.bitexpr_token import BitExprToken, BitExprTokenType


class BitExprOperators:
    """
    Unsigned wraparound arithmetic for a given word width.

    Every result is reduced modulo 2**width, so add, subtract, multiply, negate and complement
    all wrap rather than overflow.
    """

    SUPPORTED_WIDTHS = (8, 16, 32, 64)

    # Whitespace allowed around a numeral, as an unsigned integer parse accepts it
    NUMERAL_PADDING = " \t\n\v\f\r"

    @classmethod
    def check_width(cls, width: int) -> None:
        """Raise ValueError unless width is one of SUPPORTED_WIDTHS."""
        if width not in cls.SUPPORTED_WIDTHS:
            raise ValueError(f"Unsupported word width {width}, expected one of {cls.SUPPORTED_WIDTHS}")

    def __init__(self, width: int = 32) -> None:
        """
        Initialize operators for a word width.

        Args:
            width: Word width in bits

        Raises:
            ValueError: If the width is not one of SUPPORTED_WIDTHS
        """
        self.check_width(width)

        self.width = width
        self.mask = (1 << width) - 1

        self._unary: Dict[BitExprTokenType, Callable[[int], int]] = {
            BitExprTokenType.UNARY_NEGATE: lambda a: -a & self.mask,
            BitExprTokenType.BIT_NOT: lambda a: ~a & self.mask,
        }

        # MUL_HIGH yields the low word, same as MUL
        self._binary: Dict[BitExprTokenType, Callable[[int, int], int]] = {
            BitExprTokenType.MUL: lambda a, b: (a * b) & self.mask,
            BitExprTokenType.MUL_HIGH: lambda a, b: (a * b) & self.mask,
            BitExprTokenType.DIV: lambda a, b: a // b,
            BitExprTokenType.MOD: lambda a, b: a % b,
            BitExprTokenType.ADD: lambda a, b: (a + b) & self.mask,
            BitExprTokenType.SUB: lambda a, b: (a - b) & self.mask,
            BitExprTokenType.SHIFT_LEFT: lambda a, b: (a << (b % self.width)) & self.mask,
            BitExprTokenType.SHIFT_RIGHT: lambda a, b: a >> (b % self.width),
            BitExprTokenType.BIT_AND: lambda a, b: a & b,
            BitExprTokenType.BIT_XOR: lambda a, b: a ^ b,
            BitExprTokenType.BIT_OR: lambda a, b: a | b,
        }

    def parse_numeral(self, token: BitExprToken) -> int:
        """
        Parse a data token as an unsigned base-10 integer.

        Args:
            token: Data token to parse

        Returns:
            The numeral's value

        Raises:
            BitExprNumeralError: If the text, less surrounding whitespace, is not all ASCII digits or
                does not fit the word
        """
        text = token.text.strip(self.NUMERAL_PADDING)

        # str.isdigit() alone would accept superscripts and other non-ASCII digits
        if not text or not text.isascii() or not text.isdigit():
            raise BitExprNumeralError(
                message=f"Invalid numeral: {token.text!r}",
                position=token.position,
                received=token.text,
                expected="Unsigned decimal integer such as 0, 42 or 65535"
            )

        value = int(text)
        if value > self.mask:
            raise BitExprNumeralError(
                message=f"Numeral {text} does not fit in {self.width} bits",
                position=token.position,
                received=text,
                expected=f"Value no greater than {self.mask}"
            )

        return value

    def apply_unary(self, token: BitExprToken, operand: int) -> int:
        """Apply a unary operator to its operand."""
        return self._unary[token.kind](operand)

    def apply_binary(self, token: BitExprToken, op1: int, op2: int) -> int:
        """
        Apply a binary operator as op1 <op> op2.

        Raises:
            BitExprDivideByZeroError: If dividing or taking a modulus by zero
        """
        if token.kind in (BitExprTokenType.DIV, BitExprTokenType.MOD) and op2 == 0:
            raise BitExprDivideByZeroError(
                message="Division by zero" if token.kind == BitExprTokenType.DIV else "Modulo by zero",
                position=token.position,
                received=f"{op1} {token.text} 0"
            )

        return self._binary[token.kind](op1, op2)
