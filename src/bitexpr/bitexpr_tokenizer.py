"""Tokenizer for bitexpr expressions."""

import logging
from typing import Dict, List

from bitexpr.bitexpr_token import BitExprToken, BitExprTokenType


class BitExprTokenizer:
    """
    Tokenizes bitexpr expressions into a flat list of tokens.

    Every operator and bracket is a single character.  Any other character (other than a space,
    which is skipped) is accumulated into the current numeral, so the tokenizer itself never
    fails; malformed numerals are only detected at evaluation time.
    """

    # Single-character operators and brackets.  '+' and '-' are resolved separately because
    # they can be either unary or binary.
    OPERATOR_CHARS: Dict[str, BitExprTokenType] = {
        '(': BitExprTokenType.OPEN_BRACKET,
        ')': BitExprTokenType.CLOSE_BRACKET,
        '~': BitExprTokenType.BIT_NOT,
        '*': BitExprTokenType.MUL,
        '`': BitExprTokenType.MUL_HIGH,
        '/': BitExprTokenType.DIV,
        '%': BitExprTokenType.MOD,
        '<': BitExprTokenType.SHIFT_LEFT,
        '>': BitExprTokenType.SHIFT_RIGHT,
        '&': BitExprTokenType.BIT_AND,
        '^': BitExprTokenType.BIT_XOR,
        '|': BitExprTokenType.BIT_OR,
    }

    def __init__(self) -> None:
        """Initialize the tokenizer."""
        self._logger = logging.getLogger("BitExprTokenizer")

    @staticmethod
    def repair_brackets(expression: str) -> str:
        """
        Append any missing closing brackets to an expression.

        Only missing closers are added.  Missing openers and excess closers are left alone and
        are reported as a bracket mismatch during postfix conversion.

        Args:
            expression: Raw expression text

        Returns:
            The expression with enough ')' appended to balance the '(' count
        """
        missing = expression.count('(') - expression.count(')')
        if missing <= 0:
            return expression

        return expression + ')' * missing

    def tokenize(self, expression: str) -> List[BitExprToken]:
        """
        Tokenize an expression.

        Args:
            expression: The expression string to tokenize (bracket repair is not applied here)

        Returns:
            List of tokens in input order
        """
        tokens: List[BitExprToken] = []
        accumulator = ""
        accumulator_start = 0

        def flush() -> None:
            nonlocal accumulator
            if accumulator:
                tokens.append(BitExprToken(accumulator, BitExprTokenType.DATA, accumulator_start))
                accumulator = ""

        def is_unary_position() -> bool:
            # A sign straight after '(' is not unary here: brackets do not count as operators.
            if accumulator:
                return False

            if not tokens:
                return True

            return tokens[-1].is_operator

        for i, ch in enumerate(expression):
            # Spaces are dropped without ending the current numeral, so "1 2" reads as "12"
            if ch == ' ':
                continue

            if ch in self.OPERATOR_CHARS:
                flush()
                tokens.append(BitExprToken(ch, self.OPERATOR_CHARS[ch], i))
                continue

            if ch == '+':
                # Unary plus has no effect and produces no token
                if not is_unary_position():
                    flush()
                    tokens.append(BitExprToken(ch, BitExprTokenType.ADD, i))

                continue

            if ch == '-':
                kind = BitExprTokenType.UNARY_NEGATE if is_unary_position() else BitExprTokenType.SUB
                flush()
                tokens.append(BitExprToken(ch, kind, i))
                continue

            if not accumulator:
                accumulator_start = i

            accumulator += ch

        flush()

        self._logger.debug("Tokenized %r into %d tokens", expression, len(tokens))
        return tokens
