"""Infix to postfix conversion for bitexpr token sequences."""

import logging
from typing import List, Sequence

from bitexpr.bitexpr_error import BitExprBracketError
from bitexpr.bitexpr_token import BitExprAssociativity, BitExprToken, BitExprTokenType


class BitExprConverter:
    """Converts infix token sequences to postfix (Reverse Polish) order using the shunting-yard algorithm."""

    def __init__(self) -> None:
        """Initialize the converter."""
        self._logger = logging.getLogger("BitExprConverter")

    @staticmethod
    def _should_pop(o1: BitExprToken, o2: BitExprToken) -> bool:
        """Decide whether stacked operator o2 must be output before pushing o1."""
        if not o2.is_operator:
            return False

        if o1.associativity == BitExprAssociativity.LEFT_TO_RIGHT:
            return o1.precedence <= o2.precedence

        if o1.associativity == BitExprAssociativity.RIGHT_TO_LEFT:
            return o1.precedence < o2.precedence

        return False

    def to_postfix(self, tokens: Sequence[BitExprToken]) -> List[BitExprToken]:
        """
        Convert a token sequence to postfix order.

        Args:
            tokens: Tokens in infix order, as produced by the tokenizer

        Returns:
            Tokens in postfix order; contains only data and operator tokens

        Raises:
            BitExprBracketError: If a closing bracket has no matching opener, or an opener is
                never closed
        """
        output: List[BitExprToken] = []
        stack: List[BitExprToken] = []

        for token in tokens:
            if token.kind == BitExprTokenType.DATA:
                output.append(token)
                continue

            if token.kind == BitExprTokenType.OPEN_BRACKET:
                stack.append(token)
                continue

            if token.kind == BitExprTokenType.CLOSE_BRACKET:
                while True:
                    if not stack:
                        raise BitExprBracketError(
                            message="Unmatched closing bracket",
                            position=token.position,
                            received="')' with no open '(' before it",
                            suggestion="Remove the extra ')' or add a matching '('"
                        )

                    top = stack.pop()
                    if top.kind == BitExprTokenType.OPEN_BRACKET:
                        break

                    output.append(top)

                continue

            while stack and self._should_pop(token, stack[-1]):
                output.append(stack.pop())

            stack.append(token)

        while stack:
            top = stack.pop()
            if top.kind in (BitExprTokenType.OPEN_BRACKET, BitExprTokenType.CLOSE_BRACKET):
                raise BitExprBracketError(
                    message="Unmatched opening bracket",
                    position=top.position,
                    received="'(' that is never closed",
                    suggestion="Add a matching ')'"
                )

            output.append(top)

        self._logger.debug("Postfix: %s", " ".join(t.text for t in output))
        return output
