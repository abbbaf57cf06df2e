"""Postfix evaluator for bitexpr expressions."""

import logging
from typing import List, Sequence

from bitexpr.bitexpr_error import BitExprBracketError, BitExprEmptyError, BitExprOperandError
from bitexpr.bitexpr_operators import BitExprOperators
from bitexpr.bitexpr_token import BitExprToken, BitExprTokenType


class BitExprEvaluator:
    """Evaluates postfix token sequences on an operand stack of unsigned integers."""

    def __init__(self, width: int = 32) -> None:
        """
        Initialize the evaluator.

        Args:
            width: Word width in bits for all arithmetic

        Raises:
            ValueError: If the width is not supported
        """
        self.operators = BitExprOperators(width)
        self._logger = logging.getLogger("BitExprEvaluator")

    @property
    def width(self) -> int:
        return self.operators.width

    def evaluate(self, postfix: Sequence[BitExprToken]) -> int:
        """
        Evaluate a postfix token sequence.

        Args:
            postfix: Data and operator tokens in postfix order

        Returns:
            The value left on top of the operand stack

        Raises:
            BitExprEmptyError: If there is nothing to evaluate or no result is left
            BitExprOperandError: If an operator has too few operands
            BitExprBracketError: If a bracket token is present
            BitExprNumeralError: If a numeral cannot be parsed
            BitExprDivideByZeroError: If dividing or taking a modulus by zero
        """
        if not postfix:
            raise BitExprEmptyError(
                message="Empty expression",
                expected="At least one numeral",
                suggestion="Provide an expression such as 1+2"
            )

        stack: List[int] = []

        for token in postfix:
            if token.kind == BitExprTokenType.DATA:
                stack.append(self.operators.parse_numeral(token))
                continue

            if not token.is_operator:
                # Brackets never appear in converter output
                raise BitExprBracketError(
                    message=f"Unexpected bracket {token.text!r} in postfix sequence",
                    position=token.position
                )

            required = 1 if token.is_unary else 2
            if len(stack) < required:
                raise BitExprOperandError(
                    message=f"Operator '{token.text}' needs {required} operand{'s' if required > 1 else ''}",
                    position=token.position,
                    received=f"{len(stack)} available"
                )

            if token.is_unary:
                stack.append(self.operators.apply_unary(token, stack.pop()))
                continue

            op2 = stack.pop()
            op1 = stack.pop()
            stack.append(self.operators.apply_binary(token, op1, op2))

        if not stack:
            raise BitExprEmptyError(message="Evaluation produced no result")

        if len(stack) > 1:
            self._logger.debug("%d unused operands left on the stack, using the top one", len(stack) - 1)

        return stack[-1]
