"""Parser handle: an expression tokenized and converted to postfix, ready to evaluate."""

import logging
from typing import Optional, Tuple

from bitexpr.bitexpr_converter import BitExprConverter
from bitexpr.bitexpr_error import BitExprBracketError, BitExprError
from bitexpr.bitexpr_evaluator import BitExprEvaluator
from bitexpr.bitexpr_tokenizer import BitExprTokenizer


class BitExprParser:
    """
    Holds one expression after bracket repair, tokenizing and postfix conversion.

    Construction never fails.  If conversion fails because of a bracket mismatch the postfix
    sequence is left empty and the error is kept in `conversion_error`; the failure is reported
    when the expression is calculated.
    """

    def __init__(self, expression: str, width: int = 32) -> None:
        """
        Parse an expression.

        Args:
            expression: Expression text
            width: Word width in bits used when calculating

        Raises:
            ValueError: If the width is not supported
        """
        self._logger = logging.getLogger("BitExprParser")
        self._evaluator = BitExprEvaluator(width)

        self.expression = expression
        self.repaired_expression = BitExprTokenizer.repair_brackets(expression)
        self.tokens = tuple(BitExprTokenizer().tokenize(self.repaired_expression))
        self.conversion_error: Optional[BitExprBracketError] = None

        try:
            self.postfix = tuple(BitExprConverter().to_postfix(self.tokens))

        except BitExprBracketError as e:
            self._logger.debug("Conversion of %r failed: %s", expression, e.message)
            self.conversion_error = e
            self.postfix = ()

    @property
    def width(self) -> int:
        return self._evaluator.width

    def calculate_or_raise(self) -> int:
        """
        Evaluate the expression, raising on failure.

        Returns:
            The unsigned result

        Raises:
            BitExprError: The specific failure, including any bracket mismatch found while parsing
        """
        if self.conversion_error is not None:
            raise self.conversion_error

        return self._evaluator.evaluate(self.postfix)

    def calculate(self) -> Tuple[bool, int]:
        """
        Evaluate the expression.

        Returns:
            (True, value) on success, or (False, 0) if the expression is invalid
        """
        try:
            return True, self.calculate_or_raise()

        except BitExprError as e:
            self._logger.debug("Invalid expression %r: %s", self.expression, e.message)
            return False, 0

    def __repr__(self) -> str:
        return f"BitExprParser({self.expression!r}, width={self.width})"
