"""Exception classes for bitexpr expression evaluation with detailed context."""

from typing import Optional


class BitExprError(Exception):
    """Base exception for bitexpr errors, carrying where the failure happened and what was found."""

    def __init__(
        self,
        message: str,
        expected: Optional[str] = None,
        received: Optional[str] = None,
        suggestion: Optional[str] = None,
        position: Optional[int] = None
    ):
        """
        Initialize detailed error.

        Args:
            message: Core error description
            expected: What was expected
            received: What was actually received
            suggestion: Suggestion for fixing the error
            position: Character position where error occurred
        """
        self.message = message
        self.expected = expected
        self.received = received
        self.suggestion = suggestion
        self.position = position

        super().__init__(self._format_detailed_message())

    def _format_detailed_message(self) -> str:
        """Format the error message with all available details."""
        parts = [f"Error: {self.message}"]

        if self.position is not None:
            parts.append(f"Position: {self.position}")

        if self.received:
            parts.append(f"Received: {self.received}")

        if self.expected:
            parts.append(f"Expected: {self.expected}")

        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")

        return "\n".join(parts)


class BitExprBracketError(BitExprError):
    """Unmatched opening or closing bracket found while converting to postfix."""


class BitExprOperandError(BitExprError):
    """An operator was evaluated with fewer operands than it requires."""


class BitExprDivideByZeroError(BitExprError):
    """Division or modulo with a zero right-hand operand."""


class BitExprNumeralError(BitExprError):
    """A numeral does not parse as an unsigned base-10 integer of the word width."""


class BitExprEmptyError(BitExprError):
    """Nothing to evaluate, or evaluation left no result."""
