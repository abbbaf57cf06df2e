"""Token types and token representation for bitexpr expressions."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict


class BitExprTokenType(Enum):
    """Token types for bitexpr expressions."""
    DATA = auto()
    OPEN_BRACKET = auto()
    CLOSE_BRACKET = auto()
    UNARY_NEGATE = auto()
    BIT_NOT = auto()
    MUL = auto()
    MUL_HIGH = auto()
    DIV = auto()
    MOD = auto()
    ADD = auto()
    SUB = auto()
    SHIFT_LEFT = auto()
    SHIFT_RIGHT = auto()
    BIT_AND = auto()
    BIT_XOR = auto()
    BIT_OR = auto()


class BitExprAssociativity(Enum):
    """Grouping direction for operators of equal precedence."""
    LEFT_TO_RIGHT = auto()
    RIGHT_TO_LEFT = auto()
    UNSPECIFIED = auto()


# Higher binds tighter.  Anything not listed (data and brackets) has precedence 0.
_PRECEDENCE: Dict[BitExprTokenType, int] = {
    BitExprTokenType.UNARY_NEGATE: 7,
    BitExprTokenType.BIT_NOT: 7,
    BitExprTokenType.MUL: 6,
    BitExprTokenType.MUL_HIGH: 6,
    BitExprTokenType.DIV: 6,
    BitExprTokenType.MOD: 6,
    BitExprTokenType.ADD: 5,
    BitExprTokenType.SUB: 5,
    BitExprTokenType.SHIFT_LEFT: 4,
    BitExprTokenType.SHIFT_RIGHT: 4,
    BitExprTokenType.BIT_AND: 3,
    BitExprTokenType.BIT_XOR: 2,
    BitExprTokenType.BIT_OR: 1,
}

UNARY_OPERATORS = frozenset({BitExprTokenType.UNARY_NEGATE, BitExprTokenType.BIT_NOT})

_NON_OPERATORS = frozenset({
    BitExprTokenType.DATA,
    BitExprTokenType.OPEN_BRACKET,
    BitExprTokenType.CLOSE_BRACKET,
})


def token_is_operator(kind: BitExprTokenType) -> bool:
    """Return True for every kind except data and brackets."""
    return kind not in _NON_OPERATORS


def token_precedence(kind: BitExprTokenType) -> int:
    """Return the precedence rank of a token kind."""
    return _PRECEDENCE.get(kind, 0)


def token_associativity(kind: BitExprTokenType) -> BitExprAssociativity:
    """Return the associativity of a token kind."""
    if kind in UNARY_OPERATORS:
        return BitExprAssociativity.RIGHT_TO_LEFT

    if token_is_operator(kind):
        return BitExprAssociativity.LEFT_TO_RIGHT

    return BitExprAssociativity.UNSPECIFIED


@dataclass(frozen=True)
class BitExprToken:
    """
    Represents a single token in a bitexpr expression.

    Attributes:
        text: The literal text of the token (operator symbol or numeral)
        kind: The token type
        position: Offset of the token's first character in the tokenized text
    """
    text: str
    kind: BitExprTokenType
    position: int = 0

    @property
    def is_operator(self) -> bool:
        return token_is_operator(self.kind)

    @property
    def is_unary(self) -> bool:
        return self.kind in UNARY_OPERATORS

    @property
    def precedence(self) -> int:
        return token_precedence(self.kind)

    @property
    def associativity(self) -> BitExprAssociativity:
        return token_associativity(self.kind)

    def __repr__(self) -> str:
        return f"BitExprToken({self.kind.name}, {self.text!r}, pos={self.position})"
