"""bitexpr: unsigned integer arithmetic and bitwise expression evaluator."""

# Main API
from bitexpr.bitexpr import BitExpr, parse, evaluate
from bitexpr.bitexpr_parser import BitExprParser

# Exceptions (for diagnostics)
from bitexpr.bitexpr_error import (
    BitExprError, BitExprBracketError, BitExprOperandError, BitExprDivideByZeroError,
    BitExprNumeralError, BitExprEmptyError
)

# Lower-level components (for advanced usage)
from bitexpr.bitexpr_token import BitExprToken, BitExprTokenType, BitExprAssociativity
from bitexpr.bitexpr_tokenizer import BitExprTokenizer
from bitexpr.bitexpr_converter import BitExprConverter
from bitexpr.bitexpr_evaluator import BitExprEvaluator
from bitexpr.bitexpr_operators import BitExprOperators


__all__ = [
    # Main API
    "BitExpr", "BitExprParser", "parse", "evaluate",

    # Exceptions
    "BitExprError", "BitExprBracketError", "BitExprOperandError", "BitExprDivideByZeroError",
    "BitExprNumeralError", "BitExprEmptyError",

    # Lower-level components
    "BitExprToken", "BitExprTokenType", "BitExprAssociativity", "BitExprTokenizer", "BitExprConverter",
    "BitExprEvaluator", "BitExprOperators"
]
