"""
Entry points for converting and evaluating RPN expressions.
"""
import logging
import math
from typing import Optional

from .dsl import (
    Tokenizer, Parser, render_infix, evaluate,
    ExpressionArgumentError, LexicalError, StructuralError,
)

logger = logging.getLogger(__name__)


def build_tree(expression: Optional[str]):
    """
    Tokenize an expression and build its expression tree.

    A fresh token list and tree are created on every call.

    Args:
        expression: RPN text such as "3 4 +"

    Returns:
        Root node of the expression tree

    Raises:
        ExpressionArgumentError: expression is None, empty or whitespace-only
        LexicalError: a fragment is neither an operator nor a number
        StructuralError: the tokens do not form a single expression
    """
    if expression is None or not expression.strip():
        raise ExpressionArgumentError("An RPN expression is required")

    tokens = Tokenizer(expression).generate_tokens()
    return Parser(tokens).parse()


def is_valid_rpn(expression: Optional[str]) -> bool:
    """
    Check whether an expression is syntactically and structurally valid RPN.

    Nothing is evaluated, so "5 0 /" is valid even though evaluating it fails.

    Args:
        expression: RPN text, may be None

    Returns:
        True if the expression tokenizes and forms exactly one tree, False otherwise
    """
    try:
        build_tree(expression)
    except (ExpressionArgumentError, LexicalError, StructuralError) as e:
        logger.debug(f"Rejected RPN expression {expression!r}: {e}")
        return False
    return True


def convert_to_infix(expression: Optional[str]) -> str:
    """
    Convert an RPN expression to fully parenthesized infix notation.

    Examples:
    - "3 4 +" -> "(3 + 4)"
    - "3 4 + 2 *" -> "((3 + 4) * 2)"

    Raises:
        ExpressionArgumentError, LexicalError, StructuralError (see build_tree)
    """
    return render_infix(build_tree(expression))


def evaluate_rpn(expression: Optional[str]) -> float:
    """
    Evaluate an RPN expression.

    Raises:
        ExpressionArgumentError, LexicalError, StructuralError (see build_tree)
        DivisionByZeroError: a division has an exactly-zero right operand
    """
    return evaluate(build_tree(expression))


def format_result(value: float) -> str:
    """Whole numbers without decimals, everything else as the shortest round-trip form."""
    if math.isfinite(value) and value.is_integer():
        return f"{value:.0f}"
    return repr(value)
